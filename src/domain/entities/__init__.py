"""Domain entities - Core configuration objects.

This package contains the immutable value objects that describe how a
client reaches and labels a relay controller:

- DeviceEndpoint: Address, port and request path of the device
- TimingPolicy: Network timeout and poll interval
- OutputTable: Labels of the output channels, index 0 reserved
- DeviceConfiguration: Aggregate of the three
"""

from .device_endpoint import DeviceEndpoint
from .timing_policy import TimingPolicy
from .output_table import OutputTable
from .device_config import DeviceConfiguration

__all__ = [
    'DeviceEndpoint',
    'TimingPolicy',
    'OutputTable',
    'DeviceConfiguration'
]
