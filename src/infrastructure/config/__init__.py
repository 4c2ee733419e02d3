"""Infrastructure layer configuration management."""
from .config_store import ConfigStore
from .raw_config import RawDeviceConfig

__all__ = [
    'ConfigStore',
    'RawDeviceConfig'
]
