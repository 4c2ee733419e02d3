"""Test fixtures for unit testing."""
import pytest

from src.domain.entities.device_config import DeviceConfiguration
from src.domain.entities.device_endpoint import DeviceEndpoint
from src.domain.entities.output_table import OutputTable
from src.domain.entities.timing_policy import TimingPolicy

DEMO_OUTPUT_NAMES = [
    "", "Relay 1", "Relay 2", "Relay 3", "Relay 4", "TX", "REH", "Phone 1", "Phone 2"
]

DEMO_SCRIPT = """let myconfig = {
   ipaddr: "192.168.42.201",
   port: 2000,
   switchurl: "/gpiswitch/out",
   net_timeout: 500,
   poll_interval: 1000,
   output_names: [
      '', /* This entry is not used but must be present. */
      'Relay 1',
      'Relay 2',
      'Relay 3',
      'Relay 4',
      'TX',
      'REH',
      'Phone 1',
      'Phone 2'
   ]
}"""


@pytest.fixture
def demo_raw():
    """Raw record matching the demo page's settings."""
    return {
        "address": "192.168.42.201",
        "port": 2000,
        "path": "/gpiswitch/out",
        "networkTimeoutMs": 500,
        "pollIntervalMs": 1000,
        "outputNames": list(DEMO_OUTPUT_NAMES),
    }


@pytest.fixture
def demo_config():
    """Demo configuration built directly from entities."""
    return DeviceConfiguration(
        device_endpoint=DeviceEndpoint(address="192.168.42.201", port=2000, path="/gpiswitch/out"),
        timing_policy=TimingPolicy(network_timeout_ms=500, poll_interval_ms=1000),
        output_table=OutputTable(labels=tuple(DEMO_OUTPUT_NAMES))
    )


@pytest.fixture
def demo_script():
    """The demo page's config.js source."""
    return DEMO_SCRIPT


@pytest.fixture
def demo_yaml_file(tmp_path, demo_raw):
    """YAML file holding the demo record under a 'device' section."""
    import yaml

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump({"device": demo_raw}))
    return config_file
