"""Dependency injection container for clean component wiring."""
from typing import Any, Dict, Optional

from src.domain.entities.device_config import DeviceConfiguration
from src.domain.entities.device_endpoint import DeviceEndpoint
from src.domain.entities.output_table import OutputTable
from src.domain.entities.timing_policy import TimingPolicy
from src.infrastructure.config.config_store import ConfigStore


class Container:
    """Simple dependency injection container.

    Owns the single DeviceConfiguration of the process and hands it out by
    reference, so no component reaches for configuration through globals.
    """

    def __init__(self):
        """Initialize container with empty service registry."""
        self._services: Dict[str, Any] = {}
        self._configs: Dict[str, Any] = {}
        self._store: Optional[ConfigStore] = None

    def register_config(self, config: DeviceConfiguration) -> None:
        """Register an already loaded configuration.

        Args:
            config: Validated device configuration
        """
        if not isinstance(config, DeviceConfiguration):
            raise TypeError(f"Expected DeviceConfiguration, got {type(config).__name__}")
        self._configs['device'] = config

    def register_store(self, store: ConfigStore) -> None:
        """Register a store to load the configuration from on first use.

        Replaces any registered configuration.

        Args:
            store: ConfigStore bound to a configuration source
        """
        self._store = store
        self._configs.pop('device', None)
        self._services.pop('config', None)

    def get_config_store(self) -> ConfigStore:
        """Get the registered configuration store."""
        if self._store is None:
            raise ValueError("Configuration store not registered")
        return self._store

    def get_config(self) -> DeviceConfiguration:
        """Get device configuration (singleton pattern)."""
        if 'device' in self._configs:
            return self._configs['device']
        if 'config' not in self._services:
            if self._store is None:
                raise ValueError("Configuration not registered")
            self._services['config'] = self._store.load_from_source()
        return self._services['config']

    def get_endpoint(self) -> DeviceEndpoint:
        return self.get_config().endpoint()

    def get_timing(self) -> TimingPolicy:
        return self.get_config().timing()

    def get_outputs(self) -> OutputTable:
        return self.get_config().outputs()

    def clear_services(self) -> None:
        """Clear service registry (useful for testing).

        Registered configurations survive; a store-loaded one is reloaded.
        """
        self._services.clear()
