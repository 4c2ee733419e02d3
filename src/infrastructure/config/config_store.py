"""Configuration store - validated loading of relay controller configuration."""
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from src.domain.entities.device_config import DeviceConfiguration
from src.domain.entities.device_endpoint import DeviceEndpoint
from src.domain.entities.output_table import OutputTable
from src.domain.entities.timing_policy import TimingPolicy
from src.domain.errors import ConfigError
from src.domain.repositories.config_source import ConfigSource
from src.infrastructure.config.raw_config import CANONICAL_FIELDS, FIELD_ALIASES, RawDeviceConfig

logger = logging.getLogger(__name__)

ROOT_FIELD = "<root>"


def _first_error(exc: ValidationError) -> ConfigError:
    """Translate a pydantic failure into a ConfigError for the first field."""
    errors = []
    for err in exc.errors():
        loc = err.get('loc') or (ROOT_FIELD,)
        field = FIELD_ALIASES.get(str(loc[0]), str(loc[0]))
        reason = err.get('msg', 'invalid value')
        if len(loc) > 1:
            reason = f"entry {loc[1]}: {reason}"
        errors.append((field, reason))

    def _rank(item):
        field = item[0]
        return CANONICAL_FIELDS.index(field) if field in CANONICAL_FIELDS else len(CANONICAL_FIELDS)

    field, reason = min(errors, key=_rank)
    return ConfigError(field, reason)


class ConfigStore:
    """Loader for relay controller configuration with validation.

    ``load`` is the single entry point that turns an untyped record into an
    immutable DeviceConfiguration. A store can also be bound to a
    ConfigSource so callers do not have to read files themselves.
    """

    def __init__(self, source: Optional[ConfigSource] = None):
        """Initialize configuration store.

        Args:
            source: Optional source the raw record is read from
        """
        self.source = source

    @classmethod
    def from_path(cls, config_path: Union[str, Path], section: Optional[str] = None) -> "ConfigStore":
        """Create a store bound to a configuration file.

        Files ending in ``.js`` are read as the legacy demo-page script,
        everything else as YAML (which also covers JSON).

        Args:
            config_path: Path to the configuration file
            section: Optional top-level YAML key holding the record
        """
        # Import here to keep the store importable without file sources
        from src.infrastructure.repositories.file_config_source import (
            LegacyJsConfigSource,
            YamlConfigSource,
        )

        path = Path(config_path)
        if path.suffix.lower() == '.js':
            return cls(LegacyJsConfigSource(path))
        return cls(YamlConfigSource(path, section=section))

    @staticmethod
    def load(raw: Mapping[str, Any]) -> DeviceConfiguration:
        """Validate a raw record and build the configuration.

        Args:
            raw: Mapping with address, port, path, networkTimeoutMs,
                pollIntervalMs and outputNames (aliases accepted)

        Returns:
            Immutable DeviceConfiguration

        Raises:
            ConfigError: On the first violation found; nothing partial is returned
        """
        if not isinstance(raw, Mapping):
            raise ConfigError(ROOT_FIELD, f"expected a mapping, got {type(raw).__name__}")

        try:
            record = RawDeviceConfig.model_validate(dict(raw))
        except ValidationError as e:
            raise _first_error(e) from e

        config = DeviceConfiguration(
            device_endpoint=DeviceEndpoint(
                address=record.address,
                port=record.port,
                path=record.path
            ),
            timing_policy=TimingPolicy(
                network_timeout_ms=record.network_timeout_ms,
                poll_interval_ms=record.poll_interval_ms
            ),
            output_table=OutputTable(labels=tuple(record.output_names))
        )

        timing = config.timing()
        if timing.allows_overlap:
            logger.warning(
                "pollIntervalMs (%d) is shorter than networkTimeoutMs (%d); polls may overlap",
                timing.poll_interval_ms, timing.network_timeout_ms
            )
        logger.debug(
            "Loaded configuration for %s with %d output channels",
            config.endpoint().url, config.outputs().channel_count
        )
        return config

    def load_from_source(self) -> DeviceConfiguration:
        """Read the raw record from the bound source and load it."""
        if self.source is None:
            raise ValueError("No configuration source bound to this store")
        return self.load(self.source.read_raw())

    def validate_source(self) -> bool:
        """Validate that the bound source loads cleanly."""
        try:
            self.load_from_source()
            return True
        except (ConfigError, OSError) as e:
            logger.info("Configuration from %s is invalid: %s", self.source, e)
            return False

    def get_config_schema(self) -> Dict[str, Any]:
        """Get JSON schema of the raw record for documentation."""
        return RawDeviceConfig.model_json_schema(by_alias=True)
