"""In-memory configuration source."""
from typing import Any, Dict, Mapping

from src.domain.errors import ConfigError
from src.domain.repositories.config_source import ConfigSource
from src.infrastructure.repositories.legacy_script import SOURCE_FIELD


class MappingConfigSource(ConfigSource):
    """Raw record supplied directly, e.g. embedded in an application."""

    def __init__(self, mapping: Mapping[str, Any], description: str = "<memory>"):
        if not isinstance(mapping, Mapping):
            raise ConfigError(SOURCE_FIELD, f"expected a mapping, got {type(mapping).__name__}")
        # Copy so later changes to the caller's dict are not observed
        self._mapping = dict(mapping)
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    def read_raw(self) -> Dict[str, Any]:
        return dict(self._mapping)
