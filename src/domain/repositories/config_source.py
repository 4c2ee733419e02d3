"""Abstract configuration source - Repository pattern for raw records."""
from abc import ABC, abstractmethod
from typing import Any, Dict


class ConfigSource(ABC):
    """Abstract interface for reading a raw configuration record.

    A source only produces the untyped record; validation happens in
    ConfigStore. Different storage formats (YAML files, the legacy
    demo-page script, in-memory mappings) implement the same contract.
    """

    @abstractmethod
    def read_raw(self) -> Dict[str, Any]:
        """Read the raw configuration record.

        Returns:
            Mapping of field names to unvalidated values

        Raises:
            ConfigError: If the source exists but cannot be parsed
            FileNotFoundError: If a file-backed source is missing
        """
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short human-readable origin of the record, used in messages."""
        pass

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"{type(self).__name__}({self.description})"
