"""Repository interfaces for configuration access.

This package defines abstract interfaces for reading raw configuration,
following the Repository pattern to decouple validation from the storage
format the record comes from.
"""

from .config_source import ConfigSource

__all__ = [
    'ConfigSource'
]
