"""Infrastructure layer configuration source implementations.

This package contains concrete implementations of the ConfigSource
interface for specific storage formats, plus the reader and writer for
the demo page's legacy config script.
"""

from .file_config_source import YamlConfigSource, LegacyJsConfigSource
from .mapping_config_source import MappingConfigSource
from .legacy_script import parse_legacy_script, render_legacy_script

__all__ = [
    'YamlConfigSource',
    'LegacyJsConfigSource',
    'MappingConfigSource',
    'parse_legacy_script',
    'render_legacy_script'
]
