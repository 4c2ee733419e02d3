"""File system configuration source implementations."""
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from src.domain.errors import ConfigError
from src.domain.repositories.config_source import ConfigSource
from src.infrastructure.repositories.legacy_script import SOURCE_FIELD, parse_legacy_script

logger = logging.getLogger(__name__)

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def _expand_env(obj: Any) -> Any:
    """Recursively expand ``${VAR}`` references in every string value."""
    if isinstance(obj, dict):
        return {k: _expand_env(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_env(v) for v in obj]
    if isinstance(obj, str):
        # Bare $NAME stays literal; unknown ${NAME} is left intact
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), m.group(0)), obj)
    return obj


class YamlConfigSource(ConfigSource):
    """YAML (or JSON) file holding the raw configuration record.

    The record is either the whole document or, when ``section`` is set,
    the mapping under that top-level key. Environment variables of the form
    ``${VAR}`` are expanded in string values, so a deployment can inject
    the device address without editing the file.
    """

    def __init__(self, config_path: Union[str, Path], section: Optional[str] = None):
        """Initialize the YAML configuration source.

        Args:
            config_path: Path to YAML configuration file
            section: Optional top-level key holding the record
        """
        self.config_path = Path(config_path)
        self.section = section

    @property
    def description(self) -> str:
        if self.section:
            return f"{self.config_path}[{self.section}]"
        return str(self.config_path)

    def read_raw(self) -> Dict[str, Any]:
        """Load the raw record with error handling."""
        logger.debug("Reading configuration from %s", self.description)
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ConfigError(SOURCE_FIELD, f"invalid YAML in {self.config_path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ConfigError(SOURCE_FIELD, f"{self.config_path} is not valid UTF-8: {e}") from e

        if self.section is not None:
            if not isinstance(data, dict) or self.section not in data:
                raise ConfigError(SOURCE_FIELD, f"section {self.section!r} not found in {self.config_path}")
            data = data[self.section]

        if not isinstance(data, dict):
            raise ConfigError(SOURCE_FIELD, f"expected a mapping in {self.description}, got {type(data).__name__}")
        return _expand_env(data)


class LegacyJsConfigSource(ConfigSource):
    """The browser demo page's ``config.js`` file."""

    def __init__(self, script_path: Union[str, Path]):
        """Initialize the legacy script source.

        Args:
            script_path: Path to the demo page's config.js
        """
        self.script_path = Path(script_path)

    @property
    def description(self) -> str:
        return str(self.script_path)

    def read_raw(self) -> Dict[str, Any]:
        """Parse the script's object literal into a raw record."""
        logger.debug("Reading legacy configuration script %s", self.script_path)
        try:
            text = self.script_path.read_text(encoding='utf-8')
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.script_path}")
        except UnicodeDecodeError as e:
            raise ConfigError(SOURCE_FIELD, f"{self.script_path} is not valid UTF-8: {e}") from e

        variable, record = parse_legacy_script(text)
        logger.debug("Parsed object literal assigned to %s", variable or "<none>")
        return record
