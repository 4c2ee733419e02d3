"""Tests for infrastructure configuration management."""
import logging

import pytest

from src.domain.entities.device_config import DeviceConfiguration
from src.domain.errors import ConfigError
from src.infrastructure.config import ConfigStore as ConfigStoreImport
from src.infrastructure.config.config_store import ConfigStore
from src.infrastructure.config.raw_config import RawDeviceConfig
from src.infrastructure.repositories.file_config_source import LegacyJsConfigSource, YamlConfigSource
from src.infrastructure.repositories.mapping_config_source import MappingConfigSource


class TestRawDeviceConfig:
    """Test cases for RawDeviceConfig."""

    def test_canonical_names(self, demo_raw):
        """Test validating a record with canonical field names."""
        record = RawDeviceConfig.model_validate(demo_raw)

        assert record.address == "192.168.42.201"
        assert record.network_timeout_ms == 500
        assert record.output_names[1] == "Relay 1"

    def test_legacy_names(self):
        """Test validating a record with the demo page's key names."""
        record = RawDeviceConfig.model_validate({
            "ipaddr": "10.0.0.2",
            "port": 2000,
            "switchurl": "/gpiswitch/out",
            "net_timeout": 500,
            "poll_interval": 1000,
            "output_names": ["", "A"],
        })

        assert record.address == "10.0.0.2"
        assert record.path == "/gpiswitch/out"
        assert record.poll_interval_ms == 1000

    def test_tuple_output_names_accepted(self, demo_raw):
        """Test that tuples count as ordered sequences."""
        demo_raw["outputNames"] = tuple(demo_raw["outputNames"])

        assert RawDeviceConfig.model_validate(demo_raw).output_names[8] == "Phone 2"


class TestConfigStoreLoad:
    """Test cases for ConfigStore.load."""

    def test_import_from_package(self):
        """Test the package-level export."""
        assert ConfigStoreImport is ConfigStore

    def test_demo_record(self, demo_raw):
        """Test loading the demo page's settings."""
        config = ConfigStore.load(demo_raw)

        assert isinstance(config, DeviceConfiguration)
        assert config.output_label(1) == "Relay 1"
        assert config.output_label(8) == "Phone 2"
        with pytest.raises(IndexError):
            config.output_label(9)
        with pytest.raises(IndexError):
            config.output_label(0)

    def test_accessors_return_supplied_values(self, demo_raw):
        """Test that every supplied value comes back unchanged."""
        config = ConfigStore.load(demo_raw)

        assert config.endpoint().address == demo_raw["address"]
        assert config.endpoint().port == demo_raw["port"]
        assert config.endpoint().path == demo_raw["path"]
        assert config.timing().network_timeout_ms == demo_raw["networkTimeoutMs"]
        assert config.timing().poll_interval_ms == demo_raw["pollIntervalMs"]
        assert config.outputs().to_list() == demo_raw["outputNames"]

    def test_to_dict_reloads_to_equal_config(self, demo_raw):
        """Test that a loaded config's record loads to an equal config."""
        config = ConfigStore.load(demo_raw)

        assert ConfigStore.load(config.to_dict()) == config

    def test_snake_case_names(self, demo_raw):
        """Test the snake_case spellings used in YAML files."""
        raw = {
            "address": demo_raw["address"],
            "port": demo_raw["port"],
            "path": demo_raw["path"],
            "network_timeout_ms": 500,
            "poll_interval_ms": 1000,
            "output_names": demo_raw["outputNames"],
        }

        assert ConfigStore.load(raw).timing().network_timeout_ms == 500

    def test_extra_keys_ignored(self, demo_raw):
        """Test that unknown keys do not fail validation."""
        demo_raw["comment"] = "bench unit"

        assert ConfigStore.load(demo_raw).endpoint().port == 2000

    def test_whitespace_values_are_non_empty(self, demo_raw):
        """Test that whitespace-only address and labels load unchanged."""
        demo_raw["address"] = " "
        demo_raw["outputNames"][3] = " "

        config = ConfigStore.load(demo_raw)

        assert config.endpoint().address == " "
        assert config.output_label(3) == " "

    def test_input_is_not_modified(self, demo_raw):
        """Test that load leaves the caller's record alone."""
        snapshot = {k: (list(v) if isinstance(v, list) else v) for k, v in demo_raw.items()}
        ConfigStore.load(demo_raw)

        assert demo_raw == snapshot

    @pytest.mark.parametrize("field,value", [
        ("address", ""),
        ("address", 192),
        ("port", 70000),
        ("port", 0),
        ("port", "2000"),
        ("port", True),
        ("port", 2000.0),
        ("path", ""),
        ("path", "gpiswitch/out"),
        ("path", None),
        ("networkTimeoutMs", 0),
        ("networkTimeoutMs", -500),
        ("networkTimeoutMs", 0.5),
        ("pollIntervalMs", 0),
        ("pollIntervalMs", "1000"),
        ("outputNames", [""]),
        ("outputNames", ["", "A", ""]),
        ("outputNames", ["", "A", 3]),
        ("outputNames", "Relay 1"),
        ("outputNames", {"", "A"}),
    ])
    def test_single_violation_names_field(self, demo_raw, field, value):
        """Test that each single violation is reported against its field."""
        demo_raw[field] = value

        with pytest.raises(ConfigError) as excinfo:
            ConfigStore.load(demo_raw)
        assert excinfo.value.field == field

    @pytest.mark.parametrize("field", [
        "address", "port", "path", "networkTimeoutMs", "pollIntervalMs", "outputNames"
    ])
    def test_missing_field(self, demo_raw, field):
        """Test that a missing field is reported against its name."""
        del demo_raw[field]

        with pytest.raises(ConfigError) as excinfo:
            ConfigStore.load(demo_raw)
        assert excinfo.value.field == field

    def test_port_out_of_range_example(self, demo_raw):
        """Test the port=70000 example."""
        demo_raw["port"] = 70000

        with pytest.raises(ConfigError) as excinfo:
            ConfigStore.load(demo_raw)
        assert excinfo.value.field == "port"

    def test_duplicate_label_example(self, demo_raw):
        """Test a duplicate label at indices 2 and 5."""
        demo_raw["outputNames"][5] = demo_raw["outputNames"][2]

        with pytest.raises(ConfigError) as excinfo:
            ConfigStore.load(demo_raw)
        assert excinfo.value.field == "outputNames"

    def test_legacy_key_error_uses_canonical_name(self):
        """Test that an error under an alias is reported canonically."""
        raw = {
            "ipaddr": "10.0.0.2",
            "port": 2000,
            "switchurl": "/x",
            "net_timeout": "fast",
            "poll_interval": 1000,
            "output_names": ["", "A"],
        }

        with pytest.raises(ConfigError) as excinfo:
            ConfigStore.load(raw)
        assert excinfo.value.field == "networkTimeoutMs"

    def test_first_field_reported_on_multiple_type_errors(self, demo_raw):
        """Test ordering when several fields have the wrong type."""
        demo_raw["outputNames"] = "nope"
        demo_raw["port"] = "nope"

        with pytest.raises(ConfigError) as excinfo:
            ConfigStore.load(demo_raw)
        assert excinfo.value.field == "port"

    @pytest.mark.parametrize("raw", [None, [], "address=1.2.3.4"])
    def test_non_mapping(self, raw):
        """Test that only mappings are accepted."""
        with pytest.raises(ConfigError) as excinfo:
            ConfigStore.load(raw)
        assert excinfo.value.field == "<root>"

    def test_overlap_warning(self, demo_raw, caplog):
        """Test that polling faster than the timeout warns but loads."""
        demo_raw["networkTimeoutMs"] = 2000
        demo_raw["pollIntervalMs"] = 500

        with caplog.at_level(logging.WARNING, logger="src.infrastructure.config.config_store"):
            config = ConfigStore.load(demo_raw)

        assert config.timing().allows_overlap is True
        assert "polls may overlap" in caplog.text

    def test_no_warning_for_safe_timing(self, demo_raw, caplog):
        """Test that the recommended timing relation logs no warning."""
        with caplog.at_level(logging.WARNING, logger="src.infrastructure.config.config_store"):
            ConfigStore.load(demo_raw)

        assert caplog.records == []


class TestConfigStoreSources:
    """Test cases for ConfigStore bound to a source."""

    def test_load_from_mapping_source(self, demo_raw):
        """Test loading through an in-memory source."""
        store = ConfigStore(MappingConfigSource(demo_raw))

        assert store.load_from_source().output_label(5) == "TX"

    def test_load_from_source_without_source(self):
        """Test that an unbound store refuses to load from a source."""
        with pytest.raises(ValueError, match="No configuration source"):
            ConfigStore().load_from_source()

    def test_from_path_picks_yaml(self, tmp_path):
        """Test source selection for YAML files."""
        store = ConfigStore.from_path(tmp_path / "config.yaml", section="device")

        assert isinstance(store.source, YamlConfigSource)
        assert store.source.section == "device"

    def test_from_path_picks_legacy_script(self, tmp_path):
        """Test source selection for config.js files."""
        store = ConfigStore.from_path(tmp_path / "config.JS")

        assert isinstance(store.source, LegacyJsConfigSource)

    def test_yaml_and_legacy_script_agree(self, tmp_path, demo_yaml_file, demo_script):
        """Test that both file formats produce the same configuration."""
        script_file = tmp_path / "config.js"
        script_file.write_text(demo_script)

        from_yaml = ConfigStore.from_path(demo_yaml_file, section="device").load_from_source()
        from_script = ConfigStore.from_path(script_file).load_from_source()

        assert from_yaml == from_script

    def test_validate_source_valid(self, demo_yaml_file):
        """Test source validation for a good file."""
        assert ConfigStore.from_path(demo_yaml_file, section="device").validate_source() is True

    def test_validate_source_missing_file(self, tmp_path):
        """Test source validation when the file doesn't exist."""
        assert ConfigStore.from_path(tmp_path / "nonexistent.yaml").validate_source() is False

    def test_validate_source_undecodable_file(self, tmp_path):
        """Test source validation for a script that isn't UTF-8."""
        script_file = tmp_path / "config.js"
        script_file.write_bytes(b"let c = {ipaddr: '\xff\xfe'}")

        assert ConfigStore.from_path(script_file).validate_source() is False

    def test_validate_source_invalid_record(self, demo_raw):
        """Test source validation for a record that fails validation."""
        demo_raw["port"] = 70000

        assert ConfigStore(MappingConfigSource(demo_raw)).validate_source() is False

    def test_get_config_schema(self):
        """Test configuration schema retrieval."""
        schema = ConfigStore().get_config_schema()

        assert "properties" in schema
        assert "port" in schema["properties"]
        assert "outputNames" in schema["properties"]
        assert set(schema["required"]) == {
            "address", "port", "path", "networkTimeoutMs", "pollIntervalMs", "outputNames"
        }
