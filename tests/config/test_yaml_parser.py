"""
Unit tests for the configuration YAML parser.
"""

import pytest

from trigger.config.yaml_parser import ConfigurationYAMLParser, YAMLParsingError


@pytest.fixture
def parser():
    return ConfigurationYAMLParser()


class TestConfigurationYAMLParser:
    """Test suite for ConfigurationYAMLParser."""

    def test_parse_file_contents(self, parser, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("log_level: debug\nstore:\n  table_prefix: mdl_\n")

        assert parser.parse_file(path) == {"log_level": "debug", "store": {"table_prefix": "mdl_"}}

    def test_parse_empty_file(self, parser, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert parser.parse_file(path) == {}

    def test_parse_error_has_position(self, parser, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("store:\n  url: [unclosed\n")

        with pytest.raises(YAMLParsingError) as exc_info:
            parser.parse_file(path)

        assert exc_info.value.line_number is not None
        assert "Line" in str(exc_info.value)

    def test_top_level_must_be_mapping(self, parser, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- one\n- two\n")

        with pytest.raises(YAMLParsingError):
            parser.parse_file(path)

    def test_parse_file(self, parser, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("step:\n  type: event_lookup\n")

        assert parser.parse_file(path) == {"step": {"type": "event_lookup"}}

    def test_parse_missing_file(self, parser, tmp_path):
        with pytest.raises(YAMLParsingError) as exc_info:
            parser.parse_file(tmp_path / "missing.yaml")

        assert exc_info.value.file_path == tmp_path / "missing.yaml"

    def test_structure_valid(self, parser):
        config = {
            "log_level": "info",
            "store": {"backend": "memory", "tables": {"roles": []}, "echo": False},
            "step": {"type": "event_lookup", "outputprefix": "user_"},
        }

        assert parser.validate_configuration_structure(config) == []

    def test_structure_unknown_keys(self, parser):
        errors = parser.validate_configuration_structure({"engine": "auto", "store": {"driver": "x"}})

        assert "Unknown configuration keys: engine" in errors
        assert "Unknown store keys: driver" in errors

    def test_structure_wrong_types(self, parser):
        errors = parser.validate_configuration_structure({
            "store": {"echo": "yes", "tables": []},
            "step": "event_lookup",
        })

        assert "store.echo must be a boolean" in errors
        assert "store.tables must be a dictionary" in errors
        assert "step must be a dictionary" in errors
