"""
Unit tests for Configuration Manager.

Tests configuration layering, environment variable integration,
validation and default file generation.
"""

import os
import pytest
from pathlib import Path

from trigger.config.manager import ConfigurationManager
from trigger.config.schema import TriggerConfig, LogLevel, StoreBackend, DEFAULT_DATABASE_URL
from trigger.steps.errors import ConfigurationError


class TestConfigurationManager:
    """Test suite for ConfigurationManager."""

    def setup_method(self):
        """Set up test fixtures."""
        self.config_manager = ConfigurationManager()

    def test_load_default_configuration(self):
        config = self.config_manager.load_configuration()

        assert config.log_level == LogLevel.INFO.value
        assert config.store.backend == StoreBackend.SQL.value
        assert config.store.url == DEFAULT_DATABASE_URL
        assert config.store.table_prefix == ""
        assert config.step.type == "event_lookup"
        assert config.step.settings == {}

    def test_load_configuration_with_yaml_file(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("""
log_level: debug
store:
  url: postgresql://moodle@localhost/moodle
  table_prefix: mdl_
step:
  type: event_lookup
  outputprefix: group_
""")

        config = self.config_manager.load_configuration(config_file=str(config_file))

        assert config.log_level == "debug"
        assert config.store.backend == "sql"
        assert config.store.url == "postgresql://moodle@localhost/moodle"
        assert config.store.table_prefix == "mdl_"
        assert config.step.settings == {"outputprefix": "group_"}

    def test_project_config_over_user_config(self):
        user_file = Path.home() / ".trigger-lookup" / "config.yaml"
        user_file.parent.mkdir(parents=True)
        user_file.write_text("log_level: debug\nstore:\n  table_prefix: user_\n")

        project_file = Path.cwd() / ".trigger-lookup" / "config.yaml"
        project_file.parent.mkdir(parents=True)
        project_file.write_text("store:\n  table_prefix: mdl_\n")

        config = ConfigurationManager().load_configuration()

        assert config.log_level == "debug"
        assert config.store.table_prefix == "mdl_"

    def test_environment_over_files(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("store:\n  url: sqlite:///file.db\n")
        monkeypatch.setenv("TRIGGER_DATABASE_URL", "sqlite:///env.db")
        monkeypatch.setenv("TRIGGER_TABLE_PREFIX", "mdl_")
        monkeypatch.setenv("TRIGGER_LOG_LEVEL", "warning")

        config = self.config_manager.load_configuration(config_file=str(config_file))

        assert config.store.url == "sqlite:///env.db"
        assert config.store.table_prefix == "mdl_"
        assert config.log_level == "warning"

    def test_cli_overrides_take_precedence(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("step:\n  useridfield: relateduserid\n  outputprefix: yaml_\n")
        monkeypatch.setenv("TRIGGER_DATABASE_URL", "sqlite:///env.db")

        config = self.config_manager.load_configuration(
            config_file=str(config_file),
            cli_overrides={
                'store': {'url': 'sqlite:///cli.db'},
                'step': {'outputprefix': 'cli_'},
            }
        )

        assert config.store.url == "sqlite:///cli.db"
        assert config.step.settings == {"useridfield": "relateduserid", "outputprefix": "cli_"}

    def test_environment_variable_substitution(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("store:\n  url: postgresql://moodle:${DB_PASSWORD}@db/moodle\n")
        monkeypatch.setenv("DB_PASSWORD", "secret")

        config = self.config_manager.load_configuration(config_file=str(config_file))

        assert config.store.url == "postgresql://moodle:secret@db/moodle"

    def test_environment_variable_default(self):
        result = self.config_manager.substitute_environment_variables(
            {'store': {'url': '${UNSET_TRIGGER_URL:-sqlite:///fallback.db}'}}
        )

        assert result['store']['url'] == "sqlite:///fallback.db"

    def test_missing_environment_variable(self):
        with pytest.raises(ConfigurationError) as exc_info:
            self.config_manager.substitute_environment_variables({'store': {'url': '${UNSET_TRIGGER_URL}'}})

        assert "UNSET_TRIGGER_URL" in str(exc_info.value)

    def test_substitution_leaves_other_types(self):
        result = self.config_manager.substitute_environment_variables(
            {'echo': True, 'tables': {'roles': [{'id': 3}]}}
        )

        assert result == {'echo': True, 'tables': {'roles': [{'id': 3}]}}

    def test_invalid_yaml_file(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("store:\n  url: [unclosed\n")

        with pytest.raises(ConfigurationError) as exc_info:
            self.config_manager.load_configuration(config_file=str(config_file))

        assert "YAML parsing error" in str(exc_info.value)

    def test_unknown_keys_rejected(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("engine: mysql\n")

        with pytest.raises(ConfigurationError) as exc_info:
            self.config_manager.load_configuration(config_file=str(config_file))

        assert "engine" in str(exc_info.value)

    def test_missing_config_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            self.config_manager.load_configuration(config_file=str(tmp_path / "missing.yaml"))

        assert "not found" in str(exc_info.value)

    def test_validate_configuration_valid(self):
        config = self.config_manager.load_configuration()

        assert self.config_manager.validate_configuration(config) == []

    def test_validate_configuration_reports_step_errors(self):
        config = self.config_manager.load_configuration(
            cli_overrides={'step': {'useridfield': 'user id'}}
        )

        errors = self.config_manager.validate_configuration(config)

        assert len(errors) == 1
        assert "useridfield" in errors[0]

    def test_validate_configuration_reports_unknown_step(self):
        config = self.config_manager.load_configuration(cli_overrides={'step': {'type': 'email'}})

        errors = self.config_manager.validate_configuration(config)

        assert any("Unknown step type" in error for error in errors)

    def test_generated_config_round_trips(self, tmp_path):
        path = tmp_path / "generated" / "config.yaml"
        self.config_manager.save_configuration(str(path))

        content = path.read_text()
        config = self.config_manager.load_configuration(config_file=str(path))

        assert "useridfield: userid" in content
        assert "#   TRIGGER_TABLE_PREFIX: Prefix of the host's table names" in content
        assert config.store.url == DEFAULT_DATABASE_URL
        assert config.step.settings == {
            "useridfield": "userid",
            "contextidfield": "contextid",
            "outputprefix": "user_",
        }
        assert self.config_manager.validate_configuration(config) == []


class TestTriggerConfigValidate:
    """Test suite for TriggerConfig.validate."""

    def test_defaults_are_valid(self):
        assert TriggerConfig().validate() == []

    def test_invalid_log_level(self):
        config = TriggerConfig(log_level="verbose")

        assert any("log_level" in error for error in config.validate())

    def test_invalid_backend(self):
        config = TriggerConfig()
        config.store.backend = "redis"

        assert any("store.backend" in error for error in config.validate())

    def test_sql_backend_requires_url(self):
        config = TriggerConfig()
        config.store.url = ""

        assert "store.url is required for the sql backend" in config.validate()

    def test_memory_tables_must_be_rows(self):
        config = TriggerConfig()
        config.store.backend = "memory"
        config.store.tables = {"roles": "editor"}

        assert any("store.tables.roles" in error for error in config.validate())
