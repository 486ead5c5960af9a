"""
Configuration Manager for trigger-lookup.

Loads, validates and merges configuration from multiple sources:
- System defaults
- User configuration (~/.trigger-lookup/config.yaml)
- Project configuration (./.trigger-lookup/config.yaml)
- Explicit configuration (--config file.yaml)
- Environment variables
- CLI arguments (highest precedence)
"""

import logging
import os
import re
from pathlib import Path
from typing import Optional, Dict, Any, List

from trigger.steps.errors import ConfigurationError
from trigger.steps.factory import StepFactory

from .schema import TriggerConfig, StoreConfig, StepConfig, LogLevel, StoreBackend, DEFAULT_DATABASE_URL
from .environment import EnvironmentVariables
from .yaml_parser import ConfigurationYAMLParser, YAMLParsingError

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".trigger-lookup"
CONFIG_FILE_NAME = "config.yaml"

# Matches ${VAR} and ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')


class ConfigurationManager:
    """Manages configuration loading, validation, and environment variable integration."""

    def __init__(self):
        self.user_config_path = Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        self.project_config_path = Path.cwd() / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        self.yaml_parser = ConfigurationYAMLParser()

    def load_configuration(self,
                           config_file: Optional[str] = None,
                           cli_overrides: Optional[Dict[str, Any]] = None) -> TriggerConfig:
        """
        Load configuration from all sources with proper precedence.

        Precedence order (highest to lowest):
        1. CLI arguments (cli_overrides)
        2. Environment variables
        3. Explicit config file (--config)
        4. Project config (./.trigger-lookup/config.yaml)
        5. User config (~/.trigger-lookup/config.yaml)
        6. System defaults

        Args:
            config_file: Optional explicit configuration file path
            cli_overrides: Dictionary of CLI argument overrides

        Returns:
            TriggerConfig: Merged configuration

        Raises:
            ConfigurationError: If configuration files contain invalid YAML or values
        """
        config_dict = self._get_default_config()

        if self.user_config_path.exists():
            config_dict = self._merge_configs(config_dict, self._load_yaml_file(self.user_config_path))

        if self.project_config_path.exists():
            config_dict = self._merge_configs(config_dict, self._load_yaml_file(self.project_config_path))

        if config_file:
            config_dict = self._merge_configs(config_dict, self._load_yaml_file(Path(config_file)))

        config_dict = self._merge_configs(config_dict, self._load_environment_variables())

        if cli_overrides:
            config_dict = self._merge_configs(config_dict, cli_overrides)

        config_dict = self.substitute_environment_variables(config_dict)

        return self._dict_to_config(config_dict)

    def validate_configuration(self, config: TriggerConfig) -> List[str]:
        """Validate configuration, including the step's own settings."""
        errors = config.validate()
        try:
            StepFactory.get_step_class(config.step.type).validate_config(config.step.settings)
        except ConfigurationError as e:
            errors.append(str(e))
        return errors

    def substitute_environment_variables(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """
        Substitute ${VAR} and ${VAR:-default} syntax with environment variable values.

        Raises:
            ConfigurationError: If a required environment variable is missing
        """
        def replace_var(match):
            var_expr = match.group(1)

            if ':-' in var_expr:
                var_name, default_value = var_expr.split(':-', 1)
                return os.environ.get(var_name, default_value)

            if var_expr not in os.environ:
                raise ConfigurationError(f"Required environment variable '{var_expr}' is not set")
            return os.environ[var_expr]

        def substitute_recursive(obj):
            if isinstance(obj, dict):
                return {k: substitute_recursive(v) for k, v in obj.items()}
            elif isinstance(obj, list):
                return [substitute_recursive(item) for item in obj]
            elif isinstance(obj, str):
                return ENV_VAR_PATTERN.sub(replace_var, obj)
            return obj

        return substitute_recursive(config_dict)

    def save_configuration(self, file_path: str, config: Optional[TriggerConfig] = None) -> None:
        """Save configuration to a commented YAML file."""
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(self.generate_default_config(config))

    def generate_default_config(self, config: Optional[TriggerConfig] = None) -> str:
        """Generate configuration YAML with comments."""
        config = config or self._dict_to_config(self._get_default_config())
        settings = StepFactory.get_step_class(config.step.type).validate_config(config.step.settings)
        step_lines = "\n".join(f"  {name}: {value}" for name, value in settings.model_dump().items())
        env_lines = "\n".join(
            f"#   {name}: {doc}" for name, doc in EnvironmentVariables.get_variable_documentation().items()
        )

        return f"""# trigger-lookup configuration
#
# Environment variables override the values below:
{env_lines}

# Logging level (debug, info, warning, error)
log_level: {config.log_level}

# Optional log file (rotated at 10MB)
log_file: {config.log_file or 'null'}

# Lookup store
store:
  backend: {config.store.backend}  # sql, memory
  url: ${{{EnvironmentVariables.DATABASE_URL}:-{config.store.url}}}
  table_prefix: "{config.store.table_prefix}"
  echo: {str(config.store.echo).lower()}
  # Rows for the memory backend, e.g.
  # tables:
  #   groups:
  #     - {{id: 7, identifier: G7}}
  tables: {{}}

# Step to run and its settings
step:
  type: {config.step.type}
{step_lines}
"""

    def _get_default_config(self) -> Dict[str, Any]:
        """Get system default configuration values."""
        return {
            'log_level': LogLevel.INFO.value,
            'log_file': None,
            'store': {
                'backend': StoreBackend.SQL.value,
                'url': DEFAULT_DATABASE_URL,
                'table_prefix': '',
                'echo': False,
                'tables': {},
            },
            'step': {
                'type': 'event_lookup',
            },
        }

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load and parse YAML configuration file."""
        try:
            config_dict, validation_errors = self.yaml_parser.validate_and_parse_file(file_path)
        except YAMLParsingError as e:
            raise ConfigurationError(str(e))

        if validation_errors:
            raise ConfigurationError(
                f"Configuration validation errors in {file_path}:\n" +
                "\n".join(f"  - {error}" for error in validation_errors)
            )

        logger.debug(f"Loaded configuration from {file_path}")
        return config_dict

    def _load_environment_variables(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config = {}
        env_vars = EnvironmentVariables

        if env_vars.LOG_LEVEL in os.environ:
            env_config['log_level'] = os.environ[env_vars.LOG_LEVEL]

        if env_vars.STORE_BACKEND in os.environ:
            env_config.setdefault('store', {})['backend'] = os.environ[env_vars.STORE_BACKEND]

        if env_vars.DATABASE_URL in os.environ:
            env_config.setdefault('store', {})['url'] = os.environ[env_vars.DATABASE_URL]

        if env_vars.TABLE_PREFIX in os.environ:
            env_config.setdefault('store', {})['table_prefix'] = os.environ[env_vars.TABLE_PREFIX]

        return env_config

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> TriggerConfig:
        """Convert configuration dictionary to TriggerConfig object."""
        step_dict = dict(config_dict.get('step') or {})
        step_type = step_dict.pop('type', 'event_lookup')

        try:
            store = StoreConfig(**(config_dict.get('store') or {}))
        except TypeError as e:
            raise ConfigurationError(f"Failed to create store configuration: {e}")

        return TriggerConfig(
            log_level=str(config_dict.get('log_level', LogLevel.INFO.value)).lower(),
            log_file=config_dict.get('log_file'),
            store=store,
            step=StepConfig(type=step_type, settings=step_dict),
        )
