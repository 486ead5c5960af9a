"""
YAML parser with validation for trigger-lookup configuration files.

Provides YAML parsing with line number information in errors and checks
the structure of the parsed configuration.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional, Tuple


class YAMLParsingError(Exception):
    """Custom exception for YAML parsing errors with enhanced context."""

    def __init__(self, message: str, file_path: Optional[Path] = None,
                 line_number: Optional[int] = None, column: Optional[int] = None):
        self.file_path = file_path
        self.line_number = line_number
        self.column = column

        error_parts = [message]

        if file_path:
            error_parts.append(f"File: {file_path}")

        if line_number is not None:
            if column is not None:
                error_parts.append(f"Line {line_number}, Column {column}")
            else:
                error_parts.append(f"Line {line_number}")

        super().__init__(" | ".join(error_parts))


TOP_LEVEL_KEYS = {'log_level', 'log_file', 'store', 'step'}
STORE_KEYS = {'backend', 'url', 'table_prefix', 'echo', 'tables'}
STEP_KEYS = {'type'}


def _error_from_yaml(e: yaml.YAMLError) -> Tuple[str, Optional[int], Optional[int]]:
    line_number = None
    column = None

    mark = getattr(e, 'problem_mark', None)
    if mark is not None:
        line_number = mark.line + 1  # YAML uses 0-based line numbers
        column = mark.column + 1

    problem = getattr(e, 'problem', None)
    message = f"YAML parsing error: {problem or e}"
    return message, line_number, column


class ConfigurationYAMLParser:
    """YAML parser for configuration files with validation and error reporting."""

    def parse_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Parse YAML configuration file.

        Raises:
            YAMLParsingError: If YAML is invalid or file cannot be read
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            message, line_number, column = _error_from_yaml(e)
            raise YAMLParsingError(message, file_path, line_number, column)
        except FileNotFoundError:
            raise YAMLParsingError("Configuration file not found", file_path)
        except PermissionError:
            raise YAMLParsingError("Permission denied reading configuration file", file_path)
        except UnicodeDecodeError as e:
            raise YAMLParsingError(f"File encoding error: {e}", file_path)

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise YAMLParsingError("Configuration must be a mapping at the top level", file_path)
        return content

    def validate_configuration_structure(self, config_dict: Dict[str, Any]) -> List[str]:
        """
        Validate configuration dictionary structure against expected schema.

        Step sections may carry any settings; the step validates them itself.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        unknown_keys = set(config_dict.keys()) - TOP_LEVEL_KEYS
        if unknown_keys:
            errors.append(f"Unknown configuration keys: {', '.join(sorted(unknown_keys))}")

        if 'log_level' in config_dict and not isinstance(config_dict['log_level'], str):
            errors.append("log_level must be a string")

        if 'store' in config_dict:
            errors.extend(self._validate_store_config(config_dict['store']))

        if 'step' in config_dict and not isinstance(config_dict['step'], dict):
            errors.append("step must be a dictionary")

        return errors

    def _validate_store_config(self, config: Any) -> List[str]:
        """Validate store configuration section."""
        errors = []

        if not isinstance(config, dict):
            errors.append("store must be a dictionary")
            return errors

        unknown_keys = set(config.keys()) - STORE_KEYS
        if unknown_keys:
            errors.append(f"Unknown store keys: {', '.join(sorted(unknown_keys))}")

        if 'echo' in config and not isinstance(config['echo'], bool):
            errors.append("store.echo must be a boolean")

        if 'tables' in config and not isinstance(config['tables'], dict):
            errors.append("store.tables must be a dictionary")

        return errors

    def validate_and_parse_file(self, file_path: Path) -> Tuple[Dict[str, Any], List[str]]:
        """Parse a configuration file and return it with its structure errors."""
        config_dict = self.parse_file(file_path)
        return config_dict, self.validate_configuration_structure(config_dict)
