"""
Shared helpers for CLI subcommands: loading configuration and JSON
input files, and turning errors into exit codes.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click

from trigger.config.manager import ConfigurationManager
from trigger.config.schema import TriggerConfig
from trigger.steps.errors import ConfigurationError
from trigger.utils.error_messages import ErrorCategory, ErrorFormatter, ErrorMessages
from trigger.utils.logging_config import configure_logging, logging_config

from .help_texts import ExitCodes


def fail(message: str, exit_code: int) -> None:
    """Print an error to stderr and exit."""
    click.echo(ErrorFormatter.format_for_cli(message), err=True)
    sys.exit(exit_code)


def build_cli_overrides(
    log_level: Optional[str] = None,
    database_url: Optional[str] = None,
    table_prefix: Optional[str] = None,
    step_type: Optional[str] = None,
    **step_settings: Optional[str]
) -> Dict[str, Any]:
    """Collect the options the user actually passed into a config overlay."""
    overrides: Dict[str, Any] = {}

    if log_level:
        overrides['log_level'] = log_level.lower()

    store = {}
    if database_url:
        store['backend'] = 'sql'
        store['url'] = database_url
    if table_prefix is not None:
        store['table_prefix'] = table_prefix
    if store:
        overrides['store'] = store

    step = {name: value for name, value in step_settings.items() if value is not None}
    if step_type:
        step['type'] = step_type
    if step:
        overrides['step'] = step

    return overrides


def load_config_or_exit(config_file: Optional[str], cli_overrides: Dict[str, Any]) -> TriggerConfig:
    """Load and validate the layered configuration, then configure logging."""
    manager = ConfigurationManager()
    try:
        config = manager.load_configuration(config_file=config_file, cli_overrides=cli_overrides)
    except ConfigurationError as e:
        fail(ErrorMessages.format_error(ErrorCategory.CONFIGURATION, "invalid_configuration",
                                        error_details=str(e)),
             ExitCodes.INVALID_CONFIGURATION)

    errors = manager.validate_configuration(config)
    if errors:
        details = "\n".join(errors)
        fail(ErrorMessages.format_error(ErrorCategory.CONFIGURATION, "invalid_configuration",
                                        error_details=details),
             ExitCodes.INVALID_CONFIGURATION)

    configure_logging(config.log_level, config.log_file, force=True)
    logging_config.log_configuration_details({
        'log_level': config.log_level,
        'store': {
            'backend': config.store.backend,
            'url': config.store.url,
            'table_prefix': config.store.table_prefix,
        },
        'step': {'type': config.step.type, **config.step.settings},
    })
    return config


def read_json_or_exit(path: str) -> Any:
    """Read JSON from a file, or from stdin when ``path`` is ``-``."""
    try:
        if path == '-':
            return json.load(click.get_text_stream('stdin'))
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        fail(ErrorMessages.format_error(ErrorCategory.FILE_ACCESS, "file_not_found", file_path=path),
             ExitCodes.FILE_NOT_FOUND)
    except json.JSONDecodeError as e:
        fail(ErrorMessages.format_error(ErrorCategory.FILE_ACCESS, "invalid_json",
                                        file_path=path, error_details=str(e)),
             ExitCodes.GENERAL_ERROR)


def write_output(payload: Any, output_path: Optional[str]) -> None:
    """Write JSON to ``output_path``, or to stdout."""
    text = json.dumps(payload, indent=2, default=str)
    if output_path:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        Path(output_path).write_text(text + "\n", encoding='utf-8')
    else:
        click.echo(text)
