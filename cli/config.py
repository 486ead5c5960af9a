"""
Config Subcommand Module

Generates default configuration files and validates the layered
configuration a run would use.
"""

from pathlib import Path
from typing import Optional

import click

from trigger.config.environment import EnvironmentVariables
from trigger.config.manager import CONFIG_DIR_NAME, CONFIG_FILE_NAME, ConfigurationManager
from trigger.steps.errors import ConfigurationError, LookupStoreError
from trigger.store.factory import create_lookup_store

from .common import fail
from .help_texts import CHECK_STORE_HELP, CONFIG_HELP, CONFIG_INIT_HELP, CONFIG_VALIDATE_HELP, ExitCodes
from .shared_options import config_option


@click.group(help=CONFIG_HELP)
def config():
    """Configuration commands."""
    pass


@config.command("init", help=CONFIG_INIT_HELP)
@click.option(
    "--output", "-o",
    "output_path",
    type=click.Path(),
    default=str(Path(CONFIG_DIR_NAME) / CONFIG_FILE_NAME),
    show_default=True,
    help="Where to write the configuration file",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(output_path: str, force: bool):
    if Path(output_path).exists() and not force:
        fail(f"{output_path} already exists (use --force to overwrite)", ExitCodes.GENERAL_ERROR)

    ConfigurationManager().save_configuration(output_path)
    click.echo(f"Configuration written to {output_path}")


@config.command("validate", help=CONFIG_VALIDATE_HELP)
@config_option()
@click.option("--check-store", is_flag=True, help=CHECK_STORE_HELP)
def validate(config_file: Optional[str], check_store: bool):
    manager = ConfigurationManager()
    try:
        loaded = manager.load_configuration(config_file=config_file)
    except ConfigurationError as e:
        fail(str(e), ExitCodes.INVALID_CONFIGURATION)

    env_warnings, env_errors = EnvironmentVariables.validate_environment_setup()
    for warning in env_warnings:
        click.echo(f"Warning: {warning}", err=True)

    errors = env_errors + manager.validate_configuration(loaded)
    if errors:
        fail("Invalid configuration:\n" + "\n".join(f"  - {error}" for error in errors),
             ExitCodes.INVALID_CONFIGURATION)

    if check_store:
        try:
            store = create_lookup_store(loaded.store)
        except (ConfigurationError, LookupStoreError) as e:
            fail(str(e), ExitCodes.LOOKUP_STORE_ERROR)
        try:
            reachable = store.validate_requirements()
        finally:
            store.close()
        if not reachable:
            fail(f"Lookup store ({loaded.store.backend}) is not reachable", ExitCodes.LOOKUP_STORE_ERROR)
        click.echo("Lookup store is reachable")

    click.echo(f"Configuration is valid (store: {loaded.store.backend}, step: {loaded.step.type})")
