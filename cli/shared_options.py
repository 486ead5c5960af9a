"""
Shared CLI Option Decorators

Reusable Click decorators for options several subcommands accept.
"""

import click

from .help_texts import (
    CONFIG_FILE_HELP,
    CONTEXTIDFIELD_HELP,
    DATABASE_URL_HELP,
    LOG_LEVEL_HELP,
    OUTPUTPREFIX_HELP,
    STEP_TYPE_HELP,
    TABLE_PREFIX_HELP,
    USERIDFIELD_HELP,
)


def config_option(help=None):
    """Decorator for configuration file options."""
    def decorator(f):
        return click.option(
            '--config', '-c',
            'config_file',
            default=None,
            type=click.Path(),
            help=help or CONFIG_FILE_HELP
        )(f)
    return decorator


def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default=None,
            type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
            help=help or LOG_LEVEL_HELP
        )(f)
    return decorator


def step_type_option(help=None):
    """Decorator for step type options."""
    def decorator(f):
        return click.option(
            '--step-type', '-t',
            default=None,
            help=help or STEP_TYPE_HELP
        )(f)
    return decorator


def store_options(f):
    """Decorator adding database URL and table prefix options."""
    f = click.option('--table-prefix', default=None, help=TABLE_PREFIX_HELP)(f)
    f = click.option('--database-url', default=None, help=DATABASE_URL_HELP)(f)
    return f


def step_field_options(f):
    """Decorator adding the event lookup step's field options."""
    f = click.option('--outputprefix', default=None, help=OUTPUTPREFIX_HELP)(f)
    f = click.option('--contextidfield', default=None, help=CONTEXTIDFIELD_HELP)(f)
    f = click.option('--useridfield', default=None, help=USERIDFIELD_HELP)(f)
    return f
