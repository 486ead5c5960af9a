"""
CLI Package for trigger-lookup

Click group and subcommands for running and inspecting lookup steps.
The cli() function serves as the console script entry point for setup.py.
"""

import os
import click
from dotenv import load_dotenv
from trigger import __version__
from trigger.utils.logging_config import configure_logging

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')
from .run import run
from .describe import describe
from .config import config

# Configure logging when CLI package is imported
configure_logging()

@click.group()
@click.version_option(version=__version__, prog_name='trigger-lookup')
def main():
    """trigger-lookup - Run workflow lookup steps against a host database.

    Resolves the group or role an event refers to and adds its label to the
    workflow data, the same way the step does inside a workflow.
    """
    pass

# Register subcommands
main.add_command(run)
main.add_command(describe)
main.add_command(config)

# Entry point for setup.py console script
def cli():
    """Console script entry point."""
    main()
