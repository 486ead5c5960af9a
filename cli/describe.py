"""
Describe Subcommand Module

Shows the metadata a step exposes to the host: display name, description,
the fields it adds to the workflow data, its privacy declaration and its
settings form.
"""

import click

from trigger.steps.errors import ConfigurationError
from trigger.steps.factory import StepFactory
from trigger.strings import get_string

from .common import fail, write_output
from .help_texts import DESCRIBE_HELP, ExitCodes
from .shared_options import step_type_option


def describe_step(step_type: str) -> dict:
    """Collect a step's metadata into a plain dictionary."""
    step_class = StepFactory.get_step_class(step_type)
    privacy = {
        name: get_string(string_key)
        for name, string_key in step_class.get_privacyfields().items()
    }
    description = {
        "type": StepFactory.resolve_step_type(step_type),
        "name": step_class.get_step_name(),
        "description": step_class.get_step_desc(),
        "fields": step_class.get_fields(),
        "privacy": privacy,
    }
    if hasattr(step_class, "form_definition"):
        description["form"] = step_class.form_definition()
    return description


@click.command(help=DESCRIBE_HELP)
@step_type_option()
@click.option("--json", "as_json", is_flag=True, help="Print the description as JSON")
def describe(step_type: str, as_json: bool):
    """Describe a step.

    Examples:
        trigger-lookup describe
        trigger-lookup describe --step-type event_lookup --json
    """
    try:
        info = describe_step(step_type or "event_lookup")
    except ConfigurationError as e:
        fail(str(e), ExitCodes.INVALID_CONFIGURATION)

    if as_json:
        write_output(info, None)
        return

    click.echo(f"{info['name']} ({info['type']})")
    click.echo(info["description"])
    click.echo("")
    click.echo(f"Fields added: {', '.join(info['fields']) or 'none'}")
    click.echo("Privacy:")
    for name, text in info["privacy"].items():
        click.echo(f"  {name}: {text}")
    if "form" in info:
        click.echo("Settings:")
        for element in info["form"]:
            required = " (required)" if element["required"] else ""
            click.echo(f"  {element['name']}: {element['label']}, default '{element['default']}'{required}")
