"""
Workflow Data Fields

Builds the flat view of named fields a step reads from: the event's own
attributes merged with the values earlier steps put into the workflow data.
"""

from typing import Any, Dict, Mapping, Optional

from trigger.steps.events import Event


def flatten_other(other: Mapping[str, Any], prefix: str = "other_") -> Dict[str, Any]:
    """Flatten event specific data into ``other_<key>`` fields.

    Nested mappings are flattened recursively with ``_`` separators.
    """
    flat = {}
    for key, value in other.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(flatten_other(value, prefix=f"{name}_"))
        else:
            flat[name] = value
    return flat


def get_datafields(event: Event, data: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return the fields available to a step for an event.

    Workflow data takes precedence over event attributes with the same name,
    so a step can rely on values written by earlier steps.

    Args:
        event: The event being processed
        data: Workflow data produced so far

    Returns:
        A new dictionary; neither argument is modified
    """
    fields = event.get_data()
    other = fields.pop("other", {})
    fields.update(flatten_other(other))
    if data:
        fields.update(data)
    return fields
