"""
String Catalog

User-facing strings for step names, descriptions, form labels and privacy
declarations, looked up by key.
"""

import logging
from typing import Dict

logger = logging.getLogger(__name__)

STRINGS: Dict[str, str] = {
    # Event lookup step
    "step_lookup_event_name": "Event lookup",
    "step_lookup_event_desc": (
        "This step looks up the group or role an event refers to and adds "
        "its identifier to the workflow data."
    ),
    "step_lookup_event:privacy:userdata_desc": (
        "The event lookup step reads the user id and context id of the event "
        "being processed and stores the label of the related group or role "
        "in the workflow data."
    ),

    # Form labels
    "step_lookup_user_useridfield": "User id field",
    "contextidfield": "Context id field",
    "outputprefix": "Output prefix",
}


def get_string(key: str) -> str:
    """Return the string for ``key``.

    Unknown keys come back as ``[[key]]`` so a missing string shows up in
    the output instead of failing the caller.
    """
    if key not in STRINGS:
        logger.debug(f"Missing string: {key}")
        return f"[[{key}]]"
    return STRINGS[key]
