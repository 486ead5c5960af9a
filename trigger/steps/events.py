"""
Event Records

Typed representation of the events that drive a workflow. Raw event data
is parsed once, at the boundary, into an Event whose kind is resolved
against a closed set of supported event types.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from trigger.steps.errors import EventParseError

logger = logging.getLogger(__name__)


class EventKind(Enum):
    """Event types the lookup steps know how to resolve."""
    GROUP_MEMBER_ADDED = "group_member_added"
    GROUP_MEMBER_REMOVED = "group_member_removed"
    ROLE_ASSIGNED = "role_assigned"
    ROLE_UNASSIGNED = "role_unassigned"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_eventname(cls, eventname: str) -> "EventKind":
        """Resolve an event name to its kind.

        Both short names (``role_assigned``) and namespaced names
        (``\\core\\event\\role_assigned``) are accepted. Anything else
        resolves to UNSUPPORTED.
        """
        short_name = eventname.rsplit("\\", 1)[-1].strip()
        if short_name == cls.UNSUPPORTED.value:
            return cls.UNSUPPORTED
        try:
            return cls(short_name)
        except ValueError:
            return cls.UNSUPPORTED


# Standard attributes every event may carry, in the order they are reported
STANDARD_FIELDS = ("eventname", "objectid", "userid", "contextid", "relateduserid", "courseid")


@dataclass(frozen=True)
class Event:
    """An event handed to a workflow.

    Attributes:
        eventname: Event type name, short or namespaced
        objectid: Id of the object the event is about (group id, role id, ...)
        userid: Id of the user who triggered the event
        contextid: Id of the context the event happened in
        relateduserid: Id of the user the event affects
        courseid: Id of the course the event happened in
        other: Event specific data
    """
    eventname: str
    objectid: Optional[int] = None
    userid: Optional[int] = None
    contextid: Optional[int] = None
    relateduserid: Optional[int] = None
    courseid: Optional[int] = None
    other: Dict[str, Any] = field(default_factory=dict)

    @property
    def kind(self) -> EventKind:
        return EventKind.from_eventname(self.eventname)

    def get_data(self) -> Dict[str, Any]:
        """Return the event's set attributes as a plain dictionary."""
        data = {}
        for name in STANDARD_FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        if self.other:
            data["other"] = dict(self.other)
        return data


def _to_int(raw: Mapping[str, Any], name: str) -> Optional[int]:
    value = raw.get(name)
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise EventParseError(f"Event field '{name}' must be an integer, got: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise EventParseError(f"Event field '{name}' must be an integer, got: {value!r}")
        return int(value)
    try:
        # int() accepts "7" but rejects "3.5"
        return int(value)
    except (TypeError, ValueError):
        raise EventParseError(f"Event field '{name}' must be an integer, got: {value!r}")


def parse_event(raw: Mapping[str, Any]) -> Event:
    """Build an Event from raw event data.

    Keys outside the standard attributes are folded into ``other``.

    Args:
        raw: Mapping with at least an ``eventname`` key

    Returns:
        Parsed event

    Raises:
        EventParseError: If the event name is missing or an id is not an integer
    """
    if not isinstance(raw, Mapping):
        raise EventParseError(f"Event must be a mapping, got: {type(raw).__name__}")

    eventname = raw.get("eventname")
    if not isinstance(eventname, str) or not eventname.strip():
        raise EventParseError("Event is missing required field 'eventname'")

    other = raw.get("other") or {}
    if not isinstance(other, Mapping):
        raise EventParseError("Event field 'other' must be a mapping")
    other = dict(other)

    for key, value in raw.items():
        if key not in STANDARD_FIELDS and key != "other":
            other[key] = value

    event = Event(
        eventname=eventname.strip(),
        objectid=_to_int(raw, "objectid"),
        userid=_to_int(raw, "userid"),
        contextid=_to_int(raw, "contextid"),
        relateduserid=_to_int(raw, "relateduserid"),
        courseid=_to_int(raw, "courseid"),
        other=other,
    )
    logger.debug(f"Parsed event {event.eventname} as {event.kind.value}")
    return event
