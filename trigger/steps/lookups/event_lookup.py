"""
Event Lookup Step

Adds a human-readable label for the object an event refers to: the
identifier of a group for group membership events, or the short name of a
role for role assignment events. The label is written to the workflow data
under ``<outputprefix>event``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from trigger.steps.base import StepResult
from trigger.steps.datafields import get_datafields
from trigger.steps.errors import MissingFieldError
from trigger.steps.events import Event, EventKind, parse_event
from trigger.steps.lookups.base import BaseLookupStep
from trigger.strings import get_string

logger = logging.getLogger(__name__)

# Letters, digits, underscore, hyphen and dot
FIELD_NAME_PATTERN = r"^[A-Za-z0-9_.\-]+$"

OUTPUT_FIELD = "event"


class EventLookupStepConfig(BaseModel):
    """Settings of the event lookup step.

    Attributes:
        useridfield: Workflow data field holding the user id
        contextidfield: Workflow data field holding the context id
        outputprefix: Prefix of the field the label is written to
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    useridfield: str = Field(
        "userid",
        description="Workflow data field holding the user id",
        pattern=FIELD_NAME_PATTERN
    )
    contextidfield: str = Field(
        "contextid",
        description="Workflow data field holding the context id",
        pattern=FIELD_NAME_PATTERN
    )
    outputprefix: str = Field(
        "user_",
        description="Prefix for the fields this step adds",
        pattern=FIELD_NAME_PATTERN
    )

    @property
    def output_key(self) -> str:
        return f"{self.outputprefix}{OUTPUT_FIELD}"


@dataclass(frozen=True)
class LookupTarget:
    """Where the label for an event kind lives in the lookup store."""
    table: str
    key_column: str
    value_column: str


GROUP_LOOKUP = LookupTarget(table="groups", key_column="id", value_column="identifier")
ROLE_LOOKUP = LookupTarget(table="roles", key_column="id", value_column="short_name")

LOOKUP_TARGETS: Dict[EventKind, LookupTarget] = {
    EventKind.GROUP_MEMBER_ADDED: GROUP_LOOKUP,
    EventKind.GROUP_MEMBER_REMOVED: GROUP_LOOKUP,
    EventKind.ROLE_ASSIGNED: ROLE_LOOKUP,
    EventKind.ROLE_UNASSIGNED: ROLE_LOOKUP,
}

# Labels of the form elements, keyed by setting name
FORM_LABELS = {
    "useridfield": "step_lookup_user_useridfield",
    "contextidfield": "contextidfield",
    "outputprefix": "outputprefix",
}


class EventLookupStep(BaseLookupStep):
    """Lookup step that resolves the group or role an event refers to.

    Example:
        >>> store = InMemoryLookupStore({"roles": [{"id": 3, "short_name": "editor"}]})
        >>> step = EventLookupStep(store)
        >>> step.execute({"eventname": "role_assigned", "objectid": 3}, {"userid": 2})
        (True, {'userid': 2, 'user_event': 'editor'})
    """

    config_model = EventLookupStepConfig

    def execute(self, event: Union[Event, Mapping[str, Any]], data: Dict[str, Any]) -> StepResult:
        """Write the label of the event's object to ``data`` and return it.

        The user id field is looked for in the event fields merged with the
        workflow data, so an event that carries its own ``userid`` passes the
        check even when ``data`` does not hold one.

        Raises:
            MissingFieldError: If the user id field is in neither the event nor ``data``
            EventParseError: If a raw event cannot be parsed
            LookupStoreError: If the store lookup fails
        """
        if not isinstance(event, Event):
            event = parse_event(event)

        datafields = get_datafields(event, data)
        if self.config.useridfield not in datafields:
            raise MissingFieldError(self.config.useridfield)

        data[self.config.output_key] = self._lookup_event_object(event)
        return True, data

    def _lookup_event_object(self, event: Event) -> Optional[Any]:
        """Fetch the label of the event's object, or None when there is none."""
        kind = event.kind
        target = LOOKUP_TARGETS.get(kind)
        if target is None:
            logger.warning(f"Unsupported event '{event.eventname}': no lookup performed")
            return None

        if event.objectid is None:
            logger.warning(f"Event '{event.eventname}' has no objectid: no lookup performed")
            return None

        value = self.store.lookup(target.table, target.key_column, event.objectid, target.value_column)
        if value is None:
            logger.info(f"No {target.table} row with {target.key_column}={event.objectid}")
        return value

    @classmethod
    def get_step_name(cls) -> str:
        return get_string("step_lookup_event_name")

    @classmethod
    def get_step_desc(cls) -> str:
        return get_string("step_lookup_event_desc")

    @classmethod
    def get_privacyfields(cls) -> Dict[str, str]:
        return {"event_lookup_step": "step_lookup_event:privacy:userdata_desc"}

    @classmethod
    def get_fields(cls) -> List[str]:
        return [OUTPUT_FIELD]

    @classmethod
    def form_definition(cls) -> List[Dict[str, Any]]:
        """Describe the settings form: one text element per setting."""
        elements = []
        for name, info in cls.config_model.model_fields.items():
            elements.append({
                "name": name,
                "type": "text",
                "label": get_string(FORM_LABELS[name]),
                "default": info.default,
                "required": True,
                "pattern": FIELD_NAME_PATTERN,
            })
        return elements
