"""
trigger-lookup

Lookup steps for event-driven workflows. The event lookup step adds the
identifier of the group or the short name of the role an event refers to
to the workflow data, reading from an injected lookup store.
"""

__version__ = "1.0.0"

from trigger.steps import (
    Event,
    EventKind,
    EventLookupStep,
    EventLookupStepConfig,
    MissingFieldError,
    StepError,
    StepFactory,
    get_datafields,
    parse_event,
)
from trigger.store import InMemoryLookupStore, SQLLookupStore, create_lookup_store

__all__ = [
    "Event",
    "EventKind",
    "EventLookupStep",
    "EventLookupStepConfig",
    "MissingFieldError",
    "StepError",
    "StepFactory",
    "get_datafields",
    "parse_event",
    "InMemoryLookupStore",
    "SQLLookupStore",
    "create_lookup_store",
]
