"""Lookup steps: steps that add data resolved from the host application."""

from trigger.steps.lookups.base import BaseLookupStep
from trigger.steps.lookups.event_lookup import (
    EventLookupStep,
    EventLookupStepConfig,
    LookupTarget,
    LOOKUP_TARGETS,
)

__all__ = [
    "BaseLookupStep",
    "EventLookupStep",
    "EventLookupStepConfig",
    "LookupTarget",
    "LOOKUP_TARGETS",
]
