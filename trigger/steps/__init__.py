"""
Workflow Steps

Steps read from and enrich the data bag a workflow threads through its
stages. This package provides the step contract, event parsing, and the
event lookup step.
"""

from trigger.steps.base import BaseStep, StepResult
from trigger.steps.datafields import get_datafields
from trigger.steps.errors import (
    ConfigurationError,
    EventParseError,
    InvalidParameterError,
    LookupStoreError,
    MissingFieldError,
    StepError,
)
from trigger.steps.events import Event, EventKind, parse_event
from trigger.steps.factory import StepFactory
from trigger.steps.lookups import EventLookupStep, EventLookupStepConfig

__all__ = [
    "BaseStep",
    "StepResult",
    "get_datafields",
    "ConfigurationError",
    "EventParseError",
    "InvalidParameterError",
    "LookupStoreError",
    "MissingFieldError",
    "StepError",
    "Event",
    "EventKind",
    "parse_event",
    "StepFactory",
    "EventLookupStep",
    "EventLookupStepConfig",
]
