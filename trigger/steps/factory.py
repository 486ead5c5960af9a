"""
Step Factory

Creates configured steps by type name and hands them the lookup store
they depend on.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Type

from trigger.steps.base import BaseStep
from trigger.steps.errors import ConfigurationError
from trigger.steps.lookups.base import BaseLookupStep
from trigger.steps.lookups.event_lookup import EventLookupStep
from trigger.store.base import BaseLookupStore

logger = logging.getLogger(__name__)


STEP_TYPES: Dict[str, Type[BaseStep]] = {
    "event_lookup": EventLookupStep,
}

# Legacy step names kept for configuration files written for the host plugin
LEGACY_STEP_MAP = {
    "event_lookup_step": "event_lookup",
    "\\tool_trigger\\steps\\lookups\\event_lookup_step": "event_lookup",
}


class StepFactory:
    """Factory for creating workflow steps.

    Example:
        >>> factory = StepFactory(store)
        >>> step = factory.create_step("event_lookup", {"outputprefix": "group_"})
    """

    def __init__(self, store: Optional[BaseLookupStore] = None):
        """Initialize step factory.

        Args:
            store: Lookup store passed to every lookup step
        """
        self.store = store

    @staticmethod
    def resolve_step_type(step_type: str) -> str:
        """Map legacy names to current step type names."""
        return LEGACY_STEP_MAP.get(step_type, step_type)

    @classmethod
    def get_step_class(cls, step_type: str) -> Type[BaseStep]:
        """Return the class implementing ``step_type``.

        Raises:
            ConfigurationError: If the step type is unknown
        """
        resolved = cls.resolve_step_type(step_type)
        if resolved not in STEP_TYPES:
            raise ConfigurationError(
                f"Unknown step type: {step_type}. "
                f"Available step types: {', '.join(cls.list_step_types())}"
            )
        return STEP_TYPES[resolved]

    @staticmethod
    def list_step_types() -> List[str]:
        return sorted(STEP_TYPES)

    def create_step(self, step_type: str, config: Optional[Mapping[str, Any]] = None) -> BaseStep:
        """Create a step with validated configuration.

        Args:
            step_type: Step type name (current or legacy)
            config: Raw step settings

        Returns:
            Configured step

        Raises:
            ConfigurationError: If the type is unknown, the settings are
                invalid, or a lookup step is requested without a store
        """
        step_class = self.get_step_class(step_type)

        if issubclass(step_class, BaseLookupStep):
            if self.store is None:
                raise ConfigurationError(f"Step type '{step_type}' requires a lookup store")
            step = step_class(self.store, config)
        else:
            step = step_class(config)

        logger.debug(f"Created {step_class.__name__} with {step.config.model_dump()}")
        return step
