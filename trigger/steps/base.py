"""
Base Step Protocol

Defines the contract every workflow step implements: validated, immutable
configuration, an ``execute`` operation that enriches the workflow data,
and static metadata the host shows to administrators.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple, Type, Union

from pydantic import BaseModel, ValidationError

from trigger.steps.errors import ConfigurationError
from trigger.steps.events import Event

StepResult = Tuple[bool, Dict[str, Any]]


def format_validation_errors(error: ValidationError) -> List[str]:
    """Turn a pydantic ValidationError into readable ``field: message`` lines."""
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "config"
        messages.append(f"{location}: {detail['msg']}")
    return messages


class BaseStep(ABC):
    """Abstract base class for workflow steps.

    Subclasses set ``config_model`` to the pydantic model describing their
    settings and implement ``execute`` plus the metadata class methods.
    Configuration is validated once, at construction.
    """

    config_model: ClassVar[Type[BaseModel]]

    def __init__(self, config: Optional[Union[BaseModel, Mapping[str, Any]]] = None):
        self.config = self.validate_config(config)

    @classmethod
    def validate_config(cls, config: Optional[Union[BaseModel, Mapping[str, Any]]] = None) -> BaseModel:
        """Validate raw settings against the step's config model.

        Raises:
            ConfigurationError: If any setting is missing or malformed
        """
        if isinstance(config, cls.config_model):
            return config
        if isinstance(config, BaseModel):
            config = config.model_dump()
        try:
            return cls.config_model(**dict(config or {}))
        except ValidationError as e:
            details = "\n".join(f"  - {message}" for message in format_validation_errors(e))
            raise ConfigurationError(f"Invalid configuration for {cls.__name__}:\n{details}")

    @abstractmethod
    def execute(self, event: Union[Event, Mapping[str, Any]], data: Dict[str, Any]) -> StepResult:
        """Run the step for an event.

        Args:
            event: The event being processed
            data: Workflow data produced by earlier steps; updated in place

        Returns:
            Tuple of (success, workflow data)

        Raises:
            StepError: If the step cannot complete
        """
        pass

    @classmethod
    @abstractmethod
    def get_step_name(cls) -> str:
        """Return the display name of the step."""
        pass

    @classmethod
    @abstractmethod
    def get_step_desc(cls) -> str:
        """Return a one-paragraph description of what the step does."""
        pass

    @classmethod
    @abstractmethod
    def get_privacyfields(cls) -> Dict[str, str]:
        """Return the privacy declaration: step id to description string key."""
        pass

    @classmethod
    def get_fields(cls) -> List[str]:
        """Return the names of the fields this step adds to the workflow data."""
        return []

    @classmethod
    def get_config_schema(cls) -> Dict[str, Any]:
        """Return the JSON schema of the step's configuration."""
        return cls.config_model.model_json_schema()
