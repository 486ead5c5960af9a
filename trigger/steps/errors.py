"""
Step Error Hierarchy

Defines the exceptions raised by workflow steps and lookup stores.
The workflow engine that runs a step is expected to catch StepError and
fail the containing step.
"""


class StepError(Exception):
    """Base exception for all step errors."""
    pass


class InvalidParameterError(StepError):
    """A step was given input it cannot work with.

    Raised when the event or the workflow data handed to a step does not
    provide what the step needs.
    """
    pass


class MissingFieldError(InvalidParameterError):
    """A configured field is not present in the workflow data.

    Attributes:
        field_name: Name of the field that could not be found
    """

    def __init__(self, field_name: str, message: str = None):
        self.field_name = field_name
        super().__init__(
            message or f"Specified userid field not present in the workflow data: {field_name}"
        )


class EventParseError(InvalidParameterError):
    """Raw event data could not be turned into an Event.

    Raised when an event has no event name or an object id that is not
    an integer.
    """
    pass


class ConfigurationError(StepError):
    """Error in step or application configuration.

    Raised when configuration values are missing, malformed, or name
    an unknown step type or store backend.
    """
    pass


class LookupStoreError(StepError):
    """Error reading from a lookup store.

    Raised when a table is unknown to the store or the underlying
    database query fails.

    Attributes:
        table: Table the lookup was made against
        original_error: The underlying exception, if any
    """

    def __init__(self, message: str, table: str = None, original_error: Exception = None):
        super().__init__(message)
        self.table = table
        self.original_error = original_error
