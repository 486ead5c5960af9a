"""
Base Lookup Step

Lookup steps resolve extra information about an event from the host
application's data and add it to the workflow data.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel

from trigger.steps.base import BaseStep
from trigger.store.base import BaseLookupStore


class BaseLookupStep(BaseStep):
    """Step that reads from an injected lookup store.

    Attributes:
        store: Read-only store the step queries
    """

    def __init__(
        self,
        store: BaseLookupStore,
        config: Optional[Union[BaseModel, Mapping[str, Any]]] = None
    ):
        super().__init__(config)
        self.store = store
