"""
Base Lookup Store Protocol

Defines the read-only interface lookup steps use to resolve labels from
the host application's data. Steps receive a store at construction, so a
database-backed store and an in-memory fake are interchangeable.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class BaseLookupStore(ABC):
    """Abstract base class for lookup store implementations.

    A store answers a single kind of question: given a table, a key column
    and a key value, what is the value of another column in the matching
    row. Stores never write.
    """

    @abstractmethod
    def lookup(self, table: str, key_column: str, key_value: Any, value_column: str) -> Optional[Any]:
        """Fetch a single field from the row matching ``key_value``.

        Args:
            table: Logical table name (without any host prefix)
            key_column: Column to match against
            key_value: Value the key column must equal
            value_column: Column whose value is returned

        Returns:
            The field value, or None when no row matches

        Raises:
            LookupStoreError: If the table is unknown or the query fails
        """
        pass

    @abstractmethod
    def validate_requirements(self) -> bool:
        """Check that the store is reachable.

        Returns:
            True if lookups can be served, False otherwise
        """
        pass

    def close(self) -> None:
        """Release any resources held by the store."""
        pass
