"""
In-Memory Lookup Store

Serves lookups from rows held in plain dictionaries. Used as a fake in
tests and for inline fixtures in configuration files.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from trigger.store.base import BaseLookupStore
from trigger.steps.errors import LookupStoreError

logger = logging.getLogger(__name__)


def _keys_match(row_value: Any, key_value: Any) -> bool:
    # Rows written in YAML may quote their ids: "7" matches 7
    return row_value == key_value or str(row_value) == str(key_value)


class InMemoryLookupStore(BaseLookupStore):
    """Lookup store backed by ``{table: [row, ...]}``.

    Example:
        >>> store = InMemoryLookupStore({"groups": [{"id": 7, "identifier": "G7"}]})
        >>> store.lookup("groups", "id", 7, "identifier")
        'G7'
    """

    def __init__(self, tables: Optional[Mapping[str, Iterable[Mapping[str, Any]]]] = None):
        self._tables: Dict[str, List[Dict[str, Any]]] = {}
        for name, rows in (tables or {}).items():
            self._tables[name] = [dict(row) for row in rows]

    def lookup(self, table: str, key_column: str, key_value: Any, value_column: str) -> Optional[Any]:
        if table not in self._tables:
            raise LookupStoreError(f"Unknown table: {table}", table=table)

        for row in self._tables[table]:
            if key_column in row and _keys_match(row[key_column], key_value):
                return row.get(value_column)

        logger.debug(f"No row in {table} with {key_column}={key_value!r}")
        return None

    def validate_requirements(self) -> bool:
        return True
