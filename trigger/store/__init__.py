"""Lookup stores: read-only sources lookup steps resolve labels from."""

from trigger.store.base import BaseLookupStore
from trigger.store.memory import InMemoryLookupStore
from trigger.store.sql import SQLLookupStore
from trigger.store.factory import create_lookup_store

__all__ = [
    "BaseLookupStore",
    "InMemoryLookupStore",
    "SQLLookupStore",
    "create_lookup_store",
]
