"""
Lookup Store Factory

Builds the lookup store described by the store configuration.
"""

import logging

from trigger.config.schema import StoreBackend, StoreConfig
from trigger.steps.errors import ConfigurationError
from trigger.store.base import BaseLookupStore
from trigger.store.memory import InMemoryLookupStore
from trigger.store.sql import SQLLookupStore

logger = logging.getLogger(__name__)


def create_lookup_store(config: StoreConfig) -> BaseLookupStore:
    """Create the lookup store for ``config``.

    Raises:
        ConfigurationError: If the backend is unknown or missing its settings
        LookupStoreError: If the database engine cannot be created
    """
    try:
        backend = StoreBackend(config.backend)
    except ValueError:
        valid_backends = ", ".join(b.value for b in StoreBackend)
        raise ConfigurationError(f"Unknown store backend: {config.backend}. Valid options: {valid_backends}")

    if backend == StoreBackend.MEMORY:
        logger.debug(f"Using in-memory lookup store with tables: {', '.join(config.tables) or 'none'}")
        return InMemoryLookupStore(config.tables)

    if not config.url:
        raise ConfigurationError("store.url is required for the sql backend")

    logger.debug("Using SQL lookup store")
    return SQLLookupStore(config.url, table_prefix=config.table_prefix, echo=config.echo)
