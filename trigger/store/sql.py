"""
SQL Lookup Store

Serves lookups from a relational database through SQLAlchemy Core.
Table and column names are quoted by the dialect, and the key value is
always passed as a bound parameter.
"""

import logging
from typing import Any, Optional, Union

import sqlalchemy as sa
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from trigger.store.base import BaseLookupStore
from trigger.steps.errors import LookupStoreError

logger = logging.getLogger(__name__)


class SQLLookupStore(BaseLookupStore):
    """Lookup store backed by a SQLAlchemy engine.

    Attributes:
        engine: Engine used for all queries
        table_prefix: Prefix the host puts in front of every table name
    """

    def __init__(self, engine: Union[Engine, str], table_prefix: str = "", echo: bool = False):
        """Initialize the store.

        Args:
            engine: An existing engine or a database URL
            table_prefix: Prefix added to every logical table name (e.g. ``mdl_``)
            echo: Log emitted SQL (only used when a URL is given)
        """
        if isinstance(engine, str):
            try:
                engine = sa.create_engine(engine, echo=echo)
            except (SQLAlchemyError, ValueError) as e:
                raise LookupStoreError(f"Cannot create database engine: {e}", original_error=e)
        self.engine = engine
        self.table_prefix = table_prefix or ""

    def _build_query(self, table: str, key_column: str, key_value: Any, value_column: str):
        table_clause = sa.table(
            f"{self.table_prefix}{table}",
            sa.column(key_column),
            sa.column(value_column),
        )
        return (
            sa.select(table_clause.c[value_column])
            .where(table_clause.c[key_column] == key_value)
            .limit(1)
        )

    def lookup(self, table: str, key_column: str, key_value: Any, value_column: str) -> Optional[Any]:
        query = self._build_query(table, key_column, key_value, value_column)
        try:
            with self.engine.connect() as connection:
                value = connection.execute(query).scalar()
        except SQLAlchemyError as e:
            raise LookupStoreError(
                f"Lookup of {value_column} in {self.table_prefix}{table} failed: {e}",
                table=table,
                original_error=e,
            )

        logger.debug(f"{self.table_prefix}{table}.{value_column} for {key_column}={key_value!r}: {value!r}")
        return value

    def validate_requirements(self) -> bool:
        try:
            with self.engine.connect() as connection:
                connection.execute(sa.text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Lookup store not available: {e}")
            return False

    def close(self) -> None:
        self.engine.dispose()
