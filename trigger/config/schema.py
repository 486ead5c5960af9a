"""
Configuration schema and data models for trigger-lookup.

This module defines the application configuration:
- Logging settings
- Lookup store backend (SQL database or inline in-memory tables)
- The step to run and its settings
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from enum import Enum


class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class StoreBackend(Enum):
    """Supported lookup store backends."""
    SQL = "sql"
    MEMORY = "memory"


DEFAULT_DATABASE_URL = "sqlite:///trigger.db"


@dataclass
class StoreConfig:
    """Configuration for the lookup store.

    Attributes:
        backend: Store backend (sql or memory)
        url: SQLAlchemy database URL for the sql backend
        table_prefix: Prefix the host puts in front of table names
        echo: Log every SQL statement
        tables: Inline rows for the memory backend, keyed by table name
    """
    backend: str = StoreBackend.SQL.value
    url: str = DEFAULT_DATABASE_URL
    table_prefix: str = ""
    echo: bool = False
    tables: Dict[str, List[Dict[str, Any]]] = field(default_factory=dict)


@dataclass
class StepConfig:
    """Which step to run and its settings.

    Attributes:
        type: Step type name
        settings: Raw settings validated by the step itself
    """
    type: str = "event_lookup"
    settings: Dict[str, Any] = field(default_factory=dict)


@dataclass
class TriggerConfig:
    """Complete trigger-lookup configuration."""

    log_level: str = LogLevel.INFO.value
    log_file: Optional[str] = None

    store: StoreConfig = field(default_factory=StoreConfig)
    step: StepConfig = field(default_factory=StepConfig)

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        # Validate log level
        try:
            LogLevel(self.log_level)
        except ValueError:
            valid_levels = [l.value for l in LogLevel]
            errors.append(f"Invalid log_level '{self.log_level}'. Valid options: {valid_levels}")

        # Validate store backend
        try:
            backend = StoreBackend(self.store.backend)
        except ValueError:
            valid_backends = [b.value for b in StoreBackend]
            errors.append(f"Invalid store.backend '{self.store.backend}'. Valid options: {valid_backends}")
            backend = None

        if backend == StoreBackend.SQL and not self.store.url:
            errors.append("store.url is required for the sql backend")

        if not isinstance(self.store.tables, dict):
            errors.append("store.tables must be a mapping of table name to rows")
        else:
            for table, rows in self.store.tables.items():
                if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
                    errors.append(f"store.tables.{table} must be a list of rows")

        if not self.step.type:
            errors.append("step.type is required")

        return errors
