"""Application configuration: schema, environment variables, YAML files.

The layered loader lives in ``trigger.config.manager``.
"""

from trigger.config.schema import LogLevel, StepConfig, StoreBackend, StoreConfig, TriggerConfig

__all__ = [
    "LogLevel",
    "StepConfig",
    "StoreBackend",
    "StoreConfig",
    "TriggerConfig",
]
