"""
Contract Validation Module

Модуль для валидации JSON контрактов float64-error-bounds.
Схемы поставляются внутри пакета (src/core/contracts/schema).
"""

from .validators import (
    ERROR_BOUND_SNAPSHOT_SCHEMA,
    ContractValidator,
    ErrorBoundSnapshotValidator,
    SchemaLoader,
    get_schema_loader,
    validate_error_bound_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ErrorBoundSnapshotValidator",
    # Functions
    "get_schema_loader",
    "validate_error_bound_snapshot",
    # Constants
    "ERROR_BOUND_SNAPSHOT_SCHEMA",
]
