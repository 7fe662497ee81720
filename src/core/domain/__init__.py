"""
Domain models and value objects.

Contains the serializable snapshot of an error-tracked value.
"""

from src.core.domain.error_bound_snapshot import (
    SNAPSHOT_SCHEMA_VERSION,
    ErrorBoundSnapshot,
)

__all__ = [
    "SNAPSHOT_SCHEMA_VERSION",
    "ErrorBoundSnapshot",
]
