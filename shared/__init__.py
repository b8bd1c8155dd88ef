"""
Shared infrastructure for Standoff backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Record store backends and factory
- repository: Base repository over the record store
- exceptions: Base exception classes
- log_config: Root logger setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    RecordStore,
    MemoryRecordStore,
    JsonFileRecordStore,
    get_record_store,
    reset_store_cache,
)
from .exceptions import (
    StandoffError,
    NotFoundError,
    ValidationError,
    BusinessRuleError,
    AuthorizationError,
    StorageError,
)
from .models import CamelModel, now_ms

__all__ = [
    "Settings",
    "get_settings",
    "RecordStore",
    "MemoryRecordStore",
    "JsonFileRecordStore",
    "get_record_store",
    "reset_store_cache",
    "StandoffError",
    "NotFoundError",
    "ValidationError",
    "BusinessRuleError",
    "AuthorizationError",
    "StorageError",
    "CamelModel",
    "now_ms",
]
