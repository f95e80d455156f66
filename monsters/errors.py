"""
Error taxonomy for the monster store.

Expected failures are reported as ``StoreError`` values inside ``Err``
results; exceptions are reserved for conditions a caller cannot recover
from by retrying with different data.
"""
from __future__ import annotations

from enum import Enum


class StoreError(str, Enum):
    """Why a store operation did not happen."""

    WRITE_FAILED = "write_failed"
    NOT_FOUND = "not_found"


class SchemaDowngradeError(RuntimeError):
    """Raised when a store is opened with an older schema version than the file holds."""

    def __init__(self, stored_version: int, requested_version: int):
        self.stored_version = stored_version
        self.requested_version = requested_version
        super().__init__(
            f"Can't downgrade database from version {stored_version} "
            f"to {requested_version}"
        )
