"""Library-level error codes (machine-readable).

Error codes follow SUBJECT_REASON naming convention and are attached to
every exception in ``fallible.core.errors``.
"""

from enum import Enum


class ErrorCode(Enum):
    """Library-level error codes (machine-readable)."""

    # Absent values promoted into the error channel
    NOT_FOUND = "not_found"

    # Boundary operations
    UNWRAP_FAILED = "unwrap_failed"
    BLOCK_RETURNED = "block_returned"
