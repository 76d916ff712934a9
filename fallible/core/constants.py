"""Centralized constants for the result algebra.

Categories:
- Messages: default text for failures the library produces
- Log events: event names used for debug logging at the algebra's boundaries

Example:
    >>> from fallible.core.constants import NOT_FOUND_MESSAGE
    >>> NOT_FOUND_MESSAGE
    'Not found'
"""

# =============================================================================
# Messages
# =============================================================================

NOT_FOUND_MESSAGE: str = "Not found"
"""Default message of the NotFoundError produced by wrap_ok_not_none."""


# =============================================================================
# Log Events
# =============================================================================

LOG_EVENT_CAUGHT: str = "result_exception_caught"
"""Logged when catch() captures an exception into the error channel."""

LOG_EVENT_RAISED: str = "result_error_raised"
"""Logged when ok_or_raise() hands an error back as an exception."""

LOG_EVENT_BLOCKED: str = "result_error_blocked"
"""Logged when ok_or_block() hands an error to its aborting callback."""
