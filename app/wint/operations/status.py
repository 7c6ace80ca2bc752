"""Operation status enumeration.

Status codes for operation results, used to classify the outcome of a
resolution, URL build, or cookie operation so callers can branch on it.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        INVALID_INPUT: Input rejected (empty tag list, empty tag, bad cookie key)
        MISSING_CONTEXT: A value required by the selected mode is unavailable
        NOT_FOUND: The requested value is absent (e.g. no language tag cookie)
    """

    SUCCESS = "success"
    INVALID_INPUT = "invalid_input"
    MISSING_CONTEXT = "missing_context"
    NOT_FOUND = "not_found"
