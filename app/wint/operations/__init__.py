"""Operation result types and status enums.

This module contains the standardized result type returned by the language
tag operations, and the status enum used to classify their outcome.
"""

from wint.operations.result import OperationResult
from wint.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
