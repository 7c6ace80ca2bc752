"""Operation result dataclass.

Uniform result type returned from the language tag operations, carrying
either the produced value or a classified failure.
"""

from typing import Optional, Any
from dataclasses import dataclass

from wint.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- optional payload (a tag, an href, a cookie string...)
        error_code: Optional[str] -- optional machine error code
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Helper property to check if operation was successful.

        Returns:
            True if status is SUCCESS, False otherwise
        """
        return self.status == OperationStatus.SUCCESS

    def unwrap_or(self, default: Any = None) -> Any:
        """Return the payload on success, otherwise ``default``."""
        return self.data if self.is_success else default

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data.

        Args:
            data: Optional payload to include with the result
            message: Human-friendly success message

        Returns:
            OperationResult with SUCCESS status
        """
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create an error OperationResult.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code
            data: Optional payload to include with the error

        Returns:
            OperationResult with specified error status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            data=data,
        )

    @classmethod
    def invalid_input(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create an invalid input error result.

        Use when the caller passed values that can never succeed, such as:
        - An empty language tags list, or one containing an empty string
        - An empty language tag
        - A cookie key or option rejected by the cookie grammar

        Args:
            message: Human-friendly error message
            error_code: Optional machine error code

        Returns:
            OperationResult with INVALID_INPUT status
        """
        return cls.error(OperationStatus.INVALID_INPUT, message, error_code)

    @classmethod
    def missing_context(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a missing context error result.

        Use when the operation could succeed if the caller supplied the
        missing value (host, domain, per-tag host, cookie sink).

        Args:
            message: Human-friendly error message
            error_code: Optional machine error code

        Returns:
            OperationResult with MISSING_CONTEXT status
        """
        return cls.error(OperationStatus.MISSING_CONTEXT, message, error_code)

    @classmethod
    def not_found(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a not found result.

        Args:
            message: Human-friendly message
            error_code: Optional machine error code

        Returns:
            OperationResult with NOT_FOUND status
        """
        return cls.error(OperationStatus.NOT_FOUND, message, error_code)
