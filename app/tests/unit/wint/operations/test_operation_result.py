"""Unit tests for OperationResult and OperationStatus."""

import pytest

from wint.operations import OperationResult, OperationStatus


@pytest.mark.unit
class TestOperationResult:
    """Tests for the OperationResult factory methods."""

    def test_success_with_data(self):
        """success() carries the payload and the default message."""
        result = OperationResult.success(data="en")

        assert result.is_success
        assert result.status == OperationStatus.SUCCESS
        assert result.data == "en"
        assert result.message == "ok"
        assert result.error_code is None

    def test_success_with_message(self):
        """success() accepts a custom message."""
        result = OperationResult.success(data="es", message="resolved_from_cookie")
        assert result.message == "resolved_from_cookie"

    def test_invalid_input(self):
        """invalid_input() creates a failed result with an error code."""
        result = OperationResult.invalid_input("Bad tags", error_code="INVALID_LANG_TAGS")

        assert not result.is_success
        assert result.status == OperationStatus.INVALID_INPUT
        assert result.error_code == "INVALID_LANG_TAGS"
        assert result.data is None

    def test_missing_context(self):
        """missing_context() uses the MISSING_CONTEXT status."""
        result = OperationResult.missing_context("No host", error_code="HOST_MISSING")

        assert result.status == OperationStatus.MISSING_CONTEXT
        assert result.message == "No host"

    def test_not_found(self):
        """not_found() uses the NOT_FOUND status."""
        result = OperationResult.not_found("No cookie")
        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code is None

    def test_error_with_data(self):
        """error() keeps an optional payload."""
        result = OperationResult.error(
            OperationStatus.INVALID_INPUT, "Bad", error_code="X", data={"k": 1}
        )
        assert result.data == {"k": 1}

    def test_unwrap_or_success(self):
        """unwrap_or() returns the payload on success."""
        assert OperationResult.success(data="en").unwrap_or("arb") == "en"

    def test_unwrap_or_failure(self):
        """unwrap_or() returns the default on failure."""
        result = OperationResult.missing_context("No host")
        assert result.unwrap_or("https://example.com") == "https://example.com"
        assert result.unwrap_or() is None


@pytest.mark.unit
class TestOperationStatus:
    """Tests for OperationStatus values."""

    def test_values(self):
        """Statuses serialize to stable strings."""
        assert OperationStatus.SUCCESS.value == "success"
        assert OperationStatus.INVALID_INPUT.value == "invalid_input"
        assert OperationStatus.MISSING_CONTEXT.value == "missing_context"
        assert OperationStatus.NOT_FOUND.value == "not_found"
