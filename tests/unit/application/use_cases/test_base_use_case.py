"""
Unit tests for the base use case pattern.
"""

import pytest

from lancer.application.use_cases.base_use_case import BaseUseCase, UseCaseResult
from lancer.domain.models.base import InvalidInputError


class TestUseCaseResult:
    """Test cases for UseCaseResult."""

    def test_success_result(self):
        """Test creating successful result."""
        result = UseCaseResult.success_result({"id": "tx_1"})

        assert result.success is True
        assert result.data == {"id": "tx_1"}
        assert result.error is None
        assert result.error_code is None

    def test_error_result(self):
        """Test creating error result."""
        result = UseCaseResult.error_result("Something went wrong", "TEST_ERROR")

        assert result.success is False
        assert result.data is None
        assert result.error == "Something went wrong"
        assert result.error_code == "TEST_ERROR"

    def test_from_domain_exception(self):
        """Domain exceptions keep their code."""
        result = UseCaseResult.from_exception(InvalidInputError("paymentIntentId is required"))

        assert result.error == "paymentIntentId is required"
        assert result.error_code == "INVALID_INPUT"

    def test_from_unexpected_exception(self):
        """Anything else is reported as unknown."""
        result = UseCaseResult.from_exception(RuntimeError("connection reset"))

        assert result.error == "connection reset"
        assert result.error_code == "UNKNOWN_ERROR"


class EchoUseCase(BaseUseCase[str, str]):
    """Use case that echoes its input or raises on demand."""

    def __init__(self, error: Exception = None):
        self.error = error

    async def _validate_request(self, request: str) -> None:
        if not request:
            raise InvalidInputError("request is required")

    async def _execute_business_logic(self, request: str) -> str:
        if self.error:
            raise self.error
        return request.upper()


class TestBaseUseCase:
    """Test cases for BaseUseCase.execute."""

    @pytest.mark.asyncio
    async def test_success_carries_timing(self):
        result = await EchoUseCase().execute("hello")

        assert result.success is True
        assert result.data == "HELLO"
        assert "execution_time_seconds" in result.metadata
        assert "executed_at" in result.metadata

    @pytest.mark.asyncio
    async def test_validation_failure(self):
        result = await EchoUseCase().execute("")

        assert result.success is False
        assert result.error_code == "INVALID_INPUT"
        assert result.metadata["exception_type"] == "InvalidInputError"

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_contained(self):
        result = await EchoUseCase(error=KeyError("boom")).execute("hello")

        assert result.success is False
        assert result.error_code == "UNKNOWN_ERROR"
        assert "failed_at" in result.metadata
