"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypeVar, Generic
from dataclasses import dataclass
from datetime import datetime, timezone

from lancer.domain.models.base import DomainException


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_code: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            metadata=metadata
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "UseCaseResult[T]":
        """Create error result from exception."""
        if isinstance(exc, DomainException):
            return cls.error_result(exc.message, exc.code)
        return cls.error_result(str(exc) or type(exc).__name__, "UNKNOWN_ERROR")


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Provides common structure and error handling.

    Every exception raised while handling a request is converted into an
    error result here, so callers never see a raw provider exception.
    """

    async def execute(self, request: T) -> UseCaseResult[R]:
        """
        Execute the use case with proper error handling and logging.
        """
        started = datetime.now(timezone.utc)

        try:
            await self._validate_request(request)
            result = await self._execute_business_logic(request)
        except DomainException as exc:
            logger.warning(f"{type(self).__name__} failed: {exc.code}: {exc.message}")
            return self._with_timing(UseCaseResult.from_exception(exc), started, exc)
        except Exception as exc:
            logger.exception(f"{type(self).__name__} failed unexpectedly")
            return self._with_timing(UseCaseResult.from_exception(exc), started, exc)

        return self._with_timing(UseCaseResult.success_result(result), started)

    @staticmethod
    def _with_timing(
        result: UseCaseResult,
        started: datetime,
        exc: Optional[Exception] = None
    ) -> UseCaseResult:
        finished = datetime.now(timezone.utc)
        metadata = {"execution_time_seconds": (finished - started).total_seconds()}
        if exc is None:
            metadata["executed_at"] = finished.isoformat()
        else:
            metadata["failed_at"] = finished.isoformat()
            metadata["exception_type"] = type(exc).__name__
        result.metadata = metadata
        return result

    async def _validate_request(self, request: T) -> None:
        """
        Validate the request. Override in subclasses if needed.
        """
        pass

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass
