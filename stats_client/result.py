"""Explicit success/failure values for upstream calls."""

from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from loguru import logger
from pydantic import ValidationError

from stats_client.errors import FailureKind, UpstreamError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a classified failure."""

    value: T | None = None
    failure: FailureKind | None = None
    message: str = ""

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: FailureKind, message: str = "") -> "Result[T]":
        return cls(failure=kind, message=message)

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def is_transient(self) -> bool:
        return self.failure is not None and self.failure.is_transient

    def value_or(self, default: Any) -> Any:
        return self.value if self.ok else default


async def as_result(coro: Awaitable[T]) -> Result[T]:
    """Await an upstream call and capture its classified failure."""
    try:
        return Result.success(await coro)
    except UpstreamError as e:
        logger.warning("Request failed ({}): {}", e.kind, e.message)
        return Result.fail(e.kind, e.message)
    except ValidationError as e:
        logger.warning("Request returned unexpected shape: {}", e.error_count())
        return Result.fail(FailureKind.MALFORMED_RESPONSE, str(e))
