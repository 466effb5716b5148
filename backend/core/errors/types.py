"""Result and error types.

Engine operations never raise for expected failures (unknown case label,
malformed name, no matching rule, unreadable table). They return ``Ok`` or
``Err`` and the caller decides: the API turns ``Err`` into a JSON error
response, the CLI prints it and exits non-zero.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Generic, Iterable, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Error codes, grouped by thousands.

    E2xxx: the caller sent something unusable
    E5xxx: input is well formed but the tables cannot decline it
    E6xxx: rule or gender source could not be loaded
    E9xxx: bugs
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2030_INVALID_CASE = 2030
    E2031_MALFORMED_NAME = 2031

    # Declension (E5xxx)
    E5000_BUSINESS_GENERIC = 5000
    E5030_GENDER_UNDETERMINED = 5030
    E5031_INFLECTION_FAILED = 5031

    # Resource (E6xxx)
    E6020_CONFIG_LOAD_FAILED = 6020

    # Internal (E9xxx)
    E9001_UNEXPECTED_ERROR = 9001

    @property
    def category(self) -> str:
        return _CATEGORIES.get(self.value // 1000, "internal")

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS.get(self.category, 500)


_CATEGORIES = {2: "validation", 5: "business", 6: "resource"}
_HTTP_STATUS = {"validation": 400, "business": 422}


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Where and when an error was produced."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""


@dataclass(frozen=True, slots=True)
class AppError:
    """Typed error value.

    ``metadata`` carries the offending input (word, part type, case label,
    source path) so it can be logged and returned without parsing
    ``message``. ``cause`` keeps the underlying exception, if any.
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def with_correlation_id(self, correlation_id: str | None) -> AppError:
        """Copy of this error traced under ``correlation_id``, when one is given."""
        if not correlation_id:
            return self
        context = ErrorContext(
            correlation_id=correlation_id,
            timestamp=self.context.timestamp,
            origin=self.context.origin,
        )
        return AppError(self.code, self.message, context, self.metadata, self.cause)

    def to_dict(self) -> dict:
        """JSON body for API error responses."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def and_then(self, f: Callable[[T], Result[U, AppError]]) -> Result[U, AppError]:
        return f(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable) -> Err[E]:
        return self

    def and_then(self, f: Callable) -> Err[E]:
        return self


Result = Union[Ok[T], Err[E]]


def sequence_results(results: Iterable[Result[T, AppError]]) -> Result[list[T], AppError]:
    """Collect the values of ``results`` in order.

    Stops at the first ``Err`` and returns it; a generator passed in is not
    consumed past that point.
    """
    values: list[T] = []
    for result in results:
        match result:
            case Ok(value):
                values.append(value)
            case Err():
                return result
    return Ok(values)
