"""
Operation outcomes for coordinate parsing and conversion.

Every public engine operation returns an ``OperationOutcome``: either a
``Success`` carrying the produced value or a ``Failure`` carrying a
human-readable message and a structured ``ErrorKind``. Internally the parsers
raise ``CoordinateError``; the outcome-returning wrappers catch it at their
boundary so callers never see an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(Enum):
    """Category of a failed coordinate operation."""

    EMPTY_INPUT = "empty_input"
    UNRECOGNIZED_FORMAT = "unrecognized_format"
    MISSING_COMPONENT = "missing_component"
    OUT_OF_RANGE = "out_of_range"
    WRONG_AXIS_DIRECTION = "wrong_axis_direction"
    UNSUPPORTED_OPERATION = "unsupported_operation"


class CoordinateError(ValueError):
    """Raised by the parsers when coordinate text cannot be interpreted.

    Attributes:
        kind: Structured error category.
        message: Human-readable description suitable for end users.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def to_failure(self) -> Failure:
        return Failure(message=self.message, kind=self.kind)


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome wrapping the produced value."""

    data: T

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        data = self.data.to_dict() if hasattr(self.data, "to_dict") else self.data
        return {"success": True, "data": data}


@dataclass(frozen=True)
class Failure:
    """Failed outcome with the message surfaced verbatim to the user."""

    message: str
    kind: ErrorKind = ErrorKind.UNRECOGNIZED_FORMAT

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "error": self.message, "kind": self.kind.value}


OperationOutcome = Union[Success[T], Failure]


def capture(func: Callable[..., T], *args: Any, **kwargs: Any) -> OperationOutcome[T]:
    """Call ``func`` and convert a raised ``CoordinateError`` into a ``Failure``.

    Only ``CoordinateError`` is captured; anything else is a programming error
    and propagates.
    """
    try:
        return Success(func(*args, **kwargs))
    except CoordinateError as e:
        return e.to_failure()


@dataclass(frozen=True)
class BatchItemOutcome(Generic[T]):
    """Outcome of one batch line, tagged with its position in the input.

    Attributes:
        index: Zero-based position of the line in the batch input.
        outcome: Result of processing that line.
    """

    index: int
    outcome: OperationOutcome[T]

    @property
    def success(self) -> bool:
        return self.outcome.success

    @property
    def data(self) -> T | None:
        return self.outcome.data if isinstance(self.outcome, Success) else None

    @property
    def message(self) -> str | None:
        return self.outcome.message if isinstance(self.outcome, Failure) else None

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, **self.outcome.to_dict()}
