from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Iterator, Optional, TypeVar

from statkit.common.logging import get_logger
from statkit.errors import StatkitError

T = TypeVar("T")

log = get_logger(__name__)


class ErrorKind(str, Enum):
    EMPTY_SAMPLE = "EmptySample"
    INVALID_PERCENTILE = "InvalidPercentile"
    INVALID_TRIM = "InvalidTrim"
    INVALID_BIN_COUNT = "InvalidBinCount"
    LENGTH_MISMATCH = "LengthMismatch"
    NEGATIVE_WEIGHT = "NegativeWeight"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a fallible statistic.

    ``ok`` is authoritative: ``value`` on a failed result is a placeholder
    (0.0 for numeric statistics) and must not be trusted.
    Unpacks as ``value, message, ok``.
    """
    value: T
    message: str = ""
    ok: bool = True
    kind: Optional[ErrorKind] = None

    def __iter__(self) -> Iterator[Any]:
        return iter((self.value, self.message, self.ok))

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        if not self.ok:
            raise StatkitError(self.kind, self.message)
        return self.value


def success(value: T) -> Result[T]:
    return Result(value=value)


def failure(kind: ErrorKind, message: str, value: Any = 0.0, **context: Any) -> Result[Any]:
    """Build a failed result; *context* is attached to the debug log event only."""
    log.debug("stat.failure", kind=kind.value, detail=message, **context)
    return Result(value=value, message=f"{kind.value}: {message}", ok=False, kind=kind)
