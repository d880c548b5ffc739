"""Result type for use case outcomes

Use cases return a Result instead of raising, so routes decide how each
failure maps onto an HTTP status.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    """Describes why a use case failed"""

    code: str
    message: str
    reason: Optional[str] = None


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value (ok) or an Error (err), never both"""

    value: Optional[T] = None
    error: Optional[Error] = None

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None


class Return:
    """Constructors for Result values"""

    @staticmethod
    def ok(value: T) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
