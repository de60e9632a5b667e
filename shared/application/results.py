"""
Tagged Results

Every operation exposed to callers answers with a Result:

    {"success": true, "data": ...}
    {"success": false, "error": "...", "code": "..."}

Domain failures are converted here; anything else propagates.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar
import logging

from shared.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass(frozen=True)
class Result(Generic[T]):
    success: bool
    data: T | None = None
    error: str | None = None
    code: ErrorCode | None = None

    @classmethod
    def ok(cls, data: T | None = None) -> 'Result[T]':
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str, code: ErrorCode) -> 'Result[T]':
        return cls(success=False, error=error, code=code)

    @classmethod
    def from_error(cls, exc: DomainError) -> 'Result[T]':
        return cls.fail(exc.message, exc.code)

    def to_dict(self) -> dict:
        if self.success:
            return {'success': True, 'data': self.data}
        return {'success': False, 'error': self.error, 'code': self.code.value}


def capture(func: Callable[..., Any], *args, **kwargs) -> Result:
    """
    Run func and wrap its outcome in a Result

    DomainError becomes a failed Result. Any other exception is a
    genuine fault and is re-raised untouched.
    """
    try:
        data = func(*args, **kwargs)
    except DomainError as exc:
        logger.warning(f"{getattr(func, '__qualname__', func)} rejected: [{exc.code.value}] {exc.message}")
        return Result.from_error(exc)
    return Result.ok(data)
