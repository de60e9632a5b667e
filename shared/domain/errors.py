"""
Domain Errors

Typed failures raised by command handlers. Every error carries an
ErrorCode so the application layer can turn it into a failed Result
instead of letting it escape as an unexpected fault.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes surfaced to API callers"""
    VALIDATION_ERROR = 'validation_error'   # fix the input before retrying
    NOT_FOUND = 'not_found'                 # refresh state, the row is gone
    CONFLICT = 'conflict'                   # capacity or single-hold rule
    EXPIRED = 'expired'                     # hold is past the grace window


class DomainError(Exception):
    """Base class for expected, typed domain failures"""

    code: ErrorCode = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(DomainError):
    code = ErrorCode.VALIDATION_ERROR


class NotFound(DomainError):
    code = ErrorCode.NOT_FOUND


class Conflict(DomainError):
    code = ErrorCode.CONFLICT


class HoldExpired(DomainError):
    code = ErrorCode.EXPIRED
