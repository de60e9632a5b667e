"""HTTP helpers turning tagged results into DRF responses."""

from __future__ import annotations

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.application.results import Result
from shared.domain.errors import ErrorCode

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EXPIRED: status.HTTP_410_GONE,
}


def result_response(result: Result, success_status: int = status.HTTP_200_OK) -> Response:
    if result.success:
        return Response(result.to_dict(), status=success_status)
    return Response(result.to_dict(), status=STATUS_BY_CODE[result.code])


def invalid_input_response(errors) -> Response:
    """Flatten serializer errors into a single validation_error envelope."""

    messages = []
    for field_name, field_errors in errors.items():
        if not isinstance(field_errors, (list, tuple)):
            field_errors = [field_errors]
        for error in field_errors:
            if field_name == "non_field_errors":
                messages.append(str(error))
            else:
                messages.append(f"{field_name}: {error}")
    result = Result.fail("; ".join(messages) or "Invalid input", ErrorCode.VALIDATION_ERROR)
    return result_response(result)


# Largest primary key a bigint column can hold
MAX_DB_ID = 2**63 - 1


def path_id(pk) -> int | None:
    """URL primary key as an int, or None when no row could carry it."""

    value = int(pk)
    return value if 0 < value <= MAX_DB_ID else None


def not_found_response(message: str) -> Response:
    return result_response(Result.fail(message, ErrorCode.NOT_FOUND))
