"""Mapping of exchange errors onto HTTP errors"""

from fastapi import HTTPException

from verifier_exchange.api.models import ErrorResponseModel
from verifier_exchange.domain import UpstreamError, ValidationError


def to_http_exception(error: Exception) -> HTTPException:
    """
    Translate a pipeline failure into an HTTPException.

    Validation failures are the client's to fix and name the field. Every
    other failure is reported as a server error without internal detail;
    UpstreamError already carries a generic message.
    """
    if isinstance(error, ValidationError):
        return HTTPException(
            status_code=400,
            detail=ErrorResponseModel(
                error="invalid_request",
                error_description=str(error),
                details={"field": error.field},
            ).model_dump(),
        )

    if isinstance(error, UpstreamError):
        description = str(error)
    else:
        description = "Internal server error."

    return HTTPException(
        status_code=500,
        detail=ErrorResponseModel(error="internal_error", error_description=description).model_dump(),
    )
