"""Presentation request endpoints"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from returns.result import Failure

from verifier_exchange.api.dependencies import get_create_presentation_request_use_case
from verifier_exchange.api.errors import to_http_exception
from verifier_exchange.api.models import ErrorResponseModel
from verifier_exchange.port.input import CreatePresentationRequest

router = APIRouter(prefix="/presentationRequest", tags=["Presentation Request"])


@router.post(
    "",
    status_code=201,
    summary="Create presentation request",
    description="Validate the request, have it signed by the issuance protocol and return the signed object",
    responses={
        400: {"model": ErrorResponseModel},
        500: {"model": ErrorResponseModel},
    },
)
async def create_presentation_request(
    data: Optional[Dict[str, Any]] = Body(None),
    create_uc: CreatePresentationRequest = Depends(get_create_presentation_request_use_case),
) -> Dict[str, Any]:
    """
    Create a signed presentation request.

    The response body is the issuance protocol's signed object as is,
    including its deeplink and QR code payload.
    """
    result = await create_uc.execute(data)

    if isinstance(result, Failure):
        raise to_http_exception(result.failure())

    return result.unwrap()
