"""Presentation submission endpoints"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Header
from returns.result import Failure

from verifier_exchange.api.dependencies import get_submit_presentation_use_case
from verifier_exchange.api.errors import to_http_exception
from verifier_exchange.api.models import ErrorResponseModel, SubmissionAcceptedModel
from verifier_exchange.port.input import SubmitPresentation

router = APIRouter(prefix="/presentation", tags=["Presentation"])


@router.post(
    "",
    response_model=SubmissionAcceptedModel,
    summary="Submit presentation",
    description="Holder submits an encrypted presentation; the version header selects the wire format",
    responses={
        400: {"model": ErrorResponseModel},
    },
)
async def submit_presentation(
    data: Optional[Dict[str, Any]] = Body(None),
    version: Optional[str] = Header(None, description="Semantic version of the holder's wire format"),
    submit_uc: SubmitPresentation = Depends(get_submit_presentation_use_case),
) -> SubmissionAcceptedModel:
    """Version-gate a presentation submission"""
    headers = {"version": version} if version is not None else {}
    result = await submit_uc.execute(data, headers)

    if isinstance(result, Failure):
        raise to_http_exception(result.failure())

    submission = result.unwrap()
    return SubmissionAcceptedModel(version=str(submission.version), wire_format=str(submission.wire_format))
