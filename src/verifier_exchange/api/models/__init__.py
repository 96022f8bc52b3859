"""API models - Response DTOs

Request bodies are taken as raw JSON so the hook pipelines, not the web
framework, decide which field is reported missing first.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class SubmissionAcceptedModel(BaseModel):
    """Response to an accepted presentation submission"""

    status: str = Field("accepted", description="Processing status")
    version: str = Field(..., description="Negotiated version")
    wire_format: str = Field(..., description="Wire-format generation selected by the version")


class ErrorResponseModel(BaseModel):
    """Standard error response"""

    error: str = Field(..., description="Error code")
    error_description: str = Field(..., description="Human-readable error description")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
