"""Presentation request creation input

The creation payload arrives as camelCase JSON. RequestValidator checks it
field by field first; the typed records below are only built from payloads
that already passed, so their own checks guard against misuse from code
rather than from clients.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Tuple


def parse_timestamp(value: Any) -> datetime:
    """
    Parse an ISO 8601 timestamp (or pass a datetime through) as aware UTC.

    Raises:
        ValueError: If the value is not a timestamp
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"Not a timestamp: {value!r}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass(frozen=True)
class CredentialRequest:
    """
    Request for one credential type from a set of acceptable issuers.

    Attributes:
        type: Credential type, e.g. "EmailCredential"
        issuers: DIDs of the issuers whose credentials are accepted
        required: Whether the holder must share this credential
    """

    type: str
    issuers: Tuple[str, ...]
    required: bool = True

    def __post_init__(self) -> None:
        if not self.type or not self.type.strip():
            raise ValueError("CredentialRequest type cannot be blank")
        if not self.issuers:
            raise ValueError("CredentialRequest issuers cannot be empty")

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "CredentialRequest":
        return CredentialRequest(
            type=data["type"],
            issuers=tuple(data["issuers"]),
            required=data.get("required", True),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "issuers": list(self.issuers), "required": self.required}


@dataclass(frozen=True)
class PresentationRequestCreateInput:
    """
    A validated request to create a presentation request.

    Exists only for the duration of one create call.
    """

    credential_requests: Tuple[CredentialRequest, ...]
    holder_app_uuid: str
    metadata: Optional[Dict[str, Any]] = None
    expires_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.credential_requests:
            raise ValueError("credential_requests cannot be empty")

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "PresentationRequestCreateInput":
        """Build from the camelCase wire payload"""
        expires_at = data.get("expiresAt")
        return PresentationRequestCreateInput(
            credential_requests=tuple(CredentialRequest.from_dict(cr) for cr in data["credentialRequests"]),
            holder_app_uuid=data["holderAppUuid"],
            metadata=data.get("metadata"),
            expires_at=parse_timestamp(expires_at) if expires_at is not None else None,
        )
