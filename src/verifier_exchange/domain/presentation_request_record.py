"""Record of a created presentation request"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Tuple

from verifier_exchange.domain.presentation_request import CredentialRequest, parse_timestamp


@dataclass(frozen=True)
class PresentationRequestRecord:
    """
    A presentation request as signed and registered by the issuance protocol.

    Kept so that later submissions can be matched against the request they
    answer. Written once per successful create, never updated.

    Attributes:
        uuid: Identifier assigned when the request was built
        created_at: Creation time stamped into the signed request
        updated_at: Last update time stamped into the signed request
        expires_at: Expiry, if the request carries one
        verifier: DID of the requesting Verifier
        credential_requests: Credentials asked for
        proof: Signature block over the request
        metadata: Caller metadata attached to the request
        holder_app_uuid: Holder app the request is addressed to
        deeplink: Link the holder app opens the request with
        qr_code: QR-encodable payload of the deeplink
        verifier_info: Display information about the Verifier (did, name, url)
        issuer_info: Display information about the accepted issuers, keyed by DID
    """

    uuid: str
    created_at: datetime
    updated_at: datetime
    expires_at: Optional[datetime]
    verifier: str
    credential_requests: Tuple[CredentialRequest, ...]
    proof: Dict[str, Any]
    metadata: Dict[str, Any]
    holder_app_uuid: str
    deeplink: str
    qr_code: str
    verifier_info: Dict[str, Any] = field(default_factory=dict)
    issuer_info: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.uuid or not self.uuid.strip():
            raise ValueError("PresentationRequestRecord uuid cannot be blank")

    @staticmethod
    def from_signed(body: Mapping[str, Any]) -> "PresentationRequestRecord":
        """
        Build from the signed object the issuance protocol returns.

        Raises:
            ValueError: If the object lacks a field the record needs
        """
        try:
            request = body["presentationRequest"]
            expires_at = request.get("expiresAt")
            return PresentationRequestRecord(
                uuid=request["uuid"],
                created_at=parse_timestamp(request["createdAt"]),
                updated_at=parse_timestamp(request["updatedAt"]),
                expires_at=parse_timestamp(expires_at) if expires_at is not None else None,
                verifier=request["verifier"],
                credential_requests=tuple(CredentialRequest.from_dict(cr) for cr in request["credentialRequests"]),
                proof=request["proof"],
                metadata=request.get("metadata") or {},
                holder_app_uuid=request["holderAppUuid"],
                deeplink=body["deeplink"],
                qr_code=body["qrCode"],
                verifier_info=body.get("verifier") or {},
                issuer_info=body.get("issuers") or {},
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Malformed signed presentation request: missing or invalid {e}") from e
