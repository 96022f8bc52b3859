"""Hand-written doubles for the output ports"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from returns.result import Failure, Result, Success

from verifier_exchange.domain import CredentialRequest, Verifier, VerifierNotFound
from verifier_exchange.port.output import (
    IssuanceProtocolClient,
    IssuanceProtocolError,
    SendRequestResponse,
    VerifierEntityStore,
)

SIGNED_BODY: Dict[str, Any] = {
    "presentationRequest": {
        "uuid": "pr-0001",
        "createdAt": "2024-01-15T12:00:00Z",
        "updatedAt": "2024-01-15T12:00:00Z",
        "expiresAt": "2024-01-15T12:10:00Z",
        "verifier": "did:unum:test-verifier",
        "credentialRequests": [{"type": "EmailCredential", "issuers": ["did:unum:issuer1"], "required": True}],
        "proof": {"type": "JsonWebSignature2020", "jws": "eyJhbGciOiJFUzI1NiJ9..c2ln"},
        "metadata": {},
        "holderAppUuid": "test-holder-app",
    },
    "verifier": {"did": "did:unum:test-verifier", "name": "Test Verifier", "url": "https://verifier.example"},
    "issuers": {"did:unum:issuer1": {"did": "did:unum:issuer1", "name": "Test Issuer"}},
    "deeplink": "https://unumid.co/presentationRequest/pr-0001",
    "qrCode": "data:image/png;base64,iVBORw0KGgo=",
}


class FakeVerifierStore(VerifierEntityStore):
    """VerifierEntityStore double that records every call"""

    def __init__(self, verifier: Optional[Verifier] = None, patch_error: Optional[Exception] = None):
        self.verifier = verifier
        self.patch_error = patch_error
        self.get_calls: List[Mapping[str, Any]] = []
        self.patch_calls: List[tuple] = []

    async def get(self, filter: Mapping[str, Any]) -> Result[Verifier, VerifierNotFound]:
        self.get_calls.append(dict(filter))
        if self.verifier is None or self.verifier.verifier_did != filter.get("verifier_did"):
            return Failure(VerifierNotFound(identifier=str(filter.get("verifier_did"))))
        return Success(self.verifier)

    async def patch(self, verifier_id: str, fields: Mapping[str, Any]) -> Result[None, Exception]:
        self.patch_calls.append((verifier_id, dict(fields)))
        if self.patch_error is not None:
            return Failure(self.patch_error)
        return Success(None)


class FakeIssuanceClient(IssuanceProtocolClient):
    """IssuanceProtocolClient double returning a canned outcome"""

    def __init__(
        self,
        body: Optional[Dict[str, Any]] = None,
        auth_token: Optional[str] = None,
        error: Optional[Exception] = None,
        raises: Optional[Exception] = None,
    ):
        self.body = body if body is not None else SIGNED_BODY
        self.auth_token = auth_token
        self.error = error
        self.raises = raises
        self.calls: List[tuple] = []

    async def send(
        self,
        auth_token: str,
        verifier_did: str,
        credential_requests: Sequence[CredentialRequest],
        signing_private_key: str,
        holder_app_uuid: str,
        expires_at=None,
        metadata=None,
    ) -> Result[SendRequestResponse, IssuanceProtocolError]:
        self.calls.append(
            (auth_token, verifier_did, list(credential_requests), signing_private_key, holder_app_uuid, expires_at, metadata)
        )
        if self.raises is not None:
            raise self.raises
        if self.error is not None:
            return Failure(self.error)
        return Success(SendRequestResponse(body=self.body, auth_token=self.auth_token))

