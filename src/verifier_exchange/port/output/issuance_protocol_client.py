"""Issuance protocol client port - Interface to the presentation request signer"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from returns.result import Result

from verifier_exchange.domain import CredentialRequest


class IssuanceProtocolError(Exception):
    """The issuance protocol call failed"""

    pass


@dataclass(frozen=True)
class SendRequestResponse:
    """
    Outcome of a successful send.

    Attributes:
        body: Signed presentation request object, including at least a
            deeplink and a QR-encodable payload. Never modified downstream.
        auth_token: Verifier auth token to use from now on. Equal to the
            token sent unless the issuance service rotated it.
    """

    body: Dict[str, Any]
    auth_token: Optional[str]


class IssuanceProtocolClient(ABC):
    """
    Client for the external issuance protocol.

    Owns construction and signing of presentation requests. Implementations
    make a single attempt; retrying is left to callers because a send may
    not be idempotent on the issuance side.
    """

    @abstractmethod
    async def send(
        self,
        auth_token: str,
        verifier_did: str,
        credential_requests: Sequence[CredentialRequest],
        signing_private_key: str,
        holder_app_uuid: str,
        expires_at: Optional[datetime] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Result[SendRequestResponse, IssuanceProtocolError]:
        """
        Create, sign and register a presentation request.

        Args:
            auth_token: Verifier's current auth token
            verifier_did: DID of the requesting Verifier
            credential_requests: Credentials asked for
            signing_private_key: Verifier's signing key
            holder_app_uuid: Holder app the request is addressed to
            expires_at: Optional expiry; the client applies its default otherwise
            metadata: Optional caller metadata attached to the request

        Returns:
            Success(SendRequestResponse) or Failure(IssuanceProtocolError)
        """
        pass
