"""Issuance protocol client over HTTP, signing with joserfc"""

import json
import logging
import uuid
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Sequence

import httpx
from joserfc import jws
from joserfc.jwk import ECKey, OKPKey, RSAKey
from returns.result import Failure, Result, Success

from verifier_exchange.domain import Clock, CredentialRequest, ExchangeConfig
from verifier_exchange.port.output import (
    IssuanceProtocolClient,
    IssuanceProtocolError,
    SendRequestResponse,
)

logger = logging.getLogger(__name__)

PRESENTATION_REQUEST_PATH = "/presentationRequest"
AUTH_TOKEN_HEADER = "x-auth-token"
PROOF_TYPE = "JsonWebSignature2020"


def _iso(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


def canonical_json(value: Dict[str, Any]) -> bytes:
    """Deterministic JSON encoding used as the signing input"""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class HttpIssuanceProtocolClient(IssuanceProtocolClient):
    """
    IssuanceProtocolClient talking to the issuance service over HTTP.

    Builds the unsigned presentation request, signs its canonical JSON with
    the Verifier's key as a compact JWS, and posts it to
    ``{issuance_service_url}/presentationRequest`` using the Verifier's auth
    token as bearer credential. The service answers with the registered
    request (deeplink, QR code, ...) and may hand back a rotated token in
    the ``x-auth-token`` header.
    """

    def __init__(
        self,
        config: ExchangeConfig,
        clock: Clock,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        """
        Args:
            config: Exchange configuration (service URL, TTL, algorithm)
            clock: Clock for request timestamps
            http_client: Shared client; a short-lived one is opened per send otherwise
            timeout: Timeout for short-lived clients, in seconds
        """
        self.config = config
        self.clock = clock
        self._http_client = http_client
        self.timeout = timeout

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
        try:
            unsigned = self.build_unsigned_request(
                verifier_did, credential_requests, holder_app_uuid, expires_at, metadata
            )
            signed = self.sign(unsigned, signing_private_key, verifier_did)
        except Exception as e:
            return Failure(IssuanceProtocolError(f"Failed to sign presentation request: {e}"))

        try:
            response = await self._post(signed, auth_token)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            return Failure(
                IssuanceProtocolError(f"Issuance service responded with HTTP {e.response.status_code}")
            )
        except httpx.RequestError as e:
            return Failure(IssuanceProtocolError(f"Issuance service request failed: {e}"))
        except ValueError as e:
            return Failure(IssuanceProtocolError(f"Issuance service returned invalid JSON: {e}"))

        logger.debug("Registered presentation request %s", unsigned["uuid"])
        return Success(SendRequestResponse(body=body, auth_token=self._rotated_token(response) or auth_token))

    def build_unsigned_request(
        self,
        verifier_did: str,
        credential_requests: Sequence[CredentialRequest],
        holder_app_uuid: str,
        expires_at: Optional[datetime] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Build the presentation request payload before signing.

        Requests without an explicit expiry live for the configured TTL.
        """
        now = self.clock.now()
        expires = expires_at or now + timedelta(seconds=self.config.presentation_request_ttl_seconds)

        return {
            "uuid": str(uuid.uuid4()),
            "createdAt": _iso(now),
            "updatedAt": _iso(now),
            "expiresAt": _iso(expires),
            "verifier": verifier_did,
            "credentialRequests": [cr.to_dict() for cr in credential_requests],
            "holderAppUuid": holder_app_uuid,
            "metadata": metadata or {},
        }

    def sign(self, unsigned: Dict[str, Any], signing_private_key: str, verifier_did: str) -> Dict[str, Any]:
        """Attach a JWS proof over the canonical JSON of ``unsigned``"""
        algorithm = self.config.signing_algorithm
        key = self._load_key(signing_private_key)
        token = jws.serialize_compact({"alg": algorithm}, canonical_json(unsigned), key, algorithms=[algorithm])

        proof = {
            "type": PROOF_TYPE,
            "created": unsigned["createdAt"],
            "verificationMethod": verifier_did,
            "proofPurpose": "assertionMethod",
            "jws": token,
        }
        return {**unsigned, "proof": proof}

    async def _post(self, payload: Dict[str, Any], auth_token: str) -> httpx.Response:
        url = f"{self.config.issuance_service_url}{PRESENTATION_REQUEST_PATH}"
        headers = {"Authorization": f"Bearer {auth_token}"}

        if self._http_client is not None:
            return await self._http_client.post(url, json=payload, headers=headers)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(url, json=payload, headers=headers)

    def _rotated_token(self, response: httpx.Response) -> Optional[str]:
        value = response.headers.get(AUTH_TOKEN_HEADER)
        if not value:
            return None
        if value.lower().startswith("bearer "):
            value = value[len("bearer "):]
        return value.strip() or None

    def _load_key(self, signing_private_key: str):
        """
        Load the signing key from a PEM string or a JWK JSON string.

        Raises:
            ValueError: If the key type is not supported
        """
        text = signing_private_key.strip()
        if text.startswith("{"):
            jwk_dict = json.loads(text)
            kty = jwk_dict.get("kty")
            if kty == "EC":
                return ECKey.import_key(jwk_dict)
            elif kty == "RSA":
                return RSAKey.import_key(jwk_dict)
            elif kty == "OKP":
                return OKPKey.import_key(jwk_dict)
            raise ValueError(f"Unsupported key type: {kty}")

        algorithm = self.config.signing_algorithm
        if algorithm.startswith("ES"):
            return ECKey.import_key(text)
        elif algorithm.startswith("RS"):
            return RSAKey.import_key(text)
        elif algorithm == "EdDSA":
            return OKPKey.import_key(text)
        raise ValueError(f"Unsupported signing algorithm for PEM keys: {algorithm}")
