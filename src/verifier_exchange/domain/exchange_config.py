"""Exchange service configuration

Holds the process-wide values the pipelines need: which Verifier is the
service's primary one, the holder app presentation requests are addressed
to, and where the issuance service lives. The configuration is injected
into the components that need it at construction time.
"""

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

SUPPORTED_SIGNING_ALGORITHMS: Final[frozenset] = frozenset({"ES256", "ES256K", "ES384", "ES512", "EdDSA", "RS256"})


class ExchangeConfig(BaseModel):
    """
    Configuration for the presentation request exchange.

    Attributes:
        verifier_did: DID of the primary Verifier whose record is used by default
        holder_app_uuid: Holder app every presentation request is addressed to
        issuance_service_url: Base URL of the issuance protocol service
        presentation_request_ttl_seconds: Lifetime of a request when the caller gives no expiry
        signing_algorithm: JWS algorithm used to sign presentation requests
    """

    model_config = ConfigDict(frozen=True)

    verifier_did: str = Field(..., description="DID of the primary Verifier")
    holder_app_uuid: str = Field(..., min_length=1, description="Holder app identifier")
    issuance_service_url: str = Field(..., description="Base URL of the issuance service")
    presentation_request_ttl_seconds: int = Field(600, gt=0, description="Default request lifetime")
    signing_algorithm: str = Field("ES256", description="JWS signing algorithm")

    @field_validator("verifier_did")
    @classmethod
    def validate_verifier_did(cls, v: str) -> str:
        """Validate the verifier identifier is a DID"""
        if not v.startswith("did:") or len(v.split(":")) < 3:
            raise ValueError(f"verifier_did must be a DID (did:<method>:<id>), got: {v}")
        return v

    @field_validator("holder_app_uuid")
    @classmethod
    def validate_holder_app_uuid(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("holder_app_uuid cannot be blank")
        return v

    @field_validator("issuance_service_url")
    @classmethod
    def validate_issuance_service_url(cls, v: str) -> str:
        """Validate the issuance service URL and drop any trailing slash"""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"issuance_service_url must be an http(s) URL, got: {v}")
        return v.rstrip("/")

    @field_validator("signing_algorithm")
    @classmethod
    def validate_signing_algorithm(cls, v: str) -> str:
        if v not in SUPPORTED_SIGNING_ALGORITHMS:
            raise ValueError(
                f"Invalid signing algorithm: {v}. Must be one of {sorted(SUPPORTED_SIGNING_ALGORITHMS)}"
            )
        return v
