"""Verifier record"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Verifier:
    """
    A Verifier as held by the entity store.

    Identity is ``verifier_did``; exactly one record is current per DID.
    ``auth_token`` is a capability token issued by the upstream trust
    authority and is only ever compared for equality here.

    Attributes:
        id: Store-assigned record identifier
        verifier_did: Decentralized identifier of the Verifier
        auth_token: Current capability token
        signing_private_key: Key used to sign presentation requests (PEM or JWK JSON)
        updated_at: Last time the record was written
    """

    id: str
    verifier_did: str
    auth_token: str
    signing_private_key: str
    updated_at: datetime

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValueError("Verifier id cannot be blank")
        if not self.verifier_did.startswith("did:"):
            raise ValueError(f"verifier_did must be a DID, got: {self.verifier_did!r}")

    def __repr__(self) -> str:
        # keep secrets out of logs
        return f"Verifier(id={self.id!r}, verifier_did={self.verifier_did!r}, updated_at={self.updated_at!r})"

