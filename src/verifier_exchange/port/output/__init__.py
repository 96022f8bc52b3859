"""Output ports - Interfaces for external dependencies"""

from verifier_exchange.port.output.issuance_protocol_client import (
    IssuanceProtocolClient,
    IssuanceProtocolError,
    SendRequestResponse,
)
from verifier_exchange.port.output.presentation_request_store import PresentationRequestStore
from verifier_exchange.port.output.verifier_entity_store import VerifierEntityStore

__all__ = [
    # Issuance Protocol
    "IssuanceProtocolClient",
    "IssuanceProtocolError",
    "SendRequestResponse",
    # Presentation Request Store
    "PresentationRequestStore",
    # Verifier Entity Store
    "VerifierEntityStore",
]
