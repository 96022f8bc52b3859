"""Output adapters - Infrastructure implementations of output ports"""

from verifier_exchange.adapter.output.issuance import HttpIssuanceProtocolClient
from verifier_exchange.adapter.output.persistence import InMemoryPresentationRequestStore, InMemoryVerifierStore

__all__ = [
    "HttpIssuanceProtocolClient",
    "InMemoryPresentationRequestStore",
    "InMemoryVerifierStore",
]
