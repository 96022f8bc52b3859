"""Adapter layer - Infrastructure implementations"""

from verifier_exchange.adapter.output import (
    HttpIssuanceProtocolClient,
    InMemoryPresentationRequestStore,
    InMemoryVerifierStore,
)

__all__ = [
    "HttpIssuanceProtocolClient",
    "InMemoryPresentationRequestStore",
    "InMemoryVerifierStore",
]
