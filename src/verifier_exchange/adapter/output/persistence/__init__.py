from verifier_exchange.adapter.output.persistence.in_memory_presentation_request_store import (
    InMemoryPresentationRequestStore,
)
from verifier_exchange.adapter.output.persistence.in_memory_verifier_store import InMemoryVerifierStore

__all__ = ["InMemoryPresentationRequestStore", "InMemoryVerifierStore"]
