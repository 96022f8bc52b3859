"""Dependency injection container for FastAPI"""

from typing import Optional

from verifier_exchange.adapter import (
    HttpIssuanceProtocolClient,
    InMemoryPresentationRequestStore,
    InMemoryVerifierStore,
)
from verifier_exchange.application import (
    AuthTokenRotator,
    CreatePresentationRequestImpl,
    PresentationRequestRecorder,
    RequestValidator,
    SendRequestOrchestrator,
    SubmitPresentationImpl,
    VersionGate,
)
from verifier_exchange.config import load_or_create_config
from verifier_exchange.domain import Clock, ExchangeConfig, SystemClock
from verifier_exchange.port.input import CreatePresentationRequest, SubmitPresentation
from verifier_exchange.port.output import IssuanceProtocolClient, PresentationRequestStore, VerifierEntityStore


class DependencyContainer:
    """
    Dependency injection container for the exchange service.

    Manages singleton instances of adapters, hooks and use cases. Any of
    the configuration, stores or issuance client can be supplied up front,
    which is how tests swap in fakes.
    """

    def __init__(
        self,
        config: Optional[ExchangeConfig] = None,
        verifier_store: Optional[VerifierEntityStore] = None,
        issuance_client: Optional[IssuanceProtocolClient] = None,
        clock: Optional[Clock] = None,
        presentation_request_store: Optional[PresentationRequestStore] = None,
    ):
        self._config = config
        self._clock = clock
        self._verifier_store = verifier_store
        self._issuance_client = issuance_client
        self._presentation_request_store = presentation_request_store
        self._rotator: Optional[AuthTokenRotator] = None
        self._create_presentation_request: Optional[CreatePresentationRequest] = None
        self._submit_presentation: Optional[SubmitPresentation] = None

    def get_config(self) -> ExchangeConfig:
        """Get exchange configuration"""
        if self._config is None:
            self._config = load_or_create_config()
        return self._config

    def get_clock(self) -> Clock:
        if self._clock is None:
            self._clock = SystemClock()
        return self._clock

    def get_verifier_store(self) -> VerifierEntityStore:
        """Get Verifier entity store (singleton)"""
        if self._verifier_store is None:
            self._verifier_store = InMemoryVerifierStore(clock=self.get_clock())
        return self._verifier_store

    def get_presentation_request_store(self) -> PresentationRequestStore:
        """Get presentation request store (singleton)"""
        if self._presentation_request_store is None:
            self._presentation_request_store = InMemoryPresentationRequestStore()
        return self._presentation_request_store

    def get_issuance_client(self) -> IssuanceProtocolClient:
        """Get issuance protocol client (singleton)"""
        if self._issuance_client is None:
            self._issuance_client = HttpIssuanceProtocolClient(config=self.get_config(), clock=self.get_clock())
        return self._issuance_client

    def get_auth_token_rotator(self) -> AuthTokenRotator:
        if self._rotator is None:
            self._rotator = AuthTokenRotator(store=self.get_verifier_store(), config=self.get_config())
        return self._rotator

    def get_create_presentation_request(self) -> CreatePresentationRequest:
        """Get CreatePresentationRequest use case (singleton)"""
        if self._create_presentation_request is None:
            self._create_presentation_request = CreatePresentationRequestImpl(
                validator=RequestValidator(),
                orchestrator=SendRequestOrchestrator(
                    rotator=self.get_auth_token_rotator(),
                    client=self.get_issuance_client(),
                    config=self.get_config(),
                ),
                recorder=PresentationRequestRecorder(store=self.get_presentation_request_store()),
            )
        return self._create_presentation_request

    def get_submit_presentation(self) -> SubmitPresentation:
        """Get SubmitPresentation use case (singleton)"""
        if self._submit_presentation is None:
            self._submit_presentation = SubmitPresentationImpl(version_gate=VersionGate())
        return self._submit_presentation


# Global container instance
_container: Optional[DependencyContainer] = None


def get_container() -> DependencyContainer:
    """Get or create global dependency container"""
    global _container
    if _container is None:
        _container = DependencyContainer()
    return _container


def set_container(container: DependencyContainer) -> None:
    """Set global dependency container (useful for testing)"""
    global _container
    _container = container


# FastAPI dependency functions
def get_create_presentation_request_use_case() -> CreatePresentationRequest:
    """FastAPI dependency for CreatePresentationRequest use case"""
    return get_container().get_create_presentation_request()


def get_submit_presentation_use_case() -> SubmitPresentation:
    """FastAPI dependency for SubmitPresentation use case"""
    return get_container().get_submit_presentation()
