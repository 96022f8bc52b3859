"""Application layer - Hooks and use case implementations

Hooks are async callables over a HookContext; use cases compose them into
ordered pipelines.
"""

from verifier_exchange.application.auth_token_rotator import AuthTokenRotator
from verifier_exchange.application.create_presentation_request_impl import CreatePresentationRequestImpl
from verifier_exchange.application.pipeline import Hook, HookPipeline
from verifier_exchange.application.presentation_request_recorder import PresentationRequestRecorder
from verifier_exchange.application.request_validator import RequestValidator
from verifier_exchange.application.send_request_orchestrator import SendRequestOrchestrator
from verifier_exchange.application.submit_presentation_impl import SubmitPresentationImpl
from verifier_exchange.application.version_gate import VersionGate

__all__ = [
    "AuthTokenRotator",
    "CreatePresentationRequestImpl",
    "Hook",
    "HookPipeline",
    "PresentationRequestRecorder",
    "RequestValidator",
    "SendRequestOrchestrator",
    "SubmitPresentationImpl",
    "VersionGate",
]
