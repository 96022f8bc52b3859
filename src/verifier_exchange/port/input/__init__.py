"""Input ports - Use case interfaces"""

from verifier_exchange.port.input.create_presentation_request import CreatePresentationRequest
from verifier_exchange.port.input.submit_presentation import SubmitPresentation

__all__ = [
    "CreatePresentationRequest",
    "SubmitPresentation",
]
