"""CreatePresentationRequest use case implementation"""

from typing import Any, Dict, Optional

from returns.result import Failure, Result, Success

from verifier_exchange.application.pipeline import HookPipeline
from verifier_exchange.application.presentation_request_recorder import PresentationRequestRecorder
from verifier_exchange.application.request_validator import RequestValidator
from verifier_exchange.application.send_request_orchestrator import SendRequestOrchestrator
from verifier_exchange.domain import ExchangeError, HookContext
from verifier_exchange.port.input import CreatePresentationRequest


class CreatePresentationRequestImpl(CreatePresentationRequest):
    """
    Implementation of CreatePresentationRequest.

    Runs the create hooks in order: RequestValidator, SendRequestOrchestrator
    and, when given, PresentationRequestRecorder. The final context payload
    is the result.
    """

    def __init__(
        self,
        validator: RequestValidator,
        orchestrator: SendRequestOrchestrator,
        recorder: Optional[PresentationRequestRecorder] = None,
    ):
        steps = [validator, orchestrator]
        if recorder is not None:
            steps.append(recorder)
        self.pipeline = HookPipeline("presentationRequest.create", steps)

    async def execute(self, data: Any) -> Result[Dict[str, Any], ExchangeError]:
        result = await self.pipeline.run(HookContext.for_request(data))
        if isinstance(result, Failure):
            return result

        return Success(result.unwrap().data)
