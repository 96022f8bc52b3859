"""SubmitPresentation use case implementation"""

from typing import Any, Mapping, Optional

from returns.result import Failure, Result, Success

from verifier_exchange.application.pipeline import HookPipeline
from verifier_exchange.application.version_gate import VALIDATED_SUBMISSION, VersionGate
from verifier_exchange.domain import ExchangeError, HookContext, ValidatedSubmission
from verifier_exchange.port.input import SubmitPresentation


class SubmitPresentationImpl(SubmitPresentation):
    """
    Implementation of SubmitPresentation.

    The before-create hooks are just the version gate; verification of the
    presentation itself happens downstream, keyed on the negotiated
    wire format.
    """

    def __init__(self, version_gate: VersionGate):
        self.pipeline = HookPipeline("presentation.create", [version_gate])

    async def execute(
        self, data: Any, headers: Optional[Mapping[str, str]] = None
    ) -> Result[ValidatedSubmission, ExchangeError]:
        result = await self.pipeline.run(HookContext.for_request(data, headers))
        if isinstance(result, Failure):
            return result

        return Success(result.unwrap().params[VALIDATED_SUBMISSION])
