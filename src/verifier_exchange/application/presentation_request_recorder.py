"""Records created presentation requests"""

import logging
from typing import Any, Mapping

from returns.result import Failure, Result, Success

from verifier_exchange.domain import (
    ExchangeError,
    HookContext,
    PersistenceError,
    PreconditionError,
    PresentationRequestRecord,
)
from verifier_exchange.port.output import PresentationRequestStore

logger = logging.getLogger(__name__)


class PresentationRequestRecorder:
    """
    Last hook of the create pipeline.

    Stores the signed object SendRequestOrchestrator left in the context.
    The context payload itself is handed on untouched. A failed write does
    not undo the registration with the issuance service.
    """

    def __init__(self, store: PresentationRequestStore):
        self.store = store

    async def record(self, signed: Mapping[str, Any]) -> Result[PresentationRequestRecord, Exception]:
        """
        Store a signed presentation request.

        Returns:
            Success(PresentationRequestRecord), Failure(PersistenceError) for a
            malformed signed object, or Failure(the store's error)
        """
        try:
            record = PresentationRequestRecord.from_signed(signed)
        except ValueError as e:
            logger.error("PresentationRequestRecorder received a malformed signed object", exc_info=e)
            return Failure(PersistenceError(f"Cannot record presentation request: {e}"))

        result = await self.store.save(record)
        if isinstance(result, Failure):
            logger.error(
                "PresentationRequestRecorder failed to store presentation request %s",
                record.uuid,
                exc_info=result.failure(),
            )
            return result

        logger.info("Recorded presentation request %s for %s", record.uuid, record.verifier)
        return Success(record)

    async def __call__(self, context: HookContext) -> Result[HookContext, ExchangeError]:
        if not context.is_validated:
            error = PreconditionError()
            logger.error("PresentationRequestRecorder invoked out of order: %s", error)
            return Failure(error)

        result = await self.record(context.data)
        return result.map(lambda _: context)
