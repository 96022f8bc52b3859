"""Ordered hook pipeline"""

import logging
from typing import Awaitable, Callable, Sequence, Tuple

from returns.result import Failure, Result, Success

from verifier_exchange.domain import ExchangeError, HookContext

logger = logging.getLogger(__name__)

Hook = Callable[[HookContext], Awaitable[Result[HookContext, ExchangeError]]]


class HookPipeline:
    """
    Runs hooks strictly in sequence over one HookContext.

    Each hook either hands the context on or fails; the first Failure
    ends the run and is returned as is. Step order lives in the list
    given here and nowhere else.
    """

    def __init__(self, name: str, steps: Sequence[Hook]):
        self.name = name
        self._steps: Tuple[Hook, ...] = tuple(steps)

    @property
    def steps(self) -> Tuple[Hook, ...]:
        return self._steps

    async def run(self, context: HookContext) -> Result[HookContext, ExchangeError]:
        for step in self._steps:
            result = await step(context)
            if isinstance(result, Failure):
                logger.debug("%s pipeline stopped at %s: %s", self.name, _step_name(step), result.failure())
                return result
            context = result.unwrap()

        return Success(context)


def _step_name(step: Hook) -> str:
    return getattr(step, "__name__", type(step).__name__)
