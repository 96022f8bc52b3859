"""Send request hook - builds the signed presentation request"""

import logging
from typing import Any, Dict, Mapping, Union

from returns.result import Failure, Result, Success

from verifier_exchange.application.auth_token_rotator import AuthTokenRotator
from verifier_exchange.domain import (
    ExchangeConfig,
    ExchangeError,
    HookContext,
    PreconditionError,
    PresentationRequestCreateInput,
    UpstreamError,
    Verifier,
)
from verifier_exchange.port.output import IssuanceProtocolClient, SendRequestResponse

logger = logging.getLogger(__name__)


class SendRequestOrchestrator:
    """
    Second hook of the create pipeline.

    Must run after RequestValidator; running it on an unvalidated context
    is a wiring defect and fails with PreconditionError before any I/O.
    """

    def __init__(
        self,
        rotator: AuthTokenRotator,
        client: IssuanceProtocolClient,
        config: ExchangeConfig,
    ):
        self.rotator = rotator
        self.client = client
        self.config = config

    async def create(
        self,
        input: Union[PresentationRequestCreateInput, Mapping[str, Any]],
        context: HookContext,
    ) -> Result[Dict[str, Any], Exception]:
        """
        Create the presentation request and replace the context payload with it.

        Flow:
        1. Resolve the current Verifier
        2. Send through the issuance protocol (single attempt)
        3. Persist the auth token if it was rotated
        4. Replace ``context.data`` with the signed object

        Args:
            input: Validated creation input, typed or as the wire payload
            context: Context the validated marker was set on

        Returns:
            Success(signed presentation request object) or Failure(error)
        """
        if not context.is_validated:
            error = PreconditionError()
            logger.error("SendRequestOrchestrator invoked out of order: %s", error)
            return Failure(error)

        if not isinstance(input, PresentationRequestCreateInput):
            input = PresentationRequestCreateInput.from_dict(input)

        verifier_result = await self.rotator.current_verifier()
        if isinstance(verifier_result, Failure):
            return verifier_result
        verifier = verifier_result.unwrap()

        send_result = await self._send(verifier, input)
        if isinstance(send_result, Failure):
            return send_result
        response = send_result.unwrap()

        rotate_result = await self.rotator.rotate_if_changed(verifier, response.auth_token)
        if isinstance(rotate_result, Failure):
            return rotate_result

        context.data = response.body
        return Success(response.body)

    async def _send(
        self, verifier: Verifier, input: PresentationRequestCreateInput
    ) -> Result[SendRequestResponse, UpstreamError]:
        try:
            result = await self.client.send(
                verifier.auth_token,
                verifier.verifier_did,
                list(input.credential_requests),
                verifier.signing_private_key,
                self.config.holder_app_uuid,
                input.expires_at,
                input.metadata,
            )
        except Exception as e:
            result = Failure(e)

        if isinstance(result, Failure):
            cause = result.failure()
            logger.error("SendRequestOrchestrator caught an error from the issuance protocol client", exc_info=cause)
            return Failure(UpstreamError(cause=cause))

        return result

    async def __call__(self, context: HookContext) -> Result[HookContext, ExchangeError]:
        result = await self.create(context.data, context)
        return result.map(lambda _: context)
