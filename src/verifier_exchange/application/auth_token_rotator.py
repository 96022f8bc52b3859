"""Verifier auth token lifecycle"""

import logging
from typing import Optional

from returns.result import Failure, Result, Success

from verifier_exchange.domain import ExchangeConfig, Verifier, VerifierNotFound
from verifier_exchange.port.output import VerifierEntityStore

logger = logging.getLogger(__name__)


class AuthTokenRotator:
    """
    Resolves the current Verifier and persists rotated auth tokens.

    Rotations are not serialized: two requests rotating the same Verifier
    concurrently both patch, and whichever patch lands last wins. A
    clobbered token is re-derived from the issuance protocol on its next
    use.
    """

    def __init__(self, store: VerifierEntityStore, config: ExchangeConfig):
        self.store = store
        self.config = config

    async def current_verifier(self, did: Optional[str] = None) -> Result[Verifier, VerifierNotFound]:
        """
        Look up the current Verifier record.

        Args:
            did: Verifier DID; defaults to the configured primary Verifier

        Returns:
            Success(Verifier) or Failure(VerifierNotFound)
        """
        verifier_did = did or self.config.verifier_did
        result = await self.store.get({"verifier_did": verifier_did})
        if isinstance(result, Failure):
            logger.error("AuthTokenRotator.current_verifier found no record for %s: %s", verifier_did, result.failure())
        return result

    async def rotate_if_changed(self, verifier: Verifier, new_token: Optional[str]) -> Result[None, Exception]:
        """
        Persist ``new_token`` if it differs from the Verifier's current one.

        Stricter than a plain inequality check: an empty or missing token
        never overwrites the stored one.

        A failed write is logged and handed back unchanged. The issuance
        call that produced the token has already happened and is not
        rolled back.

        Args:
            verifier: Record the token was used with
            new_token: Token returned by the issuance protocol

        Returns:
            Success(None) or Failure(the store's error)
        """
        if not new_token or new_token == verifier.auth_token:
            return Success(None)

        result = await self.store.patch(verifier.id, {"auth_token": new_token})
        if isinstance(result, Failure):
            logger.error(
                "AuthTokenRotator.rotate_if_changed failed to persist the rotated token for verifier %s",
                verifier.id,
                exc_info=result.failure(),
            )
            return result

        logger.info("Rotated auth token for verifier %s", verifier.verifier_did)
        return Success(None)
