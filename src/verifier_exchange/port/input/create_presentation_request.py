"""Create presentation request use case"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from returns.result import Result

from verifier_exchange.domain import ExchangeError


class CreatePresentationRequest(ABC):
    """
    Use case: Create a signed presentation request for the holder app.

    Flow:
    1. Validate the creation payload
    2. Resolve the primary Verifier
    3. Have the issuance protocol build and sign the request
    4. Persist the Verifier's auth token if the protocol rotated it
    5. Return the signed request object
    """

    @abstractmethod
    async def execute(self, data: Any) -> Result[Dict[str, Any], ExchangeError]:
        """
        Execute the create use case.

        Args:
            data: Creation payload as received ({credentialRequests, holderAppUuid, ...})

        Returns:
            Success(signed presentation request object) or Failure(ExchangeError)
        """
        pass
