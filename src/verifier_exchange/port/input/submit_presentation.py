"""Submit presentation use case"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from returns.result import Result

from verifier_exchange.domain import ExchangeError, ValidatedSubmission


class SubmitPresentation(ABC):
    """
    Use case: Accept a holder's encrypted presentation.

    Gates the submission on its ``version`` header and resolves which wire
    format it is in before any verification logic looks at it.
    """

    @abstractmethod
    async def execute(
        self, data: Any, headers: Optional[Mapping[str, str]] = None
    ) -> Result[ValidatedSubmission, ExchangeError]:
        """
        Execute the submit use case.

        Args:
            data: Submission body ({presentationRequestInfo, encryptedPresentation})
            headers: Transport headers; must carry ``version``

        Returns:
            Success(ValidatedSubmission) or Failure(ExchangeError)
        """
        pass
