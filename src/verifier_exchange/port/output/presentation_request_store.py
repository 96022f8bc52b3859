"""Presentation request store port - Interface for created request persistence"""

from abc import ABC, abstractmethod

from returns.result import Result

from verifier_exchange.domain import PresentationRequestNotFound, PresentationRequestRecord


class PresentationRequestStore(ABC):
    """Append-only store of created presentation requests, keyed by uuid"""

    @abstractmethod
    async def save(self, record: PresentationRequestRecord) -> Result[None, Exception]:
        """
        Store a newly created presentation request.

        Args:
            record: Request to store; its uuid must not be stored yet

        Returns:
            Success(None) or Failure(exception)
        """
        pass

    @abstractmethod
    async def get(self, uuid: str) -> Result[PresentationRequestRecord, PresentationRequestNotFound]:
        """
        Retrieve a presentation request by uuid.

        Returns:
            Success(PresentationRequestRecord) or Failure(PresentationRequestNotFound)
        """
        pass
