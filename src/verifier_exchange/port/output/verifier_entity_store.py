"""Verifier entity store port - Interface for Verifier persistence"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from returns.result import Result

from verifier_exchange.domain import Verifier, VerifierNotFound


class VerifierEntityStore(ABC):
    """
    Key-value store of Verifier records.

    The exchange core depends on this narrow interface only; the backing
    engine (in-memory, SQL, ...) is an adapter concern. Writes carry no
    version check, so concurrent patches of the same record are
    last-write-wins.
    """

    @abstractmethod
    async def get(self, filter: Mapping[str, Any]) -> Result[Verifier, VerifierNotFound]:
        """
        Retrieve the single Verifier matching every field of ``filter``.

        Args:
            filter: Field name to expected value, e.g. {"verifier_did": "did:unum:..."}

        Returns:
            Success(Verifier) or Failure(VerifierNotFound)
        """
        pass

    @abstractmethod
    async def patch(self, verifier_id: str, fields: Mapping[str, Any]) -> Result[None, Exception]:
        """
        Update fields of an existing Verifier.

        Args:
            verifier_id: Record identifier
            fields: Field name to new value

        Returns:
            Success(None) or Failure(exception)
        """
        pass
