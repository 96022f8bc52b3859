"""In-memory implementation of PresentationRequestStore"""

import asyncio
from typing import Dict

from returns.result import Failure, Result, Success

from verifier_exchange.domain import PersistenceError, PresentationRequestNotFound, PresentationRequestRecord
from verifier_exchange.port.output import PresentationRequestStore


class InMemoryPresentationRequestStore(PresentationRequestStore):
    """
    In-memory implementation of PresentationRequestStore.

    Records are kept by uuid. A uuid can be stored once; saving it again
    fails, as a second create never reuses a uuid.
    """

    def __init__(self):
        self._by_uuid: Dict[str, PresentationRequestRecord] = {}
        self._lock = asyncio.Lock()

    async def save(self, record: PresentationRequestRecord) -> Result[None, Exception]:
        async with self._lock:
            if record.uuid in self._by_uuid:
                return Failure(PersistenceError(f"Presentation request {record.uuid} is already recorded"))
            self._by_uuid[record.uuid] = record

        return Success(None)

    async def get(self, uuid: str) -> Result[PresentationRequestRecord, PresentationRequestNotFound]:
        async with self._lock:
            record = self._by_uuid.get(uuid)

        if record is None:
            return Failure(PresentationRequestNotFound(uuid))
        return Success(record)

    async def count(self) -> int:
        async with self._lock:
            return len(self._by_uuid)

    async def clear(self) -> None:
        """Drop all records (useful for testing)"""
        async with self._lock:
            self._by_uuid.clear()
