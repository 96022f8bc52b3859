"""In-memory implementation of VerifierEntityStore"""

import asyncio
from dataclasses import fields, replace
from typing import Any, Dict, List, Mapping

from returns.result import Failure, Result, Success

from verifier_exchange.domain import Clock, PersistenceError, Verifier, VerifierNotFound
from verifier_exchange.port.output import VerifierEntityStore

# updated_at is stamped by the store itself
PATCHABLE_FIELDS = frozenset(f.name for f in fields(Verifier)) - {"id", "updated_at"}
_MISSING = object()


class InMemoryVerifierStore(VerifierEntityStore):
    """
    In-memory implementation of VerifierEntityStore.

    Records are kept by id. Lookups scan the records and match every filter
    field; the store keeps at most one record per DID, so a DID lookup
    yields the current Verifier.

    Guarded by an asyncio.Lock per operation only, so concurrent patches of
    one record are last-write-wins.
    """

    def __init__(self, clock: Clock):
        """
        Args:
            clock: Clock used to stamp updated_at on writes
        """
        self.clock = clock
        self._by_id: Dict[str, Verifier] = {}
        self._lock = asyncio.Lock()

    async def save(self, verifier: Verifier) -> Result[None, Exception]:
        """
        Insert or replace a Verifier.

        A record for the same DID under another id is replaced, keeping one
        current record per DID.
        """
        try:
            async with self._lock:
                stale = [
                    record_id
                    for record_id, record in self._by_id.items()
                    if record.verifier_did == verifier.verifier_did and record_id != verifier.id
                ]
                for record_id in stale:
                    del self._by_id[record_id]
                self._by_id[verifier.id] = verifier

            return Success(None)
        except Exception as e:
            return Failure(PersistenceError(f"Failed to save verifier {verifier.id}: {e}"))

    async def get(self, filter: Mapping[str, Any]) -> Result[Verifier, VerifierNotFound]:
        identifier = ", ".join(f"{key}={value}" for key, value in filter.items())

        async with self._lock:
            matches: List[Verifier] = [
                record
                for record in self._by_id.values()
                if all(getattr(record, key, _MISSING) == value for key, value in filter.items())
            ]

        if not matches:
            return Failure(VerifierNotFound(identifier=identifier))

        # most recently written wins if a filter is loose enough to hit several records
        return Success(max(matches, key=lambda record: record.updated_at))

    async def patch(self, verifier_id: str, fields: Mapping[str, Any]) -> Result[None, Exception]:
        unknown = set(fields) - PATCHABLE_FIELDS
        if unknown:
            return Failure(PersistenceError(f"Cannot patch verifier fields: {sorted(unknown)}"))

        try:
            async with self._lock:
                record = self._by_id.get(verifier_id)
                if record is None:
                    return Failure(VerifierNotFound(identifier=verifier_id))

                self._by_id[verifier_id] = replace(record, **fields, updated_at=self.clock.now())

            return Success(None)
        except Exception as e:
            return Failure(PersistenceError(f"Failed to patch verifier {verifier_id}: {e}"))

    async def count(self) -> int:
        async with self._lock:
            return len(self._by_id)

    async def clear(self) -> None:
        """Drop all records (useful for testing)"""
        async with self._lock:
            self._by_id.clear()

