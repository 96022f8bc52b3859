"""Tests for PresentationRequestRecorder"""

import copy
import logging

import pytest
from returns.result import Failure, Success

from tests.fakes import SIGNED_BODY
from verifier_exchange.adapter.output.persistence import InMemoryPresentationRequestStore
from verifier_exchange.application import PresentationRequestRecorder
from verifier_exchange.domain import HookContext, PersistenceError, PreconditionError
from verifier_exchange.port.output import PresentationRequestStore


class FailingStore(PresentationRequestStore):
    def __init__(self, error):
        self.error = error

    async def save(self, record):
        return Failure(self.error)

    async def get(self, uuid):
        raise AssertionError("not used")


def _error_records(caplog):
    return [r for r in caplog.records if r.levelno == logging.ERROR]


def _validated(data) -> HookContext:
    context = HookContext(data=data)
    context.mark_validated()
    return context


class TestPresentationRequestRecorder:
    """Tests for PresentationRequestRecorder"""

    @pytest.mark.asyncio
    async def test_records_signed_object(self):
        store = InMemoryPresentationRequestStore()

        result = await PresentationRequestRecorder(store).record(SIGNED_BODY)

        assert result.unwrap().uuid == "pr-0001"
        assert (await store.get("pr-0001")).unwrap() == result.unwrap()

    @pytest.mark.asyncio
    async def test_hook_leaves_payload_untouched(self):
        store = InMemoryPresentationRequestStore()
        context = _validated(SIGNED_BODY)

        result = await PresentationRequestRecorder(store)(context)

        assert result == Success(context)
        assert context.data is SIGNED_BODY
        assert await store.count() == 1

    @pytest.mark.asyncio
    async def test_malformed_signed_object(self, caplog):
        body = copy.deepcopy(SIGNED_BODY)
        del body["presentationRequest"]["uuid"]
        store = InMemoryPresentationRequestStore()

        with caplog.at_level(logging.ERROR):
            result = await PresentationRequestRecorder(store).record(body)

        assert isinstance(result.failure(), PersistenceError)
        assert len(_error_records(caplog)) == 1
        assert await store.count() == 0

    @pytest.mark.asyncio
    async def test_store_failure_returned_unchanged(self, caplog):
        error = PersistenceError("disk full")

        with caplog.at_level(logging.ERROR):
            result = await PresentationRequestRecorder(FailingStore(error))(_validated(SIGNED_BODY))

        assert result.failure() is error
        assert len(_error_records(caplog)) == 1

    @pytest.mark.asyncio
    async def test_unvalidated_context(self, caplog):
        store = InMemoryPresentationRequestStore()

        with caplog.at_level(logging.ERROR):
            result = await PresentationRequestRecorder(store)(HookContext(data=SIGNED_BODY))

        assert isinstance(result.failure(), PreconditionError)
        assert await store.count() == 0
        assert len(_error_records(caplog)) == 1
