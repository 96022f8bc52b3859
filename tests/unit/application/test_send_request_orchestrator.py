"""Tests for SendRequestOrchestrator"""

import logging
from datetime import datetime, timezone

import pytest
from returns.result import Failure, Success

from tests.fakes import SIGNED_BODY, FakeIssuanceClient, FakeVerifierStore
from verifier_exchange.application import AuthTokenRotator, SendRequestOrchestrator
from verifier_exchange.domain import (
    CredentialRequest,
    HookContext,
    PersistenceError,
    PreconditionError,
    UpstreamError,
    VerifierNotFound,
)
from verifier_exchange.port.output import IssuanceProtocolError


def _orchestrator(store, client, config) -> SendRequestOrchestrator:
    return SendRequestOrchestrator(AuthTokenRotator(store, config), client, config)


def _validated_context(payload) -> HookContext:
    context = HookContext.for_request(payload)
    context.mark_validated()
    return context


def _error_records(caplog):
    return [r for r in caplog.records if r.levelno == logging.ERROR]


class TestPrecondition:
    """The orchestrator only runs on validated contexts"""

    @pytest.mark.asyncio
    async def test_unvalidated_context_fails_without_io(self, verifier, exchange_config, create_payload, caplog):
        store = FakeVerifierStore(verifier)
        client = FakeIssuanceClient()
        context = HookContext.for_request(create_payload)

        with caplog.at_level(logging.ERROR):
            result = await _orchestrator(store, client, exchange_config).create(create_payload, context)

        assert isinstance(result, Failure)
        assert isinstance(result.failure(), PreconditionError)
        assert "RequestValidator" in str(result.failure())
        assert client.calls == []
        assert store.get_calls == []
        assert len(_error_records(caplog)) == 1


class TestCreate:
    """Tests for SendRequestOrchestrator.create"""

    @pytest.mark.asyncio
    async def test_same_token_no_patch(self, verifier, exchange_config, create_payload):
        store = FakeVerifierStore(verifier)
        client = FakeIssuanceClient(auth_token="tok-1")
        context = _validated_context(create_payload)

        result = await _orchestrator(store, client, exchange_config).create(create_payload, context)

        assert result == Success(SIGNED_BODY)
        assert context.data is SIGNED_BODY
        assert store.patch_calls == []

    @pytest.mark.asyncio
    async def test_rotated_token_patched_once(self, verifier, exchange_config, create_payload):
        store = FakeVerifierStore(verifier)
        client = FakeIssuanceClient(auth_token="tok-2")
        context = _validated_context(create_payload)

        result = await _orchestrator(store, client, exchange_config).create(create_payload, context)

        assert isinstance(result, Success)
        assert store.patch_calls == [("verifier-uuid-1", {"auth_token": "tok-2"})]

    @pytest.mark.asyncio
    async def test_client_receives_verifier_and_configured_holder_app(self, verifier, exchange_config, create_payload):
        create_payload["metadata"] = {"fields": {"orderId": 7}}
        create_payload["expiresAt"] = "2024-01-15T12:10:00Z"
        client = FakeIssuanceClient()
        context = _validated_context(create_payload)

        await _orchestrator(FakeVerifierStore(verifier), client, exchange_config).create(create_payload, context)

        assert client.calls == [
            (
                "tok-1",
                exchange_config.verifier_did,
                [CredentialRequest(type="Email", issuers=("did:unum:issuer1",))],
                verifier.signing_private_key,
                exchange_config.holder_app_uuid,
                datetime(2024, 1, 15, 12, 10, tzinfo=timezone.utc),
                {"fields": {"orderId": 7}},
            )
        ]

    @pytest.mark.asyncio
    async def test_client_failure_becomes_upstream_error(self, verifier, exchange_config, create_payload, caplog):
        store = FakeVerifierStore(verifier)
        cause = IssuanceProtocolError("502 Bad Gateway")
        client = FakeIssuanceClient(error=cause)
        context = _validated_context(create_payload)

        with caplog.at_level(logging.ERROR):
            result = await _orchestrator(store, client, exchange_config).create(create_payload, context)

        assert isinstance(result, Failure)
        error = result.failure()
        assert isinstance(error, UpstreamError)
        assert str(error) == "Error sending request."
        assert error.cause is cause
        assert store.patch_calls == []
        assert context.data is create_payload
        assert len(_error_records(caplog)) == 1

    @pytest.mark.asyncio
    async def test_client_exception_becomes_upstream_error(self, verifier, exchange_config, create_payload, caplog):
        store = FakeVerifierStore(verifier)
        client = FakeIssuanceClient(raises=ConnectionError("refused"))
        context = _validated_context(create_payload)

        with caplog.at_level(logging.ERROR):
            result = await _orchestrator(store, client, exchange_config).create(create_payload, context)

        assert isinstance(result.failure(), UpstreamError)
        assert isinstance(result.failure().cause, ConnectionError)
        assert store.patch_calls == []
        assert len(_error_records(caplog)) == 1

    @pytest.mark.asyncio
    async def test_patch_failure_passed_through(self, verifier, exchange_config, create_payload):
        error = PersistenceError("write rejected")
        store = FakeVerifierStore(verifier, patch_error=error)
        client = FakeIssuanceClient(auth_token="tok-2")
        context = _validated_context(create_payload)

        result = await _orchestrator(store, client, exchange_config).create(create_payload, context)

        assert isinstance(result, Failure)
        assert result.failure() is error
        assert len(client.calls) == 1

    @pytest.mark.asyncio
    async def test_verifier_not_found(self, exchange_config, create_payload):
        client = FakeIssuanceClient()
        context = _validated_context(create_payload)

        result = await _orchestrator(FakeVerifierStore(), client, exchange_config).create(create_payload, context)

        assert isinstance(result.failure(), VerifierNotFound)
        assert client.calls == []


class TestHook:
    """Tests for SendRequestOrchestrator as a pipeline hook"""

    @pytest.mark.asyncio
    async def test_hands_context_on(self, verifier, exchange_config, create_payload):
        context = _validated_context(create_payload)
        orchestrator = _orchestrator(FakeVerifierStore(verifier), FakeIssuanceClient(), exchange_config)

        result = await orchestrator(context)

        assert result.unwrap() is context
        assert context.data == SIGNED_BODY
