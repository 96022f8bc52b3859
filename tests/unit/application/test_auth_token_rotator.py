"""Tests for AuthTokenRotator"""

import logging

import pytest
from returns.result import Failure, Success

from tests.fakes import FakeVerifierStore
from verifier_exchange.application import AuthTokenRotator
from verifier_exchange.domain import PersistenceError, VerifierNotFound


class TestCurrentVerifier:
    """Tests for AuthTokenRotator.current_verifier"""

    @pytest.mark.asyncio
    async def test_defaults_to_configured_did(self, verifier, exchange_config):
        store = FakeVerifierStore(verifier)
        rotator = AuthTokenRotator(store, exchange_config)

        result = await rotator.current_verifier()

        assert result == Success(verifier)
        assert store.get_calls == [{"verifier_did": exchange_config.verifier_did}]

    @pytest.mark.asyncio
    async def test_not_found(self, exchange_config, caplog):
        rotator = AuthTokenRotator(FakeVerifierStore(), exchange_config)

        with caplog.at_level(logging.ERROR):
            result = await rotator.current_verifier("did:unum:unknown")

        assert isinstance(result, Failure)
        assert isinstance(result.failure(), VerifierNotFound)
        assert "did:unum:unknown" in caplog.text


class TestRotateIfChanged:
    """Tests for AuthTokenRotator.rotate_if_changed"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("new_token", ["tok-1", None, ""])
    async def test_no_patch_when_unchanged_or_absent(self, verifier, exchange_config, new_token):
        store = FakeVerifierStore(verifier)
        result = await AuthTokenRotator(store, exchange_config).rotate_if_changed(verifier, new_token)

        assert result == Success(None)
        assert store.patch_calls == []

    @pytest.mark.asyncio
    async def test_patches_rotated_token(self, verifier, exchange_config):
        store = FakeVerifierStore(verifier)
        result = await AuthTokenRotator(store, exchange_config).rotate_if_changed(verifier, "tok-2")

        assert result == Success(None)
        assert store.patch_calls == [("verifier-uuid-1", {"auth_token": "tok-2"})]

    @pytest.mark.asyncio
    async def test_patch_failure_returned_unchanged(self, verifier, exchange_config, caplog):
        error = PersistenceError("disk full")
        store = FakeVerifierStore(verifier, patch_error=error)

        with caplog.at_level(logging.ERROR):
            result = await AuthTokenRotator(store, exchange_config).rotate_if_changed(verifier, "tok-2")

        assert isinstance(result, Failure)
        assert result.failure() is error
        assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == 1
