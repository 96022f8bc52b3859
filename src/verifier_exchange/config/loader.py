"""Configuration loader for the exchange service"""

import logging
import os

from verifier_exchange.domain import ExchangeConfig

logger = logging.getLogger(__name__)


def load_config_from_env() -> ExchangeConfig | None:
    """
    Load exchange configuration from environment variables.

    Environment variables:
    - VERIFIER_DID: DID of the primary Verifier
    - HOLDER_APP_UUID: Holder app presentation requests are addressed to
    - ISSUANCE_SERVICE_URL: Base URL of the issuance service
    - PRESENTATION_REQUEST_TTL_SECONDS: Default request lifetime (default: 600)
    - VERIFIER_SIGNING_ALGORITHM: JWS signing algorithm (default: ES256)

    Returns:
        ExchangeConfig if the environment is properly configured, None otherwise
    """
    verifier_did = os.getenv("VERIFIER_DID")
    holder_app_uuid = os.getenv("HOLDER_APP_UUID")
    issuance_service_url = os.getenv("ISSUANCE_SERVICE_URL")

    if not all([verifier_did, holder_app_uuid, issuance_service_url]):
        return None

    return ExchangeConfig(
        verifier_did=verifier_did,
        holder_app_uuid=holder_app_uuid,
        issuance_service_url=issuance_service_url,
        presentation_request_ttl_seconds=int(os.getenv("PRESENTATION_REQUEST_TTL_SECONDS", "600")),
        signing_algorithm=os.getenv("VERIFIER_SIGNING_ALGORITHM", "ES256"),
    )


def create_test_config() -> ExchangeConfig:
    """
    Create a configuration for tests and local development.

    Points at a local issuance service; nothing here is secret.
    """
    return ExchangeConfig(
        verifier_did="did:unum:test-verifier",
        holder_app_uuid="test-holder-app",
        issuance_service_url="http://localhost:3000",
        presentation_request_ttl_seconds=600,
        signing_algorithm="ES256",
    )


def load_or_create_config() -> ExchangeConfig:
    """
    Load configuration from the environment or fall back to the test config.

    Returns:
        ExchangeConfig
    """
    config = load_config_from_env()
    if config is None:
        logger.warning("No environment configuration found, using test config")
        config = create_test_config()
    else:
        logger.info("Loaded configuration from environment for %s", config.verifier_did)

    return config
