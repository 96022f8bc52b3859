"""Configuration module"""

from verifier_exchange.config.loader import (
    create_test_config,
    load_config_from_env,
    load_or_create_config,
)
from verifier_exchange.config.logging_setup import configure_logging

__all__ = ["load_config_from_env", "create_test_config", "load_or_create_config", "configure_logging"]
