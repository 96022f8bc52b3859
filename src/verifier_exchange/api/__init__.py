"""API layer - FastAPI surface over the exchange use cases"""

from verifier_exchange.api.app import app, create_app

__all__ = ["app", "create_app"]
