"""FastAPI application for the verifier exchange service"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from verifier_exchange.api.dependencies import get_container
from verifier_exchange.api.routes import presentation, presentation_request
from verifier_exchange.config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    configure_logging()
    logger.info("Starting verifier exchange API...")

    # keeps a container installed beforehand with set_container()
    container = get_container()
    logger.info("Serving presentation requests for %s", container.get_config().verifier_did)

    yield

    logger.info("Shutting down verifier exchange API...")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Verifier Exchange",
        description="""
        Presentation request orchestration for a verifiable credential Verifier.

        ## Endpoints

        - `POST /presentationRequest` - Create a signed presentation request
        - `POST /presentation` - Submit a presentation (requires a `version` header)
        """,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # TODO: read allowed origins from the environment once a browser UI exists
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(presentation_request.router)
    app.include_router(presentation.router)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint"""
        return JSONResponse(content={"status": "healthy", "service": "verifier-exchange"})

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
