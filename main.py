"""Main entry point for the termweb FastAPI application.

This module creates and configures the FastAPI app that exposes one shared,
in-memory Unix-like shell session over HTTP.

To run the development server:
    uvicorn main:app --reload --port 3000

To run in production:
    uvicorn main:app --host 0.0.0.0 --port 3000

or simply ``python main.py``, which binds to TERMWEB_HOST / TERMWEB_PORT.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from api.config import ServerSettings
from api.dependencies import initialize_shell_session, shutdown_shell_session
from api.exceptions import (
    generic_exception_handler,
    request_validation_exception_handler,
    runtime_error_handler,
    validation_exception_handler,
)
from api.models import HealthResponse
from api.routes import command as command_routes
from api.routes import session as session_routes

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

settings = ServerSettings.from_env()


def configure_logging(level: str) -> None:
    """Configure the root logger for the server process.

    Args:
        level: Logging level name (e.g. "INFO").
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events.

    Creates the shared shell session at startup and discards it at shutdown.
    Nothing is persisted between runs.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    configure_logging(settings.log_level)
    logger.info("Starting termweb - initializing shell session")
    initialize_shell_session()

    yield

    logger.info("Shutting down termweb")
    shutdown_shell_session()


app = FastAPI(
    title="termweb",
    description="A single shared in-memory Unix-like shell session over HTTP",
    version=__version__,
    lifespan=lifespan,
)

# The browser terminal is served from a different origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Specific exceptions before general ones
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(RuntimeError, runtime_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(command_routes.router)
app.include_router(session_routes.router)


@app.get("/")
async def root():
    """Root endpoint - returns a welcome message.

    Returns:
        A dictionary with a welcome message.
    """
    return {
        "message": "Welcome to termweb",
        "version": __version__,
        "docs_url": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint for monitoring."""
    return HealthResponse(status="healthy")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
