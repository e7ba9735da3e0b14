"""
Application factory for the Tensor actions API.

This module builds the FastAPI application, sets up middleware, registers the
route table, and manages the Tensor client lifecycle.
"""

from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tensor_actions import __version__
from tensor_actions.clients.tensor_client import TensorClient
from tensor_actions.config import AppConfig, get_app_config
from tensor_actions.constants import ACTIONS_CORS_HEADERS, ACTIONS_CORS_METHODS, OPENAPI_TAG
from tensor_actions.logging_config import configure_logging, get_logger
from tensor_actions.middleware.logging_middleware import LoggingMiddleware
from tensor_actions.routes import system
from tensor_actions.routes.bid_nft import build_router
from tensor_actions.utils.error_handler import register_error_handlers

logger = get_logger(__name__)

# API Documentation tags
tags_metadata = [
    {
        "name": OPENAPI_TAG,
        "description": "Solana Actions for buying or making an offer on a Tensor NFT",
    },
    {
        "name": "system",
        "description": "Health check and Actions path mapping",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle events.

    Creates the shared HTTP client and the Tensor client unless one was
    supplied to `create_application`, and closes them at shutdown.
    """
    config: AppConfig = app.state.config
    configure_logging(config.server.log_level)

    http_client: Optional[httpx.AsyncClient] = None
    if getattr(app.state, "tensor_client", None) is None:
        http_client = httpx.AsyncClient(
            base_url=config.tensor.api_url,
            timeout=config.tensor.timeout,
        )
        app.state.tensor_client = TensorClient(
            config=config.tensor,
            http_client=http_client,
            solana_config=config.solana,
        )

    logger.info(
        "Application initialized",
        base_path=config.actions.base_path,
        environment=config.server.environment,
    )

    yield  # Application is running here

    logger.info("Application shutting down")
    if http_client is not None:
        await app.state.tensor_client.close()
        await http_client.aclose()
        app.state.tensor_client = None
    logger.info("Shutdown complete")


def create_application(config: Optional[AppConfig] = None,
                       tensor_client: Optional[TensorClient] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Application configuration, read from the environment by default
        tensor_client: Optional pre-built Tensor client; its lifecycle is then
            owned by the caller

    Returns:
        The configured FastAPI application
    """
    config = config or get_app_config()

    app = FastAPI(
        title="Tensor Bid NFT Actions",
        description="Solana Actions that buy or place an offer on an NFT listed on Tensor.",
        version=__version__,
        openapi_tags=tags_metadata,
        debug=config.server.debug,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.actions_config = config.actions
    app.state.tensor_client = tensor_client

    # Actions clients call from any origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.actions.cors_origins,
        allow_methods=ACTIONS_CORS_METHODS,
        allow_headers=ACTIONS_CORS_HEADERS,
    )
    app.add_middleware(LoggingMiddleware)

    register_error_handlers(app)

    app.include_router(build_router(config.actions.base_path))
    app.include_router(system.router)

    return app


app = create_application()
