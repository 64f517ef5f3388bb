"""REST API module for the NFT marketplace.

This module provides HTTP endpoints for:
- Active listings, overall and per owner
- Purchases per buyer address
- Collection floor price and traded volume

Every request is answered from a fresh subgraph query; nothing is cached.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from config import load_config
from subgraph import SubgraphClient
from .errors import register_error_handlers

logger = logging.getLogger(__name__)

def create_app(
    settings: Optional[Dict[str, Any]] = None,
    client: Optional[SubgraphClient] = None
) -> FastAPI:
    """Create the API application.

    Args:
        settings: Validated settings. Loaded from settings.conf at startup if
                  neither settings nor client is given.
        client: Optional subgraph client. If not provided, one is created from
                settings at startup and closed at shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle startup and shutdown events."""
        owned_client = None
        if getattr(app.state, 'subgraph_client', None) is None:
            conf = settings or load_config()
            owned_client = SubgraphClient(conf['subgraph_endpoint'], timeout=conf['request_timeout'])
            app.state.subgraph_client = owned_client
        logger.info(f"Querying subgraph at {app.state.subgraph_client.endpoint}")

        yield

        if owned_client is not None:
            logger.info("Closing subgraph client...")
            owned_client.close()
            app.state.subgraph_client = None

    app = FastAPI(
        title="NFT Marketplace API",
        description="Read API over NFT marketplace listings and purchases",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.subgraph_client = client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log method, path, status and duration of every request."""
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.2f}ms)"
        )
        return response

    register_error_handlers(app)

    from .listings import router as listings_router
    from .purchases import router as purchases_router
    from .collections import router as collections_router

    app.include_router(listings_router)
    app.include_router(purchases_router)
    app.include_router(collections_router)

    return app

app = create_app()

__all__ = ['app', 'create_app']
