"""
FastAPI application - Main entry point
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.dependencies import select_catalog_client
from storefront.api.endpoints.catalog import router as catalog_router
from storefront.api.endpoints.menu import router as menu_router
from storefront.api.endpoints.orders import router as orders_router
from storefront.error_handler import (
    request_validation_exception_handler,
    storefront_exception_handler,
    unhandled_exception_handler,
)
from storefront.errors import StorefrontError
from storefront.integrations.clients.real_http.orders import SquareOrdersClient
from storefront.integrations.contracts.interfaces import CatalogProvider, OrderClient
from storefront.orders.selection import select_order_client
from storefront.orders.submission import OrderSubmission
from storefront.session.store import SessionStore
from storefront.utils.config_loader import StoreConfig, load_store_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVICE_NAME = "Storefront Menu & Order API"
SERVICE_VERSION = "1.0.0"


def create_app(
    config: Optional[StoreConfig] = None,
    catalog_client: Optional[CatalogProvider] = None,
    order_client: Optional[OrderClient] = None,
    orders_api_client: Optional[OrderClient] = None,
) -> FastAPI:
    """
    Build the API with explicit dependencies.

    Args:
        config: Store configuration. Loaded from .env / environment when omitted.
        catalog_client: Catalog source for the catalog routes and new menu sessions.
        order_client: Client used by menu-session checkouts. Chosen from the
            configuration when omitted (simulated when payment config is absent).
        orders_api_client: Client behind POST /orders. Defaults to the direct
            Square Orders client.
    """
    config = config or load_store_config()

    app = FastAPI(
        title=SERVICE_NAME,
        description="Browse the Square menu, build a cart and place orders",
        version=SERVICE_VERSION,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ============================================================================
    # DEPENDENCY INJECTION
    # ============================================================================

    checkout_client = order_client or select_order_client(config)

    app.state.config = config
    app.state.catalog_client = catalog_client or select_catalog_client(config)
    app.state.orders_api_client = orders_api_client or SquareOrdersClient(config)
    app.state.session_store = SessionStore(
        submission_factory=lambda: OrderSubmission(checkout_client, note=config.order_note),
        ttl_seconds=config.session_ttl_seconds,
    )

    app.add_exception_handler(StorefrontError, storefront_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # API versioning: primary prefix is /api/v1; /api is kept as an unversioned alias
    for router in (catalog_router, orders_router, menu_router):
        app.include_router(router, prefix="/api/v1")
        app.include_router(router, prefix="/api")

    @app.get("/", tags=["Health"])
    async def root():
        """Health check endpoint."""
        return {"service": SERVICE_NAME, "status": "healthy", "version": SERVICE_VERSION, "timestamp": datetime.now().isoformat()}

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Which integrations are live and which are simulated."""
        return {
            "status": "healthy",
            "integrations": {
                "catalog": "mock" if config.use_mock_catalog else ("configured" if config.catalog_configured else "missing"),
                "orders": "configured" if config.payments_configured and not config.use_mock_catalog else "simulated",
            },
            "sessions": len(app.state.session_store),
            "timestamp": datetime.now().isoformat(),
        }

    logger.info(
        "Storefront API ready (catalog=%s, checkout client=%s)",
        type(app.state.catalog_client).__name__,
        type(checkout_client).__name__,
    )
    return app


app = create_app()
