import logging

from fastapi import Request

from storefront.integrations.clients.mocks.local_catalog import LocalCatalogClient
from storefront.integrations.clients.real_http.square_catalog import SquareCatalogClient
from storefront.integrations.contracts.interfaces import CatalogProvider, OrderClient
from storefront.session.store import SessionStore
from storefront.utils.config_loader import StoreConfig

logger = logging.getLogger(__name__)


def select_catalog_client(config: StoreConfig) -> CatalogProvider:
    # The local catalog is opt-in only; a missing token must still surface as an error.
    if config.use_mock_catalog:
        logger.warning("INTEGRATIONS_MODE=%s: serving the local seed catalog", config.integrations_mode)
        return LocalCatalogClient()
    return SquareCatalogClient(config)


def get_config(request: Request) -> StoreConfig:
    return request.app.state.config


def get_catalog_client(request: Request) -> CatalogProvider:
    return request.app.state.catalog_client


def get_orders_api_client(request: Request) -> OrderClient:
    return request.app.state.orders_api_client


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store
