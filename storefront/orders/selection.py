import logging

from storefront.integrations.clients.mocks.orders import SimulatedOrderClient
from storefront.integrations.clients.real_http.orders import InternalOrderEndpointClient, SquareOrdersClient
from storefront.integrations.contracts.interfaces import OrderClient
from storefront.utils.config_loader import StoreConfig

logger = logging.getLogger(__name__)


def select_order_client(config: StoreConfig) -> OrderClient:
    """Pick the order client for the current configuration.

    Missing payment application id or location id means the simulated client;
    results from it are flagged simulated=True.
    """
    if config.use_mock_catalog or not config.payments_configured:
        logger.warning("Square payment configuration missing, orders will be simulated")
        return SimulatedOrderClient(delay_seconds=config.simulated_order_delay_seconds)

    if config.order_endpoint_url:
        return InternalOrderEndpointClient(config.order_endpoint_url, timeout_seconds=config.http_timeout_seconds)

    return SquareOrdersClient(config)
