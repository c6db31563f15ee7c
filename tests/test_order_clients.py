"""Tests for the live order clients and the client selection."""

import dataclasses
import json

import httpx
import pytest

from storefront.errors import ConfigurationMissing, ProviderError, TransportError
from storefront.integrations.clients.mocks.orders import SimulatedOrderClient
from storefront.integrations.clients.real_http.orders import (
    InternalOrderEndpointClient,
    SquareOrdersClient,
    to_minor_units,
)
from storefront.integrations.contracts.interfaces import OrderLineItem, OrderRequest
from storefront.orders import select_order_client
from storefront.utils.config_loader import StoreConfig


@pytest.fixture
def order_request():
    return OrderRequest(
        line_items=[
            OrderLineItem(
                name="Coffee - Regular",
                quantity=2,
                price=3.5,
                currency="USD",
                catalog_object_id="VAR-REG",
                variation_name="Regular",
            )
        ],
    )


def _endpoint_client(handler):
    return InternalOrderEndpointClient("https://shop.test/api/orders", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_internal_endpoint_posts_order_request(order_request):
    bodies = []

    def handler(request):
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"success": True, "data": {"order": {"id": "ORD-1"}}})

    result = await _endpoint_client(handler).create_order(order_request)

    assert result.order_id == "ORD-1"
    assert result.payment_id == ""
    assert result.simulated is False
    assert bodies == [
        {
            "line_items": [
                {
                    "name": "Coffee - Regular",
                    "quantity": 2,
                    "price": 3.5,
                    "currency": "USD",
                    "catalog_object_id": "VAR-REG",
                    "variation_name": "Regular",
                }
            ],
            "customer_id": "",
            "note": "Order from web app",
        }
    ]


@pytest.mark.asyncio
async def test_internal_endpoint_failure_carries_error_message(order_request):
    def handler(request):
        return httpx.Response(200, json={"success": False, "error": "x"})

    with pytest.raises(ProviderError) as exc_info:
        await _endpoint_client(handler).create_order(order_request)

    assert exc_info.value.message == "x"


@pytest.mark.asyncio
async def test_internal_endpoint_failure_without_message(order_request):
    def handler(request):
        return httpx.Response(500, json={"success": False})

    with pytest.raises(ProviderError) as exc_info:
        await _endpoint_client(handler).create_order(order_request)

    assert exc_info.value.message == "Failed to create order"
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_internal_endpoint_network_failure(order_request):
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(TransportError) as exc_info:
        await _endpoint_client(handler).create_order(order_request)

    assert exc_info.value.message == "Failed to process order"


@pytest.mark.asyncio
async def test_square_orders_client_builds_square_payload(live_config, order_request):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"order": {"id": "SQ-1", "location_id": "LOC-1", "state": "OPEN"}})

    client = SquareOrdersClient(live_config, transport=httpx.MockTransport(handler))
    result = await client.create_order(order_request)

    assert result.order_id == "SQ-1"
    assert result.raw["state"] == "OPEN"

    request = seen[0]
    assert request.url.path == "/v2/orders"
    assert request.headers["Authorization"] == "Bearer test-token"
    body = json.loads(request.content)
    assert body["idempotency_key"]
    assert body["order"]["location_id"] == "LOC-1"
    assert body["order"]["line_items"] == [{"quantity": "2", "catalog_object_id": "VAR-REG"}]
    assert body["order"]["metadata"] == {"note": "Order from web app"}
    assert "customer_id" not in body["order"]


@pytest.mark.asyncio
async def test_square_orders_client_ad_hoc_line_uses_base_price(live_config):
    seen = []

    def handler(request):
        seen.append(json.loads(request.content))
        return httpx.Response(200, json={"order": {"id": "SQ-2"}})

    request = OrderRequest(
        line_items=[OrderLineItem("Tip - Default", 1, 2.1, "USD", "", "Default")],
        customer_id="CUST-1",
    )
    await SquareOrdersClient(live_config, transport=httpx.MockTransport(handler)).create_order(request)

    order = seen[0]["order"]
    assert order["customer_id"] == "CUST-1"
    assert order["line_items"] == [
        {"name": "Tip - Default", "quantity": "1", "base_price_money": {"amount": 210, "currency": "USD"}}
    ]


@pytest.mark.asyncio
async def test_square_orders_client_passes_provider_error(live_config, order_request):
    def handler(request):
        return httpx.Response(400, json={"errors": [{"code": "INVALID_VALUE", "detail": "Invalid location"}]})

    client = SquareOrdersClient(live_config, transport=httpx.MockTransport(handler))
    with pytest.raises(ProviderError) as exc_info:
        await client.create_order(order_request)

    assert exc_info.value.message == "Invalid location"
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_square_orders_client_requires_location(order_request):
    client = SquareOrdersClient(StoreConfig(square_access_token="tok"))
    with pytest.raises(ConfigurationMissing):
        await client.create_order(order_request)


def test_to_minor_units_rounds_half_up():
    assert to_minor_units(3.5) == 350
    assert to_minor_units(0.285) == 29
    assert to_minor_units(19.99) == 1999


def test_selection_without_payment_config_is_simulated(config):
    client = select_order_client(config)
    assert isinstance(client, SimulatedOrderClient)
    assert client.delay_seconds == 0


def test_selection_with_only_application_id_is_simulated():
    config = StoreConfig(square_application_id="app", square_access_token="tok")
    assert isinstance(select_order_client(config), SimulatedOrderClient)


def test_selection_with_payment_config_is_square(live_config):
    assert isinstance(select_order_client(live_config), SquareOrdersClient)


def test_selection_prefers_configured_order_endpoint(live_config):
    config = live_config.model_copy(update={"order_endpoint_url": "https://shop.test/api/orders"})
    client = select_order_client(config)
    assert isinstance(client, InternalOrderEndpointClient)
    assert client.endpoint_url == "https://shop.test/api/orders"


@pytest.mark.asyncio
async def test_simulated_client_keeps_no_request_history():
    async def no_sleep(seconds):
        return None

    client = SimulatedOrderClient(delay_seconds=0, sleep=no_sleep)
    request = OrderRequest(line_items=[OrderLineItem("Coffee - Regular", 1, 3.5, "USD", "VAR-REG", "Regular")])
    for _ in range(50):
        result = await client.create_order(request)

    assert result.simulated is True
    assert not hasattr(client, "requests")


def test_order_request_carries_only_what_is_sent():
    assert [f.name for f in dataclasses.fields(OrderRequest)] == ["line_items", "customer_id", "note"]
    assert OrderRequest(line_items=[]).note == "Order from web app"
