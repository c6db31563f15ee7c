"""
Real Order HTTP Clients.

Two live ways to create an order:
- InternalOrderEndpointClient posts the provider-agnostic order request to the
  storefront's own order endpoint (ORDER_ENDPOINT_URL), e.g. when the API is
  deployed separately from the menu sessions.
- SquareOrdersClient creates the order directly with the Square Orders API.

Neither captures a payment; the resulting payment id is always empty.
"""

from __future__ import annotations

import logging
import uuid
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

import httpx

from storefront.errors import ConfigurationMissing, ProviderError, TransportError
from storefront.integrations.contracts.interfaces import OrderClient, OrderLineItem, OrderRequest, OrderResult
from storefront.integrations.contracts.orders import order_request_to_payload
from storefront.integrations.policy.response_wrappers import (
    IntegrationResponseError,
    extract_provider_error,
    normalize_square_order_response,
    parse_order_endpoint_response,
)
from storefront.utils.config_loader import StoreConfig

logger = logging.getLogger(__name__)

ORDER_FAILURE_MESSAGE = "Failed to create order"
PROCESS_FAILURE_MESSAGE = "Failed to process order"


class InternalOrderEndpointClient(OrderClient):
    def __init__(
        self,
        endpoint_url: str,
        timeout_seconds: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.endpoint_url = endpoint_url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def create_order(self, request: OrderRequest) -> OrderResult:
        if not self.endpoint_url:
            raise ConfigurationMissing("ORDER_ENDPOINT_URL is not configured.")

        payload = order_request_to_payload(request)
        try:
            logger.info(f"Submitting order with {len(request.line_items)} line items to {self.endpoint_url}")
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.post(self.endpoint_url, json=payload)
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to order endpoint: {e}")
            raise TransportError(PROCESS_FAILURE_MESSAGE) from e

        try:
            body = parse_order_endpoint_response(response.json())
        except ValueError as e:
            logger.error("Could not parse order endpoint response (status=%s): %s", response.status_code, e)
            raise TransportError(PROCESS_FAILURE_MESSAGE) from e

        if not body.success:
            message = body.error or ORDER_FAILURE_MESSAGE
            logger.error(f"Order endpoint rejected order: {response.status_code} {message}")
            status_code = response.status_code if response.is_error else ProviderError.status_code
            raise ProviderError(message, status_code=status_code, payload=body.model_dump())

        order = body.data.get("order") or {}
        order_id = order.get("id") if isinstance(order, dict) else None
        if not order_id:
            logger.error("Order endpoint reported success without an order id")
            raise TransportError(PROCESS_FAILURE_MESSAGE)

        logger.info(f"Order created: {order_id}")
        return OrderResult(order_id=str(order_id), payment_id="", simulated=False, raw=order)


class SquareOrdersClient(OrderClient):
    def __init__(self, config: StoreConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.config = config
        self.base_url = config.square_base_url.rstrip("/")
        self._transport = transport

    async def create_order(self, request: OrderRequest) -> OrderResult:
        if not self.config.catalog_configured:
            raise ConfigurationMissing("Square access token not configured")
        if not self.config.square_location_id:
            raise ConfigurationMissing("Square location id not configured")

        headers = {
            "Square-Version": self.config.square_version,
            "Authorization": f"Bearer {self.config.square_access_token}",
            "Content-Type": "application/json",
        }
        payload = self._build_payload(request)

        url = f"{self.base_url}/orders"
        try:
            logger.info(f"Creating Square order at location {self.config.square_location_id}")
            async with httpx.AsyncClient(timeout=self.config.http_timeout_seconds, transport=self._transport) as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to Square orders API: {e}")
            raise TransportError(ORDER_FAILURE_MESSAGE) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Could not parse Square orders response (status=%s): %s", response.status_code, e)
            raise TransportError(ORDER_FAILURE_MESSAGE) from e

        if response.is_error:
            message = extract_provider_error(data, ORDER_FAILURE_MESSAGE)
            logger.error(f"Square API error: {response.status_code} {message}")
            raise ProviderError(message, status_code=response.status_code, payload=data if isinstance(data, dict) else {})

        try:
            result = normalize_square_order_response(data)
        except IntegrationResponseError as e:
            logger.error("Malformed Square order response: %s", e)
            raise TransportError(ORDER_FAILURE_MESSAGE) from e

        logger.info(f"Square order created: {result.order_id}")
        return result

    def _build_payload(self, request: OrderRequest) -> Dict[str, Any]:
        order: Dict[str, Any] = {
            "location_id": self.config.square_location_id,
            "line_items": [_square_line_item(line) for line in request.line_items],
        }
        if request.customer_id:
            order["customer_id"] = request.customer_id
        if request.note:
            order["metadata"] = {"note": request.note[:255]}
        return {"idempotency_key": str(uuid.uuid4()), "order": order}


def _square_line_item(line: OrderLineItem) -> Dict[str, Any]:
    # Square prices catalog-backed lines itself; ad hoc lines need a name and price.
    if line.catalog_object_id:
        return {"quantity": str(line.quantity), "catalog_object_id": line.catalog_object_id}
    return {
        "name": line.name,
        "quantity": str(line.quantity),
        "base_price_money": {"amount": to_minor_units(line.price), "currency": line.currency},
    }


def to_minor_units(price: float) -> int:
    return int((Decimal(str(price)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
