import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from storefront.api.dependencies import get_config, get_orders_api_client
from storefront.errors import CartValidationError
from storefront.integrations.contracts.interfaces import OrderClient, OrderLineItem, OrderRequest
from storefront.integrations.contracts.orders import validate_order_request
from storefront.utils.config_loader import StoreConfig

logger = logging.getLogger(__name__)

router = APIRouter()


class OrderLineItemBody(BaseModel):
    name: str
    quantity: int
    price: float
    currency: str
    catalog_object_id: str = ""
    variation_name: str = ""


class CreateOrderBody(BaseModel):
    line_items: List[OrderLineItemBody] = Field(default_factory=list)
    customer_id: str = ""
    note: Optional[str] = None


@router.post("/orders", tags=["Orders"])
async def create_order(
    body: CreateOrderBody,
    client: OrderClient = Depends(get_orders_api_client),
    config: StoreConfig = Depends(get_config),
):
    """Create an order with the provider. Payment capture is not part of this call."""
    request = OrderRequest(
        line_items=[OrderLineItem(**line.model_dump()) for line in body.line_items],
        customer_id=body.customer_id,
        note=body.note if body.note is not None else config.order_note,
    )

    errors = validate_order_request(request)
    if errors:
        raise CartValidationError("; ".join(errors))

    result = await client.create_order(request)
    logger.info("Order %s created with %d line items", result.order_id, len(request.line_items))
    return {
        "success": True,
        "data": {"order": {**result.raw, "id": result.order_id}},
    }
