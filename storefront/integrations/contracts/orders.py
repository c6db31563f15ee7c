from typing import Any, Dict, List
from .interfaces import OrderLineItem, OrderRequest, OrderResult

"""
Order contracts.

Defines the provider-agnostic order request sent to the order endpoint:

    {
        "line_items": [{name, quantity, price, currency, catalog_object_id, variation_name}],
        "customer_id": "",
        "note": "Order from web app"
    }

and the endpoint's response envelope:

    {"success": true, "data": {"order": {"id": ...}}}
    {"success": false, "error": "..."}

These contracts must be used by both:
- clients/real_http/orders.py (internal endpoint + direct Square Orders API)
- api/endpoints/orders.py (the internal endpoint itself)
"""


def line_item_to_dict(line: OrderLineItem) -> Dict[str, Any]:
    return {
        "name": line.name,
        "quantity": line.quantity,
        "price": line.price,
        "currency": line.currency,
        "catalog_object_id": line.catalog_object_id,
        "variation_name": line.variation_name,
    }


def order_request_to_payload(request: OrderRequest) -> Dict[str, Any]:
    return {
        "line_items": [line_item_to_dict(line) for line in request.line_items],
        "customer_id": request.customer_id,
        "note": request.note,
    }


def order_result_to_dict(result: OrderResult) -> Dict[str, Any]:
    return {
        "order_id": result.order_id,
        "payment_id": result.payment_id,
        "simulated": result.simulated,
        "created_at": result.created_at.isoformat(),
    }


def validate_order_request(request: OrderRequest) -> List[str]:
    """
    Return a list of validation errors.
    Empty list means the request is valid.
    """
    errors: List[str] = []

    if not request.line_items:
        errors.append("line_items must not be empty")
    for index, line in enumerate(request.line_items):
        if line.quantity <= 0:
            errors.append(f"line_items[{index}].quantity must be greater than zero")
        if line.price < 0:
            errors.append(f"line_items[{index}].price must not be negative")
        if not line.currency:
            errors.append(f"line_items[{index}].currency is required")

    return errors
