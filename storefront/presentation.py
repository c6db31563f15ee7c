"""
Views shown to the customer once an order submission finishes.
"""

from typing import Any, Dict

from storefront.integrations.contracts.interfaces import OrderResult

SIMULATED_NOTICE = "Simulated order: payment configuration is missing, nothing was charged or sent to the provider."


def render_order_success(result: OrderResult) -> Dict[str, Any]:
    view: Dict[str, Any] = {
        "status": "success",
        "title": "Order Successful!",
        "message": "Your order has been placed successfully.",
        "order_id": result.order_id,
        "simulated": result.simulated,
        "actions": ["place_another_order", "back_to_home"],
    }
    # Payment capture isn't implemented for real orders, so the id is usually empty.
    if result.payment_id:
        view["payment_id"] = result.payment_id
    if result.simulated:
        view["notice"] = SIMULATED_NOTICE
    return view


def render_order_failure(message: str) -> Dict[str, Any]:
    return {
        "status": "failed",
        "title": "Order failed",
        "message": f"Order failed: {message}",
        "error": message,
    }
