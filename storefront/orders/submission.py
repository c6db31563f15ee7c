"""
Order submission state machine.

    Idle -> Submitting -> (Success | Failed)

A submission needs a non-empty cart. Failures are reported once, as a single
customer-facing message, and never retried; the customer re-triggers the
action. The cart itself is never touched here; clearing it after a success is
the caller's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from storefront.cart.cart import Cart
from storefront.error_handler import error_handler
from storefront.errors import CartValidationError, StorefrontError
from storefront.integrations.contracts.interfaces import (
    DEFAULT_ORDER_NOTE,
    OrderClient,
    OrderLineItem,
    OrderRequest,
    OrderResult,
)

logger = logging.getLogger(__name__)

EMPTY_CART_MESSAGE = "Your cart is empty"
ALREADY_SUBMITTING_MESSAGE = "An order is already being processed"
PROCESS_FAILURE_MESSAGE = "Failed to process order"


class SubmissionState(str, Enum):
    IDLE = "IDLE"
    SUBMITTING = "SUBMITTING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


@dataclass
class SubmissionOutcome:
    state: SubmissionState
    result: Optional[OrderResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.state is SubmissionState.SUCCESS and self.result is not None


def build_order_request(cart: Cart, note: str = DEFAULT_ORDER_NOTE, customer_id: str = "") -> OrderRequest:
    return OrderRequest(
        line_items=[
            OrderLineItem(
                name=f"{line.name} - {line.variation_name}",
                quantity=line.quantity,
                price=line.price,
                currency=line.currency,
                catalog_object_id=line.variation_id,
                variation_name=line.variation_name,
            )
            for line in cart.lines
        ],
        customer_id=customer_id,
        note=note,
    )


class OrderSubmission:
    def __init__(self, client: OrderClient, note: str = DEFAULT_ORDER_NOTE, customer_id: str = "") -> None:
        self.client = client
        self.note = note
        self.customer_id = customer_id
        self.state = SubmissionState.IDLE

    @property
    def processing(self) -> bool:
        return self.state is SubmissionState.SUBMITTING

    def reset(self) -> None:
        if self.processing:
            raise CartValidationError("An order is being processed")
        self.state = SubmissionState.IDLE

    async def process_order(
        self,
        cart: Cart,
        on_success: Optional[Callable[[OrderResult], None]] = None,
        on_error: Optional[Callable[[str], None]] = None,
    ) -> SubmissionOutcome:
        if self.processing:
            return self._reject(ALREADY_SUBMITTING_MESSAGE, on_error)
        if cart.is_empty:
            return self._reject(EMPTY_CART_MESSAGE, on_error)

        request = build_order_request(cart, note=self.note, customer_id=self.customer_id)
        self.state = SubmissionState.SUBMITTING
        try:
            result = await self.client.create_order(request)
        except Exception as exc:
            if isinstance(exc, StorefrontError):
                logger.error("Error processing order: %s", exc.message)
            else:
                logger.exception("Unexpected error processing order")
            message = error_handler.user_message(exc, default=PROCESS_FAILURE_MESSAGE)
            self.state = SubmissionState.FAILED
            if on_error is not None:
                on_error(message)
            return SubmissionOutcome(state=self.state, error=message)

        self.state = SubmissionState.SUCCESS
        if result.simulated:
            logger.warning("Order %s was simulated; no order exists at the provider", result.order_id)
        else:
            logger.info("Order %s submitted", result.order_id)
        if on_success is not None:
            on_success(result)
        return SubmissionOutcome(state=self.state, result=result)

    def _reject(self, message: str, on_error: Optional[Callable[[str], None]]) -> SubmissionOutcome:
        logger.info("Order not submitted: %s", message)
        if on_error is not None:
            on_error(message)
        return SubmissionOutcome(state=self.state, error=message)
