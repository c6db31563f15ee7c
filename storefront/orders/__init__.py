from .selection import select_order_client
from .submission import (
    ALREADY_SUBMITTING_MESSAGE,
    EMPTY_CART_MESSAGE,
    OrderSubmission,
    SubmissionOutcome,
    SubmissionState,
    build_order_request,
)

__all__ = [
    "select_order_client",
    "ALREADY_SUBMITTING_MESSAGE",
    "EMPTY_CART_MESSAGE",
    "OrderSubmission",
    "SubmissionOutcome",
    "SubmissionState",
    "build_order_request",
]
