"""
Simulated Order Client.

⚠️  Used when the payment application id or location id is missing.
    No network call is made and no order exists at the provider: after a fixed
    delay it returns time-derived ids ("mock-order-<ms>", "mock-payment-<ms>")
    and marks the result simulated=True so callers can tell it apart from a
    real order.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable

from storefront.integrations.contracts.interfaces import OrderClient, OrderRequest, OrderResult

logger = logging.getLogger(__name__)

MOCK_ORDER_PREFIX = "mock-order-"
MOCK_PAYMENT_PREFIX = "mock-payment-"


class SimulatedOrderClient(OrderClient):
    def __init__(
        self,
        delay_seconds: float = 2.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.delay_seconds = delay_seconds
        self._sleep = sleep
        self._clock = clock

    async def create_order(self, request: OrderRequest) -> OrderResult:
        logger.warning("Square payment configuration missing, simulating order (%d line items)", len(request.line_items))
        await self._sleep(self.delay_seconds)

        stamp = int(self._clock() * 1000)
        return OrderResult(
            order_id=f"{MOCK_ORDER_PREFIX}{stamp}",
            payment_id=f"{MOCK_PAYMENT_PREFIX}{stamp}",
            simulated=True,
        )
