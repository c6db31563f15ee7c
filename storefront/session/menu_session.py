"""
Menu session: one customer's purchase form.

Holds the menu loaded at session start, the selected category, the cart and
the order submission state machine. Nothing here is persisted.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from storefront.cart.cart import Cart
from storefront.cart.categories import ALL_CATEGORIES, derive_categories, filter_items
from storefront.errors import CartValidationError
from storefront.integrations.contracts.catalog import find_variation, item_to_dict
from storefront.integrations.contracts.interfaces import CatalogItem, OrderResult
from storefront.integrations.contracts.orders import order_result_to_dict
from storefront.orders.submission import OrderSubmission, SubmissionOutcome

logger = logging.getLogger(__name__)


class MenuSession:
    def __init__(
        self,
        menu_items: List[CatalogItem],
        submission: OrderSubmission,
        session_id: Optional[str] = None,
    ) -> None:
        self.session_id = session_id or str(uuid.uuid4())
        self.menu_items = list(menu_items)
        self.submission = submission
        self.cart = Cart()
        self.selected_category = ALL_CATEGORIES
        self.last_outcome: Optional[SubmissionOutcome] = None
        self.created_at = datetime.utcnow()
        self.last_accessed = 0.0

    @property
    def categories(self) -> List[str]:
        return derive_categories(self.menu_items)

    @property
    def visible_items(self) -> List[CatalogItem]:
        return filter_items(self.menu_items, self.selected_category)

    def select_category(self, category: str) -> None:
        self._check_category(category)
        self.selected_category = category

    # --- Cart actions ------------------------------------------------------------

    def add_to_cart(self, item_id: str, variation_id: str) -> None:
        self._ensure_not_processing()
        match = find_variation(self.menu_items, item_id, variation_id)
        if match is None:
            raise CartValidationError("Menu item not found")

        item, variation = match
        if self.cart.add(item, variation) is None:
            logger.info("Ignoring add of unavailable variation %s", variation_id)

    def update_quantity(self, item_id: str, variation_id: str, quantity: int) -> None:
        self._ensure_not_processing()
        self.cart.update_quantity(item_id, variation_id, quantity)

    def remove_from_cart(self, item_id: str, variation_id: str) -> None:
        self._ensure_not_processing()
        self.cart.remove(item_id, variation_id)

    # --- Ordering ----------------------------------------------------------------

    async def place_order(self) -> SubmissionOutcome:
        def _discard_cart(result: OrderResult) -> None:
            self.cart.clear()

        outcome = await self.submission.process_order(self.cart, on_success=_discard_cart)
        self.last_outcome = outcome
        return outcome

    def reset_order(self) -> None:
        self.submission.reset()
        self.last_outcome = None

    def touch(self, now: float) -> None:
        self.last_accessed = now

    def view(self, category: Optional[str] = None) -> Dict[str, Any]:
        """Current state. A category given here filters this view only; the selection is kept."""
        if category is not None:
            self._check_category(category)
        shown = category if category is not None else self.selected_category
        outcome = self.last_outcome
        return {
            "session_id": self.session_id,
            "categories": self.categories,
            "selectedCategory": self.selected_category,
            "shownCategory": shown,
            "menuItems": [item_to_dict(item) for item in filter_items(self.menu_items, shown)],
            "cart": self.cart.to_dict(),
            "processing": self.submission.processing,
            "orderState": self.submission.state.value,
            "lastOrder": order_result_to_dict(outcome.result) if outcome and outcome.result else None,
            "lastError": outcome.error if outcome else None,
        }

    def _check_category(self, category: str) -> None:
        if category not in self.categories:
            raise CartValidationError(f"Unknown category '{category}'")

    def _ensure_not_processing(self) -> None:
        if self.submission.processing:
            raise CartValidationError("An order is being processed")
