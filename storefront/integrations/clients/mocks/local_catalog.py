"""
Local Catalog Client (Mock/Local).

⚠️  Development-time catalog source used only when INTEGRATIONS_MODE=mock.
    It is never picked just because the Square access token is missing:
    a missing token still answers 500 from the catalog routes.
"""

import logging
from typing import List, Optional

from storefront.integrations.contracts.interfaces import (
    CatalogCategory,
    CatalogItem,
    CatalogProvider,
    CatalogVariation,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_MOCK_CATEGORIES: List[CatalogCategory] = [
    CatalogCategory(category_id="CAT-DRINKS", name="Drinks", description="Hot and cold drinks"),
    CatalogCategory(category_id="CAT-BAKERY", name="Bakery", description="Baked fresh every morning"),
]

_MOCK_ITEMS: List[CatalogItem] = [
    CatalogItem(
        item_id="ITEM-COFFEE",
        name="Coffee",
        description="House drip coffee",
        category="CAT-DRINKS",
        variations=[
            CatalogVariation(variation_id="VAR-COFFEE-SM", name="Small", price=350, currency="USD", sku="COF-S"),
            CatalogVariation(variation_id="VAR-COFFEE-LG", name="Large", price=450, currency="USD", sku="COF-L"),
        ],
    ),
    CatalogItem(
        item_id="ITEM-LATTE",
        name="Latte",
        description="Espresso with steamed milk",
        category="CAT-DRINKS",
        variations=[
            CatalogVariation(variation_id="VAR-LATTE-REG", name="Regular", price=525, currency="USD", sku="LAT-R"),
            CatalogVariation(
                variation_id="VAR-LATTE-OAT", name="Oat Milk", price=575, currency="USD", sku="LAT-O", available=False
            ),
        ],
    ),
    CatalogItem(
        item_id="ITEM-CROISSANT",
        name="Croissant",
        description="Butter croissant",
        category="CAT-BAKERY",
        variations=[
            CatalogVariation(variation_id="VAR-CROISSANT", name="Default", price=400, currency="USD", sku="CRO"),
        ],
    ),
]


# ---------------------------------------------------------------------------
# Mock client
# ---------------------------------------------------------------------------

class LocalCatalogClient(CatalogProvider):
    def __init__(
        self,
        items: Optional[List[CatalogItem]] = None,
        categories: Optional[List[CatalogCategory]] = None,
    ) -> None:
        self._items = list(_MOCK_ITEMS if items is None else items)
        self._categories = list(_MOCK_CATEGORIES if categories is None else categories)
        self.calls = 0
        logger.info("[CATALOG MOCK] Client initialised with %d items", len(self._items))

    async def list_items(self) -> List[CatalogItem]:
        self.calls += 1
        return list(self._items)

    async def list_categories(self) -> List[CatalogCategory]:
        self.calls += 1
        return list(self._categories)
