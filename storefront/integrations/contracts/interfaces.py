from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

DEFAULT_ORDER_NOTE = "Order from web app"


# ---------------------------------------------------------------------------
# Catalog data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CatalogVariation:
    variation_id: str
    name: str
    price: int                           # minor currency units (cents)
    currency: str
    sku: str = ""
    available: bool = True


@dataclass(frozen=True)
class CatalogItem:
    item_id: str
    name: str
    description: str
    category: str
    variations: List[CatalogVariation] = field(default_factory=list)
    available: bool = True
    image_url: Optional[str] = None


@dataclass(frozen=True)
class CatalogCategory:
    category_id: str
    name: str
    description: str = ""
    available: bool = True


# ---------------------------------------------------------------------------
# Order data models
# ---------------------------------------------------------------------------

@dataclass
class OrderLineItem:
    name: str                            # "<item> - <variation>"
    quantity: int
    price: float                         # major currency units
    currency: str
    catalog_object_id: str               # variation id
    variation_name: str


@dataclass
class OrderRequest:
    line_items: List[OrderLineItem]
    customer_id: str = ""
    note: str = DEFAULT_ORDER_NOTE


@dataclass
class OrderResult:
    order_id: str
    payment_id: str = ""                 # payment capture is not implemented
    simulated: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
    raw: Dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Abstract client interfaces
# ---------------------------------------------------------------------------

class CatalogProvider(ABC):
    """Every catalog source (live or local) must implement this interface."""

    @abstractmethod
    async def list_items(self) -> List[CatalogItem]:
        """Return the purchasable items with their variations."""

    @abstractmethod
    async def list_categories(self) -> List[CatalogCategory]:
        """Return the category metadata."""


class OrderClient(ABC):
    """Every order-creation client (live, internal endpoint or simulated) must implement this interface."""

    @abstractmethod
    async def create_order(self, request: OrderRequest) -> OrderResult:
        """Create one order. Raises a StorefrontError on failure."""
