from typing import Any, Dict, List, Optional, Tuple
from .interfaces import CatalogCategory, CatalogItem, CatalogVariation

"""
Catalog contracts.

Defines the JSON shape the storefront exposes for menu items and categories:
- item: id, name, description, category, variations, available, image_url
- variation: id, name, price (minor units), currency, sku, available
- category: id, name, description, available

These contracts must be used by both:
- clients/mocks/local_catalog.py (seed menu for development)
- clients/real_http/square_catalog.py (live Square catalog)
"""


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

def variation_to_dict(variation: CatalogVariation) -> Dict[str, Any]:
    return {
        "id": variation.variation_id,
        "name": variation.name,
        "price": variation.price,
        "currency": variation.currency,
        "sku": variation.sku,
        "available": variation.available,
    }


def item_to_dict(item: CatalogItem) -> Dict[str, Any]:
    return {
        "id": item.item_id,
        "name": item.name,
        "description": item.description,
        "category": item.category,
        "variations": [variation_to_dict(v) for v in item.variations],
        "available": item.available,
        "image_url": item.image_url,
    }


def category_to_dict(category: CatalogCategory) -> Dict[str, Any]:
    return {
        "id": category.category_id,
        "name": category.name,
        "description": category.description,
        "available": category.available,
    }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def find_variation(
    items: List[CatalogItem], item_id: str, variation_id: str
) -> Optional[Tuple[CatalogItem, CatalogVariation]]:
    """Look up an (item, variation) pair in a loaded menu."""
    for item in items:
        if item.item_id != item_id:
            continue
        for variation in item.variations:
            if variation.variation_id == variation_id:
                return item, variation
        return None
    return None
