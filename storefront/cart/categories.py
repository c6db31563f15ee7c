"""Category selector and item filtering for the menu grid."""

from typing import List

from storefront.integrations.contracts.interfaces import CatalogItem

ALL_CATEGORIES = "all"


def derive_categories(items: List[CatalogItem]) -> List[str]:
    """Sentinel first, then distinct non-empty labels in first-occurrence order."""
    categories = [ALL_CATEGORIES]
    for item in items:
        if item.category and item.category not in categories:
            categories.append(item.category)
    return categories


def filter_items(items: List[CatalogItem], selected: str) -> List[CatalogItem]:
    if selected == ALL_CATEGORIES:
        return list(items)
    return [item for item in items if item.category == selected]
