"""
Integrations layer.
This package contains all code used to communicate with external systems:
- Square Catalog API (menu items, variations, categories)
- Square Orders API / the internal order endpoint

Key rule:
- Cart and order logic MUST NOT call external APIs directly.
- They call integration clients (under storefront/integrations/clients).
- Simulated clients stand in only when configuration is absent, and say so.
"""

from .contracts.interfaces import (
    CatalogCategory,
    CatalogItem,
    CatalogProvider,
    CatalogVariation,
    OrderClient,
    OrderLineItem,
    OrderRequest,
    OrderResult,
)

__all__ = [
    "CatalogCategory", "CatalogItem", "CatalogProvider", "CatalogVariation",
    "OrderClient", "OrderLineItem", "OrderRequest", "OrderResult",
]
