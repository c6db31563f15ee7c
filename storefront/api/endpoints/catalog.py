from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_catalog_client
from storefront.integrations.contracts.catalog import category_to_dict, item_to_dict
from storefront.integrations.contracts.interfaces import CatalogProvider

router = APIRouter()


@router.get("/catalog/items", tags=["Catalog"])
async def list_menu_items(catalog: CatalogProvider = Depends(get_catalog_client)):
    """Menu items with their priced variations (prices in minor units)."""
    items = await catalog.list_items()
    return {
        "success": True,
        "data": {
            "menuItems": [item_to_dict(item) for item in items],
            "total": len(items),
        },
    }


@router.get("/catalog/categories", tags=["Catalog"])
async def list_categories(catalog: CatalogProvider = Depends(get_catalog_client)):
    categories = await catalog.list_categories()
    return {
        "success": True,
        "data": {
            "categories": [category_to_dict(category) for category in categories],
            "total": len(categories),
        },
    }
