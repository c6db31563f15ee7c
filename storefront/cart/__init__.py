from .cart import Cart, CartLine, format_price
from .categories import ALL_CATEGORIES, derive_categories, filter_items

__all__ = [
    "Cart",
    "CartLine",
    "format_price",
    "ALL_CATEGORIES",
    "derive_categories",
    "filter_items",
]
