"""Storefront: browse a Square menu, build a cart, place orders."""

__version__ = "1.0.0"
