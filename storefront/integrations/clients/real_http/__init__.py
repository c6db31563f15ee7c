"""
Real HTTP integration clients.

These clients communicate with real external systems via HTTP:
- Square Catalog API (menu items and categories)
- Square Orders API / the storefront's internal order endpoint

Important:
- Must implement the same interfaces as the mock clients
- Must return data shaped according to storefront/integrations/contracts/*

Switching:
The selection of mock vs real clients happens in storefront/orders/selection.py
and storefront/api/dependencies.py only.
"""
