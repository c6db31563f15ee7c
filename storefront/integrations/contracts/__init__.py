"""
Contracts (data models).

This folder defines the request/response shapes for external integrations:
- Catalog item, variation and category formats
- Order request/response formats

Both mock and real clients should use these contracts.
"""
