"""
Storefront error taxonomy.

Every error raised by the catalog, cart and order layers carries a message
that is safe to show to the customer plus the HTTP status the API should
answer with. Routes never leak raw exceptions to the client; they go through
ErrorHandler instead (see storefront/error_handler.py).
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class StorefrontError(Exception):
    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.payload = payload or {}


class ConfigurationMissing(StorefrontError):
    """Credentials or IDs needed for a live call are not configured."""

    status_code = 500


class ProviderError(StorefrontError):
    """The external provider answered with a non-success response."""

    status_code = 502


class TransportError(StorefrontError):
    """Network or parse failure; the message is always a generic one."""

    status_code = 502


class CartValidationError(StorefrontError):
    """Local validation failure. No network call was made."""

    status_code = 400


class SessionNotFound(StorefrontError):
    status_code = 404
