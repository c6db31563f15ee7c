"""
Square Catalog HTTP Client.

Fetches menu items and categories from the Square Catalog API and normalizes
them into the catalog contract shape (storefront/integrations/contracts).

One request per call: no retry, no pagination beyond the first page the
provider returns.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from storefront.errors import ConfigurationMissing, ProviderError, TransportError
from storefront.integrations.contracts.interfaces import CatalogCategory, CatalogItem, CatalogProvider
from storefront.integrations.policy.response_wrappers import (
    CatalogListResponseModel,
    IntegrationResponseError,
    extract_provider_error,
    normalize_catalog_category,
    normalize_catalog_item,
    parse_catalog_list,
)
from storefront.utils.config_loader import StoreConfig

logger = logging.getLogger(__name__)

ITEMS_FAILURE_MESSAGE = "Failed to fetch menu items"
CATEGORIES_FAILURE_MESSAGE = "Failed to fetch categories"


class SquareCatalogClient(CatalogProvider):
    def __init__(self, config: StoreConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.config = config
        self.base_url = config.square_base_url.rstrip("/")
        self._transport = transport

    def image_url(self, image_id: str) -> str:
        return f"{self.base_url}/catalog/object/{image_id}/image"

    async def list_items(self) -> List[CatalogItem]:
        listing = await self._list_objects("ITEM", ITEMS_FAILURE_MESSAGE)
        try:
            items = [
                normalize_catalog_item(
                    obj,
                    default_currency=self.config.default_currency,
                    image_url_for=self.image_url,
                )
                for obj in listing.objects
            ]
        except IntegrationResponseError as e:
            logger.error("Malformed catalog item from Square: %s", e)
            raise TransportError(ITEMS_FAILURE_MESSAGE, payload=e.payload) from e

        logger.info("Fetched %d menu items from Square", len(items))
        return items

    async def list_categories(self) -> List[CatalogCategory]:
        listing = await self._list_objects("CATEGORY", CATEGORIES_FAILURE_MESSAGE)
        try:
            categories = [normalize_catalog_category(obj) for obj in listing.objects]
        except IntegrationResponseError as e:
            logger.error("Malformed catalog category from Square: %s", e)
            raise TransportError(CATEGORIES_FAILURE_MESSAGE, payload=e.payload) from e

        logger.info("Fetched %d categories from Square", len(categories))
        return categories

    def _headers(self) -> Dict[str, str]:
        return {
            "Square-Version": self.config.square_version,
            "Authorization": f"Bearer {self.config.square_access_token}",
            "Content-Type": "application/json",
        }

    async def _list_objects(self, types: str, failure_message: str) -> CatalogListResponseModel:
        if not self.config.catalog_configured:
            raise ConfigurationMissing("Square access token not configured")

        url = f"{self.base_url}/catalog/list"
        try:
            logger.info(f"Fetching Square catalog objects (types={types})")
            async with httpx.AsyncClient(timeout=self.config.http_timeout_seconds, transport=self._transport) as client:
                response = await client.get(url, params={"types": types}, headers=self._headers())
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to Square catalog API: {e}")
            raise TransportError(failure_message) from e

        if response.is_error:
            body = _safe_json(response)
            message = extract_provider_error(body, failure_message)
            logger.error(f"Square API error: {response.status_code} {message}")
            raise ProviderError(message, status_code=response.status_code, payload=body if isinstance(body, dict) else {})

        try:
            return parse_catalog_list(response.json())
        except (ValueError, IntegrationResponseError) as e:
            logger.error("Could not parse Square catalog response: %s", e)
            raise TransportError(failure_message) from e


def _safe_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
