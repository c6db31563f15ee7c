from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from storefront.integrations.contracts.interfaces import (
    CatalogCategory,
    CatalogItem,
    CatalogVariation,
    OrderResult,
)


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class CatalogListResponseModel(BaseModel):
    objects: List[Dict[str, Any]] = Field(default_factory=list)
    cursor: Optional[str] = None


class OrderEndpointResponseModel(BaseModel):
    success: bool
    data: Dict[str, Any] = Field(default_factory=dict)
    error: Optional[str] = None


def parse_catalog_list(raw: Any) -> CatalogListResponseModel:
    if not isinstance(raw, dict):
        raise IntegrationResponseError("Catalog response is not a JSON object.")
    # Square omits "objects" entirely when the catalog is empty.
    return _build_model(CatalogListResponseModel, {k: v for k, v in raw.items() if v is not None}, raw)


def normalize_catalog_item(
    raw: Dict[str, Any],
    *,
    default_currency: str = "USD",
    image_url_for: Optional[Callable[[str], str]] = None,
) -> CatalogItem:
    item_data = raw.get("item_data") or {}
    variations = [
        normalize_catalog_variation(v, default_currency=default_currency)
        for v in item_data.get("variations") or []
    ]

    image_ids = item_data.get("image_ids") or []
    image_url = None
    if image_ids and image_url_for is not None:
        image_url = image_url_for(image_ids[0])

    return CatalogItem(
        item_id=str(_first_non_empty(raw, "id")),
        name=str(_first_non_empty(item_data, "name", default="Unnamed Item")),
        description=str(_first_non_empty(item_data, "description", default="")),
        category=str(_first_non_empty(item_data, "category_id", default="")),
        variations=variations,
        available=not bool(raw.get("is_deleted")),
        image_url=image_url,
    )


def normalize_catalog_variation(raw: Dict[str, Any], *, default_currency: str = "USD") -> CatalogVariation:
    variation_data = raw.get("item_variation_data") or {}
    price_money = variation_data.get("price_money") or {}

    return CatalogVariation(
        variation_id=str(_first_non_empty(raw, "id")),
        name=str(_first_non_empty(variation_data, "name", default="Default")),
        price=_coerce_minor_units(_first_non_empty(price_money, "amount", default=0)),
        currency=str(_first_non_empty(price_money, "currency", default=default_currency)).upper(),
        sku=str(_first_non_empty(variation_data, "sku", default="")),
        available=not bool(raw.get("is_deleted")),
    )


def normalize_catalog_category(raw: Dict[str, Any]) -> CatalogCategory:
    category_data = raw.get("category_data") or {}

    return CatalogCategory(
        category_id=str(_first_non_empty(raw, "id")),
        name=str(_first_non_empty(category_data, "name", default="Unnamed Category")),
        description=str(_first_non_empty(category_data, "description", default="")),
        available=not bool(raw.get("is_deleted")),
    )


def extract_provider_error(raw: Any, default: str) -> str:
    """Pull a human-readable message out of a provider error body."""
    if not isinstance(raw, dict):
        return default
    message = raw.get("message") or raw.get("error")
    if isinstance(message, str) and message.strip():
        return message
    errors = raw.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        detail = errors[0].get("detail") or errors[0].get("code")
        if isinstance(detail, str) and detail.strip():
            return detail
    return default


def parse_order_endpoint_response(raw: Any) -> OrderEndpointResponseModel:
    if not isinstance(raw, dict):
        raise IntegrationResponseError("Order response is not a JSON object.")
    return _build_model(OrderEndpointResponseModel, raw, raw)


def normalize_square_order_response(raw: Dict[str, Any]) -> OrderResult:
    order = raw.get("order")
    if not isinstance(order, dict):
        raise IntegrationResponseError("Order response is missing the order object.", payload=raw)
    return OrderResult(order_id=str(_first_non_empty(order, "id")), payment_id="", simulated=False, raw=order)


def _first_non_empty(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    if default is not None:
        return default
    raise IntegrationResponseError(f"Missing required field. Checked keys: {', '.join(keys)}", payload=data)


def _coerce_minor_units(value: Any) -> int:
    try:
        amount = int(value)
    except (TypeError, ValueError) as exc:
        raise IntegrationResponseError(f"Invalid price amount: {value!r}") from exc
    if amount < 0:
        raise IntegrationResponseError(f"Price amount must be >= 0; got {amount}.")
    return amount


def _build_model(model_type, payload: Dict[str, Any], raw: Dict[str, Any]):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Response validation failed: {exc}", payload=raw) from exc
