"""
Configuration loader for the storefront service
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError
import logging

from storefront.integrations.contracts.interfaces import DEFAULT_ORDER_NOTE

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "storefront.yml"

# env var -> StoreConfig field
_ENV_FIELDS = {
    "SQUARE_ACCESS_TOKEN": "square_access_token",
    "SQUARE_BASE_URL": "square_base_url",
    "SQUARE_VERSION": "square_version",
    "SQUARE_APPLICATION_ID": "square_application_id",
    "SQUARE_LOCATION_ID": "square_location_id",
    "ORDER_ENDPOINT_URL": "order_endpoint_url",
    "INTEGRATIONS_MODE": "integrations_mode",
    "SIMULATED_ORDER_DELAY_SECONDS": "simulated_order_delay_seconds",
    "HTTP_TIMEOUT_SECONDS": "http_timeout_seconds",
    "DEFAULT_CURRENCY": "default_currency",
    "SESSION_TTL_SECONDS": "session_ttl_seconds",
}


class StoreConfig(BaseModel):
    """Explicit configuration handed to catalog and order clients."""

    square_access_token: str = ""
    square_base_url: str = "https://connect.squareup.com/v2"
    square_version: str = "2024-09-19"
    square_application_id: str = ""
    square_location_id: str = ""
    order_endpoint_url: str = ""
    integrations_mode: str = ""
    simulated_order_delay_seconds: float = Field(default=2.0, ge=0.0)
    http_timeout_seconds: float = Field(default=20.0, gt=0.0)
    default_currency: str = "USD"
    order_note: str = DEFAULT_ORDER_NOTE
    session_ttl_seconds: float = Field(default=1800.0, gt=0.0)

    @property
    def catalog_configured(self) -> bool:
        return bool(self.square_access_token.strip())

    @property
    def payments_configured(self) -> bool:
        """Both the payment application id and the location id are required."""
        return bool(self.square_application_id.strip() and self.square_location_id.strip())

    @property
    def use_mock_catalog(self) -> bool:
        return self.integrations_mode.strip().lower() in {"mock", "test"}


def load_store_config(config_path: Optional[Path] = None, environ: Optional[Dict[str, str]] = None) -> StoreConfig:
    """
    Build a StoreConfig from the YAML defaults file and the environment.

    Args:
        config_path: Path to a YAML file with non-secret defaults.
            Defaults to config/storefront.yml; a missing file is skipped.
        environ: Mapping to read variables from. Defaults to os.environ
            after loading .env.

    Raises:
        ValidationError: If the merged values don't match the schema
    """
    if environ is None:
        load_dotenv()
        environ = dict(os.environ)

    data: Dict[str, Any] = {}

    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data.update(yaml.safe_load(f) or {})
    elif config_path is not None:
        raise FileNotFoundError(f"Config file not found: {config_path}")

    for env_name, field_name in _ENV_FIELDS.items():
        value = environ.get(env_name)
        if value is not None and value.strip():
            data[field_name] = value.strip()

    try:
        config = StoreConfig(**data)
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise

    logger.info(
        "Loaded storefront config (catalog_configured=%s, payments_configured=%s)",
        config.catalog_configured,
        config.payments_configured,
    )
    return config
