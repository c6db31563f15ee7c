"""Pytest fixtures for catalog, cart and order tests."""

from typing import List, Optional

import pytest

from storefront.integrations.contracts.interfaces import (
    CatalogItem,
    CatalogVariation,
    OrderClient,
    OrderRequest,
    OrderResult,
)
from storefront.utils.config_loader import StoreConfig


class FakeOrderClient(OrderClient):
    """Records requests; returns a fixed result or raises a fixed error."""

    def __init__(self, result: Optional[OrderResult] = None, error: Optional[Exception] = None):
        self.result = result or OrderResult(order_id="ORDER-1")
        self.error = error
        self.requests: List[OrderRequest] = []

    async def create_order(self, request: OrderRequest) -> OrderResult:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def coffee():
    return CatalogItem(
        item_id="ITEM-COFFEE",
        name="Coffee",
        description="House drip coffee",
        category="Drinks",
        variations=[CatalogVariation(variation_id="VAR-REG", name="Regular", price=350, currency="USD")],
    )


@pytest.fixture
def menu(coffee):
    return [
        coffee,
        CatalogItem(
            item_id="ITEM-MUFFIN",
            name="Muffin",
            description="",
            category="Bakery",
            variations=[
                CatalogVariation(variation_id="VAR-BLUE", name="Blueberry", price=400, currency="USD"),
                CatalogVariation(variation_id="VAR-BRAN", name="Bran", price=375, currency="USD", available=False),
            ],
        ),
        CatalogItem(
            item_id="ITEM-TEA",
            name="Tea",
            description="Loose leaf",
            category="Drinks",
            variations=[CatalogVariation(variation_id="VAR-TEA", name="Pot", price=525, currency="USD")],
        ),
        CatalogItem(item_id="ITEM-SPECIAL", name="Daily Special", description="", category="", variations=[]),
    ]


@pytest.fixture
def config():
    """No credentials at all: catalog calls fail, orders are simulated."""
    return StoreConfig(simulated_order_delay_seconds=0)


@pytest.fixture
def live_config():
    return StoreConfig(
        square_access_token="test-token",
        square_application_id="sq0idp-test",
        square_location_id="LOC-1",
        square_base_url="https://square.test/v2",
        simulated_order_delay_seconds=0,
    )


@pytest.fixture
def fake_order_client():
    return FakeOrderClient()


@pytest.fixture
def make_order_client():
    return FakeOrderClient
