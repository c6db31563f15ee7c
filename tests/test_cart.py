"""Tests for the in-memory cart."""

import pytest

from storefront.cart import Cart
from storefront.integrations.contracts.interfaces import CatalogItem, CatalogVariation


def _variation(menu, item_id, variation_id):
    item = next(i for i in menu if i.item_id == item_id)
    return item, next(v for v in item.variations if v.variation_id == variation_id)


def test_adding_coffee_twice_gives_one_line_with_quantity_two(coffee):
    cart = Cart()
    variation = coffee.variations[0]

    cart.add(coffee, variation)
    cart.add(coffee, variation)

    assert len(cart) == 1
    line = cart.lines[0]
    assert line.quantity == 2
    assert line.price == 3.5
    assert line.name == "Coffee"
    assert line.variation_name == "Regular"
    assert line.currency == "USD"
    assert cart.total() == pytest.approx(7.00)


@pytest.mark.parametrize("adds", [1, 3, 10])
def test_repeated_adds_accumulate_on_single_line(coffee, adds):
    cart = Cart()
    for _ in range(adds):
        cart.add(coffee, coffee.variations[0])

    assert len(cart) == 1
    assert cart.get("ITEM-COFFEE", "VAR-REG").quantity == adds


def test_unavailable_variation_is_ignored(menu):
    cart = Cart()
    item, bran = _variation(menu, "ITEM-MUFFIN", "VAR-BRAN")

    assert cart.add(item, bran) is None
    assert cart.is_empty


def test_same_item_different_variations_are_separate_lines():
    item = CatalogItem(
        item_id="ITEM-LATTE",
        name="Latte",
        description="",
        category="Drinks",
        variations=[
            CatalogVariation(variation_id="S", name="Small", price=400, currency="USD"),
            CatalogVariation(variation_id="L", name="Large", price=500, currency="USD"),
        ],
    )
    cart = Cart()
    cart.add(item, item.variations[0])
    cart.add(item, item.variations[1])

    assert [line.variation_id for line in cart.lines] == ["S", "L"]
    assert cart.total() == pytest.approx(9.0)


def test_price_is_copied_at_add_time(coffee):
    cart = Cart()
    cart.add(coffee, coffee.variations[0])

    repriced = CatalogItem(
        item_id=coffee.item_id,
        name="Coffee (new)",
        description="",
        category="Drinks",
        variations=[CatalogVariation(variation_id="VAR-REG", name="Regular", price=999, currency="USD")],
    )
    cart.add(repriced, repriced.variations[0])

    line = cart.get("ITEM-COFFEE", "VAR-REG")
    assert line.quantity == 2
    assert line.price == 3.5
    assert line.name == "Coffee"


def test_update_quantity_replaces_quantity(coffee):
    cart = Cart()
    cart.add(coffee, coffee.variations[0])

    cart.update_quantity("ITEM-COFFEE", "VAR-REG", 5)

    assert cart.get("ITEM-COFFEE", "VAR-REG").quantity == 5
    assert cart.total() == pytest.approx(17.5)


@pytest.mark.parametrize("quantity", [0, -1])
def test_update_quantity_to_zero_or_less_equals_remove(menu, quantity):
    updated, removed = Cart(), Cart()
    for cart in (updated, removed):
        cart.add(*_variation(menu, "ITEM-COFFEE", "VAR-REG"))
        cart.add(*_variation(menu, "ITEM-TEA", "VAR-TEA"))

    updated.update_quantity("ITEM-COFFEE", "VAR-REG", quantity)
    removed.remove("ITEM-COFFEE", "VAR-REG")

    assert updated.to_dict() == removed.to_dict()
    assert [line.item_id for line in updated.lines] == ["ITEM-TEA"]


def test_update_quantity_of_missing_line_is_noop(coffee):
    cart = Cart()
    cart.update_quantity("ITEM-COFFEE", "VAR-REG", 3)
    assert cart.is_empty


def test_remove_missing_line_is_noop(coffee):
    cart = Cart()
    cart.add(coffee, coffee.variations[0])

    cart.remove("ITEM-NOPE", "VAR-REG")

    assert len(cart) == 1


def test_total_does_not_depend_on_add_order(menu):
    picks = [
        ("ITEM-COFFEE", "VAR-REG"),
        ("ITEM-TEA", "VAR-TEA"),
        ("ITEM-COFFEE", "VAR-REG"),
        ("ITEM-MUFFIN", "VAR-BLUE"),
    ]
    forward, backward = Cart(), Cart()
    for pick in picks:
        forward.add(*_variation(menu, *pick))
    for pick in reversed(picks):
        backward.add(*_variation(menu, *pick))

    assert forward.total() == backward.total() == pytest.approx(3.5 * 2 + 5.25 + 4.0)
    assert [line.key for line in forward.lines] != [line.key for line in backward.lines]


def test_total_of_cent_prices_does_not_depend_on_add_order():
    items = [
        CatalogItem(
            item_id=f"CENT-{cents}", name=f"Mint {cents}", description="", category="",
            variations=[CatalogVariation(variation_id=f"V-{cents}", name="One", price=cents, currency="USD")],
        )
        for cents in (10, 20, 30)
    ]
    forward, backward = Cart(), Cart()
    for item in items:
        forward.add(item, item.variations[0])
    for item in reversed(items):
        backward.add(item, item.variations[0])

    assert forward.total() == backward.total()
    assert forward.total() == 0.6


def test_mixed_currency_cart_is_summed_without_conversion():
    # Known limitation: currencies are not reconciled, amounts are just added.
    usd = CatalogItem(
        item_id="A", name="A", description="", category="",
        variations=[CatalogVariation(variation_id="A1", name="One", price=350, currency="USD")],
    )
    eur = CatalogItem(
        item_id="B", name="B", description="", category="",
        variations=[CatalogVariation(variation_id="B1", name="One", price=200, currency="EUR")],
    )
    cart = Cart()
    cart.add(usd, usd.variations[0])
    cart.add(eur, eur.variations[0])

    assert cart.total() == pytest.approx(5.5)
    assert cart.currencies() == ["USD", "EUR"]


def test_to_dict_summary(coffee):
    cart = Cart()
    cart.add(coffee, coffee.variations[0])
    cart.add(coffee, coffee.variations[0])

    summary = cart.to_dict()

    assert summary["totalQuantity"] == 2
    assert summary["totalFormatted"] == "$7.00"
    assert summary["isEmpty"] is False
    assert summary["items"][0]["subtotal"] == pytest.approx(7.0)

    cart.clear()
    assert cart.to_dict()["isEmpty"] is True
