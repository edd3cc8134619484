from decimal import Decimal

import pytest

from restaurante.patterns import (
    DiscountPricing, PremiumPricing, RegularPricing, StrategySelector
)


def test_no_strategy_returns_base_price(order):
    assert order.get_final_price() == Decimal("100")


def test_discount_strategy(order):
    order.set_strategy(DiscountPricing())
    assert order.get_final_price() == Decimal("90")


def test_premium_strategy(order):
    order.set_strategy(PremiumPricing())
    assert order.get_final_price() == Decimal("120")


def test_regular_strategy(order):
    order.set_strategy(RegularPricing())
    assert order.get_final_price() == Decimal("100")


def test_swapping_strategy_recomputes(order):
    order.set_strategy(PremiumPricing())
    premium = order.get_final_price()
    order.set_strategy(DiscountPricing())
    assert premium == Decimal("120")
    assert order.get_final_price() == Decimal("90")
    order.set_strategy(None)
    assert order.get_final_price() == Decimal("100")


def test_discount_is_rounded_to_cents():
    from restaurante.patterns import Order
    order = Order("10.05")
    order.set_strategy(DiscountPricing())
    assert order.get_final_price() == Decimal("9.04")


def test_selector_by_name():
    assert isinstance(StrategySelector.criar_strategy("Discount"), DiscountPricing)
    assert isinstance(StrategySelector.criar_strategy(" premium "), PremiumPricing)
    assert set(StrategySelector.get_nomes_disponiveis()) == {"regular", "discount", "premium"}


def test_selector_unknown_name():
    with pytest.raises(ValueError):
        StrategySelector.criar_strategy("gratis")
