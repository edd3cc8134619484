from decimal import Decimal

from restaurante.patterns import (
    DiscountPricing, Order, OrderBuilder, OrderDirector, PremiumPricing
)


def test_builder_builds_configured_order():
    chamadas = []

    class Registrador:
        def update(self, order):
            chamadas.append(order.dishes)

    order = (OrderBuilder()
             .with_base_price(80)
             .add_dish("Pizza")
             .add_dish("Cola")
             .with_strategy(PremiumPricing())
             .with_observer(Registrador())
             .build())

    assert isinstance(order, Order)
    assert order.dishes == ["Pizza", "Cola"]
    assert order.get_final_price() == Decimal("96.00")
    assert chamadas == []

    order.add_dish("Salada")
    assert chamadas == [["Pizza", "Cola", "Salada"]]


def test_builder_resets_after_build():
    builder = OrderBuilder().add_dish("Pizza")
    builder.build()
    assert builder.build().dishes == []


def test_director_presets():
    director = OrderDirector(OrderBuilder())
    combo = director.build_combo()
    assert combo.dishes == ["Pizza", "Cola"]
    assert combo.get_final_price() == Decimal("60.00")

    familia = director.build_family_dinner()
    assert familia.dishes.count("Pizza") == 2
    assert isinstance(familia.pricing_strategy, DiscountPricing)
    assert familia.get_final_price() == Decimal("180.00")
