from decimal import Decimal

import pytest

from restaurante.patterns import OrderSummary, RestaurantFacade


def test_place_order_returns_summary(capsys):
    facade = RestaurantFacade(cooking_delay=0)
    resumo = facade.place_order(["pizza", "Cola"], "discount")

    assert isinstance(resumo, OrderSummary)
    assert resumo.pratos == ["Pizza", "Cola"]
    assert resumo.preco_base == Decimal("53.00")
    assert resumo.preco_final == Decimal("47.70")
    assert resumo.estrategia == "Desconto (10%)"
    assert resumo.preparo[0] == "Preparando pizza com ingredientes."
    assert facade.payment.transacoes == [Decimal("47.70")]
    assert "[Pagamento]" in capsys.readouterr().out


def test_place_order_regular_by_default():
    resumo = RestaurantFacade(cooking_delay=0).place_order(["salada"])
    assert resumo.preco_final == resumo.preco_base == Decimal("25.00")


def test_unknown_dish_raises():
    facade = RestaurantFacade(cooking_delay=0)
    with pytest.raises(ValueError):
        facade.place_order(["pizza", "sushi"])
    assert facade.payment.transacoes == []


def test_unknown_strategy_raises():
    with pytest.raises(ValueError):
        RestaurantFacade(cooking_delay=0).place_order(["pizza"], "gratis")
