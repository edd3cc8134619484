from decimal import Decimal

from restaurante.patterns import Cashier, Chef, RestaurantMediator, Waiter


def test_mediator_runs_full_flow(order):
    order.add_dish("Pizza")
    order.add_dish("Cola")
    mediator = RestaurantMediator(Waiter("Ana"), Chef("Luigi", cooking_delay=0), Cashier("Rui"))

    mediator.waiter.take_order(order)

    assert mediator.eventos == ["pedido_anotado", "pedido_pronto", "pedido_servido", "pedido_pago"]
    assert mediator.cashier.total_recebido == Decimal("100")


def test_colleagues_know_the_mediator():
    waiter, chef, cashier = Waiter("Ana"), Chef("Luigi"), Cashier("Rui")
    mediator = RestaurantMediator(waiter, chef, cashier)
    assert waiter.mediator is chef.mediator is cashier.mediator is mediator
    assert chef.cooking_delay == 0
