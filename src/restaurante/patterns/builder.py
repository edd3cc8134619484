"""
Padrão Builder para montar pedidos passo a passo
"""
from decimal import Decimal
from typing import List, Optional

from .observer import Observer
from .order import Order
from .strategy import DiscountPricing, PricingStrategy


class OrderBuilder:
    """Builder fluente de Order"""

    def __init__(self):
        self.reset()

    def reset(self) -> "OrderBuilder":
        self._base_price = Decimal("0")
        self._dishes: List[str] = []
        self._strategy: Optional[PricingStrategy] = None
        self._observers: List[Observer] = []
        return self

    def with_base_price(self, base_price) -> "OrderBuilder":
        self._base_price = Decimal(str(base_price))
        return self

    def add_dish(self, name: str) -> "OrderBuilder":
        self._dishes.append(name)
        return self

    def with_strategy(self, strategy: Optional[PricingStrategy]) -> "OrderBuilder":
        self._strategy = strategy
        return self

    def with_observer(self, observer: Observer) -> "OrderBuilder":
        self._observers.append(observer)
        return self

    def build(self) -> Order:
        """Cria o pedido e limpa o builder para o próximo uso"""
        order = Order(self._base_price)
        order.set_strategy(self._strategy)
        # Pratos entram antes dos observers: montar não dispara notificações
        for dish in self._dishes:
            order.add_dish(dish)
        for observer in self._observers:
            order.attach(observer)
        self.reset()
        return order


class OrderDirector:
    """Director com receitas prontas de pedidos"""

    def __init__(self, builder: OrderBuilder):
        self._builder = builder

    def build_combo(self) -> Order:
        return (self._builder.reset()
                .with_base_price("60.00")
                .add_dish("Pizza")
                .add_dish("Cola")
                .build())

    def build_family_dinner(self) -> Order:
        return (self._builder.reset()
                .with_base_price("200.00")
                .add_dish("Pizza")
                .add_dish("Pizza")
                .add_dish("Pasta")
                .add_dish("Salada")
                .add_dish("Suco")
                .with_strategy(DiscountPricing())
                .build())
