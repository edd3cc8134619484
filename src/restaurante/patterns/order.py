"""
Agregado Order: pratos, preço base e strategy de preço
"""
from decimal import Decimal
from typing import List, Optional

from .iterator import DishIterator
from .memento import OrderMemento
from .observer import Observer, OrderNotifier
from .strategy import PricingStrategy


def _to_decimal(valor) -> Decimal:
    if isinstance(valor, Decimal):
        return valor
    return Decimal(str(valor))


class Order:
    """Pedido do cliente. Todas as alterações notificam os observers."""

    def __init__(self, base_price=Decimal("0")):
        self._base_price = _to_decimal(base_price)
        self._dishes: List[str] = []
        self._pricing_strategy: Optional[PricingStrategy] = None
        self._notifier = OrderNotifier()

    @property
    def base_price(self) -> Decimal:
        return self._base_price

    @property
    def dishes(self) -> List[str]:
        return list(self._dishes)

    @property
    def pricing_strategy(self) -> Optional[PricingStrategy]:
        return self._pricing_strategy

    def set_strategy(self, strategy: Optional[PricingStrategy]):
        """Troca a strategy de preço (None volta ao preço base)"""
        self._pricing_strategy = strategy

    def attach(self, observer: Observer):
        self._notifier.attach(observer)

    def detach(self, observer: Observer):
        self._notifier.detach(observer)

    def add_dish(self, name: str):
        self._dishes.append(name)
        self._notifier.notify(self)

    def remove_dish(self, name: str) -> bool:
        """Remove a primeira ocorrência do prato; não é erro se não existir"""
        removido = False
        if name in self._dishes:
            self._dishes.remove(name)
            removido = True
        self._notifier.notify(self)
        return removido

    def get_final_price(self) -> Decimal:
        if self._pricing_strategy:
            return self._pricing_strategy.calculate_price(self)
        return self._base_price

    def clone(self) -> "Order":
        """Prototype: cópia com lista de pratos própria e sem observers"""
        copia = Order(self._base_price)
        copia._dishes = list(self._dishes)
        copia._pricing_strategy = self._pricing_strategy
        return copia

    def save_state(self) -> OrderMemento:
        return OrderMemento(
            dishes=tuple(self._dishes),
            pricing_strategy=self._pricing_strategy,
            base_price=self._base_price,
        )

    def restore_state(self, memento: OrderMemento):
        self._dishes = memento.get_dishes()
        self._pricing_strategy = memento.pricing_strategy
        self._base_price = memento.base_price
        self._notifier.notify(self)

    def __iter__(self):
        return DishIterator(self._dishes)

    def __len__(self):
        return len(self._dishes)

    def __repr__(self):
        return f"Order(base_price={self._base_price}, dishes={self._dishes!r})"
