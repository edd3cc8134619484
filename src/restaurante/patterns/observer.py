from abc import ABC, abstractmethod
from typing import List


class Observer(ABC):
    @abstractmethod
    def update(self, order):
        pass


class OrderNotifier:
    """Lista ordenada de observers de um pedido"""

    def __init__(self):
        self._observers: List[Observer] = []

    def attach(self, observer: Observer):
        self._observers.append(observer)

    def detach(self, observer: Observer):
        """Remove a primeira ocorrência do observer (por identidade)"""
        for indice, atual in enumerate(self._observers):
            if atual is observer:
                del self._observers[indice]
                return

    def notify(self, order):
        # Sem isolamento: um erro em um observer interrompe os seguintes
        for observer in list(self._observers):
            observer.update(order)

    def __len__(self):
        return len(self._observers)


class KitchenObserver(Observer):
    def update(self, order):
        print(f"[Cozinha] Pedido atualizado: {', '.join(order.dishes) or 'vazio'}.")


class ClientObserver(Observer):
    def update(self, order):
        print(f"[Cliente] Seu pedido agora tem {len(order.dishes)} prato(s).")


class PriceObserver(Observer):
    def update(self, order):
        print(f"[Caixa] Valor atual do pedido: R$ {order.get_final_price()}")
