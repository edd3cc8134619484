"""
Padrão Mediator para coordenar garçom, chef e caixa
"""
import time
from decimal import Decimal
from typing import List, Optional

from ..config import COOKING_DELAY


class RestaurantColleague:
    def __init__(self, nome: str):
        self.nome = nome
        self.mediator: Optional["RestaurantMediator"] = None


class Waiter(RestaurantColleague):
    def take_order(self, order):
        print(f"[Garçom {self.nome}] Anotando pedido: {', '.join(order.dishes)}")
        self.mediator.notify(self, "pedido_anotado", order)

    def serve(self, order):
        print(f"[Garçom {self.nome}] Servindo {len(order.dishes)} prato(s).")
        self.mediator.notify(self, "pedido_servido", order)


class Chef(RestaurantColleague):
    def __init__(self, nome: str, cooking_delay: Optional[float] = None):
        super().__init__(nome)
        self.cooking_delay = COOKING_DELAY if cooking_delay is None else cooking_delay

    def cook(self, order):
        for dish in order:
            print(f"[Chef {self.nome}] Preparando {dish}...")
            time.sleep(self.cooking_delay)
        self.mediator.notify(self, "pedido_pronto", order)


class Cashier(RestaurantColleague):
    def __init__(self, nome: str):
        super().__init__(nome)
        self.total_recebido = Decimal("0")

    def charge(self, order):
        valor = order.get_final_price()
        self.total_recebido += valor
        print(f"[Caixa {self.nome}] Cobrando R$ {valor}")
        self.mediator.notify(self, "pedido_pago", order)


class RestaurantMediator:
    """Os colegas só conversam entre si através do mediator"""

    def __init__(self, waiter: Waiter, chef: Chef, cashier: Cashier):
        self.waiter = waiter
        self.chef = chef
        self.cashier = cashier
        self.eventos: List[str] = []
        for colleague in (waiter, chef, cashier):
            colleague.mediator = self

    def notify(self, sender: RestaurantColleague, evento: str, order):
        self.eventos.append(evento)
        if evento == "pedido_anotado":
            self.chef.cook(order)
        elif evento == "pedido_pronto":
            self.waiter.serve(order)
        elif evento == "pedido_servido":
            self.cashier.charge(order)
