"""
Padrão Adapter para um serviço de entrega com interface incompatível
"""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List


class DeliveryService(ABC):
    """Interface esperada pelo restaurante"""

    @abstractmethod
    def deliver(self, order) -> str:
        pass


class LegacyDeliveryService:
    """Serviço terceirizado: recebe itens em CSV e valor em centavos"""

    def __init__(self):
        self.pacotes: List[str] = []

    def send_package(self, items_csv: str, amount_cents: int) -> str:
        codigo = f"PKG-{len(self.pacotes) + 1:04d}"
        self.pacotes.append(codigo)
        print(f"[Entrega] {codigo}: {items_csv} ({amount_cents} centavos)")
        return codigo


class DeliveryAdapter(DeliveryService):
    def __init__(self, service: LegacyDeliveryService):
        self._service = service

    def deliver(self, order) -> str:
        items_csv = ",".join(order.dishes)
        amount_cents = int(order.get_final_price() * Decimal(100))
        return self._service.send_package(items_csv, amount_cents)
