"""
Padrão Memento para desfazer alterações no pedido
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .strategy import PricingStrategy


class OrderMemento(BaseModel):
    """Snapshot imutável do estado de um pedido"""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # Tupla: o snapshot nunca aponta para a lista viva do pedido
    dishes: Tuple[str, ...] = Field(..., description="Pratos no momento do snapshot")
    pricing_strategy: Optional[PricingStrategy] = Field(None, description="Strategy compartilhada por referência")
    base_price: Decimal = Field(..., description="Preço base no momento do snapshot")
    created_at: datetime = Field(default_factory=datetime.now)

    def get_dishes(self) -> List[str]:
        return list(self.dishes)

    def descricao(self) -> str:
        pratos = ", ".join(self.dishes) or "vazio"
        estrategia = self.pricing_strategy.get_descricao() if self.pricing_strategy else "sem strategy"
        return f"{self.created_at:%H:%M:%S} | {pratos} | base R$ {self.base_price} | {estrategia}"


class OrderCaretaker:
    """Guarda a pilha de mementos de um único pedido"""

    def __init__(self, order):
        self._order = order
        self._historico: List[OrderMemento] = []

    def backup(self):
        print("[Caretaker] Salvando estado do pedido...")
        self._historico.append(self._order.save_state())

    def undo(self) -> bool:
        """Restaura o último estado salvo"""
        if not self._historico:
            print("[Caretaker] Nada para restaurar!")
            return False

        memento = self._historico.pop()
        print(f"[Caretaker] Restaurando estado: {memento.descricao()}")
        self._order.restore_state(memento)
        return True

    def show_history(self) -> List[str]:
        """Lista o histórico do mais recente para o mais antigo"""
        descricoes = [memento.descricao() for memento in reversed(self._historico)]
        print("[Caretaker] Histórico de estados:")
        for descricao in descricoes:
            print(f"  - {descricao}")
        return descricoes

    def __len__(self):
        return len(self._historico)
