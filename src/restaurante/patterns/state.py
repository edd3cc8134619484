"""
Padrão State para o ciclo de vida do pedido
"""
from abc import ABC, abstractmethod


class OrderState(ABC):
    """Cada estado conhece o seu sucessor e o que o pedido pode fazer nele"""

    nome = ""
    cancelavel = False
    modificavel = False

    @abstractmethod
    def proximo_estado(self, lifecycle):
        pass

    def pode_cancelar(self) -> bool:
        return self.cancelavel

    def pode_modificar(self) -> bool:
        return self.modificavel

    def __str__(self):
        return self.nome


class NewState(OrderState):
    nome = "Novo"
    cancelavel = True
    modificavel = True

    def proximo_estado(self, lifecycle):
        lifecycle.estado = CookingState()


class CookingState(OrderState):
    nome = "Em preparo"

    def proximo_estado(self, lifecycle):
        lifecycle.estado = ReadyState()


class ReadyState(OrderState):
    nome = "Pronto"

    def proximo_estado(self, lifecycle):
        lifecycle.estado = DeliveredState()


class FinalState(OrderState):
    """Estados terminais: avançar não muda nada"""

    def proximo_estado(self, lifecycle):
        return None


class DeliveredState(FinalState):
    nome = "Entregue"


class CancelledState(FinalState):
    nome = "Cancelado"


class OrderLifecycle:
    """Contexto do State: acompanha o estado de um Order"""

    def __init__(self, order):
        self.order = order
        self.estado = NewState()

    def advance(self):
        """Avança para o próximo estado usando State Pattern"""
        estado_anterior = str(self.estado)
        self.estado.proximo_estado(self)
        estado_novo = str(self.estado)
        print(f"[Estado] {estado_anterior} -> {estado_novo}")
        return estado_anterior, estado_novo

    def cancel(self) -> bool:
        """Cancela o pedido se permitido no estado atual"""
        if self.estado.pode_cancelar():
            self.estado = CancelledState()
            print("[Estado] Pedido cancelado.")
            return True
        print(f"[Estado] Não é possível cancelar no estado '{self.estado}'.")
        return False

    def add_dish(self, name: str):
        self._verificar_modificacao()
        self.order.add_dish(name)

    def remove_dish(self, name: str) -> bool:
        self._verificar_modificacao()
        return self.order.remove_dish(name)

    def _verificar_modificacao(self):
        if not self.estado.pode_modificar():
            raise ValueError(f"Pedido não pode ser alterado no estado '{self.estado}'")

    def get_estado(self):
        return str(self.estado).lower().replace(" ", "_")

    def get_estado_display(self):
        return str(self.estado)
