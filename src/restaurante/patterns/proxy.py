"""
Padrão Proxy para controlar o acesso às operações do pedido
"""
from typing import List, Optional

from ..auth import get_staff_password_hash, verify_password


class AccessDeniedError(PermissionError):
    """Operação restrita à equipe"""


class OrderAccessProxy:
    """Mesma interface do Order; remoções e restaurações exigem senha da equipe"""

    def __init__(self, order, senha_hash: Optional[str] = None):
        self._order = order
        self._senha_hash = senha_hash
        self._autenticado = False
        self.access_log: List[str] = []

    def autenticar(self, senha: str) -> bool:
        senha_hash = self._senha_hash or get_staff_password_hash()
        self._autenticado = verify_password(senha, senha_hash)
        self._registrar("autenticar", self._autenticado)
        return self._autenticado

    def logout(self):
        self._autenticado = False

    @property
    def autenticado(self) -> bool:
        return self._autenticado

    @property
    def dishes(self):
        return self._order.dishes

    @property
    def base_price(self):
        return self._order.base_price

    @property
    def pricing_strategy(self):
        return self._order.pricing_strategy

    def attach(self, observer):
        self._registrar("attach", True)
        self._order.attach(observer)

    def detach(self, observer):
        self._registrar("detach", True)
        self._order.detach(observer)

    def clone(self):
        self._registrar("clone", True)
        return self._order.clone()

    def __iter__(self):
        return iter(self._order)

    def __len__(self):
        return len(self._order)

    def add_dish(self, name: str):
        self._registrar("add_dish", True)
        self._order.add_dish(name)

    def remove_dish(self, name: str) -> bool:
        self._exigir_equipe("remove_dish")
        return self._order.remove_dish(name)

    def set_strategy(self, strategy):
        self._exigir_equipe("set_strategy")
        self._order.set_strategy(strategy)

    def restore_state(self, memento):
        self._exigir_equipe("restore_state")
        self._order.restore_state(memento)

    def save_state(self):
        self._registrar("save_state", True)
        return self._order.save_state()

    def get_final_price(self):
        return self._order.get_final_price()

    def _exigir_equipe(self, operacao: str):
        self._registrar(operacao, self._autenticado)
        if not self._autenticado:
            raise AccessDeniedError(f"Operação '{operacao}' permitida apenas para a equipe")

    def _registrar(self, operacao: str, permitido: bool):
        entrada = f"{operacao}: {'permitido' if permitido else 'negado'}"
        self.access_log.append(entrada)
        print(f"[Proxy] {entrada}")
