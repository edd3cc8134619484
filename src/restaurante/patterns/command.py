"""
Padrão Command para encapsular alterações reversíveis no pedido
"""
from abc import ABC, abstractmethod
from typing import List


class Command(ABC):
    """Interface Command"""

    @abstractmethod
    def execute(self):
        pass

    @abstractmethod
    def undo(self):
        pass


class AddDishCommand(Command):
    """Command concreto para adicionar prato"""

    def __init__(self, order, dish: str):
        self._order = order
        self._dish = dish

    def execute(self):
        self._order.add_dish(self._dish)
        print(f"[Command] Prato '{self._dish}' adicionado!")

    def undo(self):
        # Remove a primeira ocorrência pelo nome, não necessariamente a adicionada aqui
        self._order.remove_dish(self._dish)
        print(f"[Command] Adição de '{self._dish}' desfeita!")


class RemoveDishCommand(Command):
    """Command concreto para remover prato"""

    def __init__(self, order, dish: str):
        self._order = order
        self._dish = dish
        self._removido = False

    def execute(self):
        self._removido = self._order.remove_dish(self._dish)
        if self._removido:
            print(f"[Command] Prato '{self._dish}' removido!")
        else:
            print(f"[Command] Prato '{self._dish}' não está no pedido!")

    def undo(self):
        if self._removido:
            self._order.add_dish(self._dish)
            self._removido = False
            print(f"[Command] Remoção de '{self._dish}' desfeita!")


class CommandInvoker:
    """Invoker - Gerencia execução dos comandos"""

    def __init__(self):
        self._historico: List[Command] = []
        self._posicao_atual = -1

    def execute_command(self, comando: Command):
        """Executa um comando e o adiciona ao histórico"""
        comando.execute()

        # Remove comandos após a posição atual (para redo)
        self._historico = self._historico[:self._posicao_atual + 1]
        self._historico.append(comando)
        self._posicao_atual += 1

        print(f"[Invoker] Comando executado. Histórico: {len(self._historico)} comandos")

    def undo(self) -> bool:
        """Desfaz o último comando"""
        if self._posicao_atual >= 0:
            comando = self._historico[self._posicao_atual]
            comando.undo()
            self._posicao_atual -= 1
            print(f"[Invoker] Comando desfeito. Posição atual: {self._posicao_atual}")
            return True

        print("[Invoker] Nenhum comando para desfazer!")
        return False

    def redo(self) -> bool:
        """Refaz o próximo comando"""
        if self._posicao_atual < len(self._historico) - 1:
            self._posicao_atual += 1
            comando = self._historico[self._posicao_atual]
            comando.execute()
            print(f"[Invoker] Comando refeito. Posição atual: {self._posicao_atual}")
            return True

        print("[Invoker] Nenhum comando para refazer!")
        return False

    def get_history(self) -> List[str]:
        """Obtém histórico de comandos como strings"""
        return [type(cmd).__name__ for cmd in self._historico]
