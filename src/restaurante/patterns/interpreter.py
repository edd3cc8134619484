"""
Padrão Interpreter para uma pequena linguagem de comandos do pedido

Exemplo: "add Pizza; add Cola; remove Cola; pricing discount"
"""
from abc import ABC, abstractmethod
from typing import List

from .strategy import StrategySelector


class Expression(ABC):
    @abstractmethod
    def interpret(self, order):
        pass


class AddDishExpression(Expression):
    def __init__(self, dish: str):
        self.dish = dish

    def interpret(self, order):
        order.add_dish(self.dish)


class RemoveDishExpression(Expression):
    def __init__(self, dish: str):
        self.dish = dish

    def interpret(self, order):
        order.remove_dish(self.dish)


class PricingExpression(Expression):
    def __init__(self, nome: str):
        self.strategy = StrategySelector.criar_strategy(nome)

    def interpret(self, order):
        order.set_strategy(self.strategy)


class SequenceExpression(Expression):
    def __init__(self, expressions: List[Expression]):
        self.expressions = expressions

    def interpret(self, order):
        for expression in self.expressions:
            expression.interpret(order)


class OrderCommandParser:
    """Transforma o texto em uma árvore de Expression"""

    SEPARADOR = ";"

    def parse(self, texto: str) -> Expression:
        instrucoes = [parte.strip() for parte in texto.split(self.SEPARADOR) if parte.strip()]
        if not instrucoes:
            raise ValueError("Nenhuma instrução informada")
        return SequenceExpression([self._parse_instrucao(i) for i in instrucoes])

    def _parse_instrucao(self, instrucao: str) -> Expression:
        partes = instrucao.split(None, 1)
        if len(partes) < 2:
            raise ValueError(f"Instrução incompleta: '{instrucao}'")

        palavra, argumento = partes[0].lower(), partes[1].strip()
        if palavra == "add":
            return AddDishExpression(argumento)
        if palavra == "remove":
            return RemoveDishExpression(argumento)
        if palavra == "pricing":
            return PricingExpression(argumento)
        raise ValueError(f"Instrução desconhecida: '{palavra}'")


def run_script(texto: str, order):
    """Interpreta o texto diretamente sobre o pedido"""
    OrderCommandParser().parse(texto).interpret(order)
    return order
