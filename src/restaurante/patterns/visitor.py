from abc import ABC, abstractmethod
from typing import Iterable, List


class DishVisitor(ABC):
    """Operações sobre os itens do cardápio sem alterar suas classes"""

    @abstractmethod
    def visit_pizza(self, pizza):
        pass

    @abstractmethod
    def visit_pasta(self, pasta):
        pass

    @abstractmethod
    def visit_salad(self, salad):
        pass

    @abstractmethod
    def visit_drink(self, drink):
        pass


class CaloriesVisitor(DishVisitor):
    """Soma as calorias dos itens visitados"""

    def __init__(self):
        self.total = 0

    def visit_pizza(self, pizza):
        self.total += pizza.calorias

    def visit_pasta(self, pasta):
        self.total += pasta.calorias

    def visit_salad(self, salad):
        self.total += salad.calorias

    def visit_drink(self, drink):
        self.total += drink.calorias


class MenuDescriptionVisitor(DishVisitor):
    def __init__(self):
        self.linhas: List[str] = []

    def visit_pizza(self, pizza):
        self.linhas.append(f"{pizza.nome} - R$ {pizza.preco} (forno a lenha)")

    def visit_pasta(self, pasta):
        self.linhas.append(f"{pasta.nome} - R$ {pasta.preco} (massa fresca)")

    def visit_salad(self, salad):
        self.linhas.append(f"{salad.nome} - R$ {salad.preco} ({salad.calorias} kcal)")

    def visit_drink(self, drink):
        self.linhas.append(f"{drink.nome} - R$ {drink.preco} (bebida)")


def visit_all(itens: Iterable, visitor: DishVisitor) -> DishVisitor:
    for item in itens:
        item.accept(visitor)
    return visitor
