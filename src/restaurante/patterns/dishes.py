from abc import ABC, abstractmethod
from decimal import Decimal


class Dish(ABC):
    """Produto base: prato ou bebida do cardápio"""

    def __init__(self, nome: str, preco: str, calorias: int):
        self.nome = nome
        self.preco = Decimal(preco)
        self.calorias = calorias

    @abstractmethod
    def prepare(self) -> str:
        pass

    @abstractmethod
    def accept(self, visitor):
        pass

    def __repr__(self):
        return f"{type(self).__name__}(nome={self.nome!r}, preco={self.preco})"


class Pizza(Dish):
    def __init__(self):
        super().__init__("Pizza", "45.00", 850)

    def prepare(self) -> str:
        return "Preparando pizza com ingredientes."

    def accept(self, visitor):
        return visitor.visit_pizza(self)


class Pasta(Dish):
    def __init__(self):
        super().__init__("Pasta", "38.00", 650)

    def prepare(self) -> str:
        return "Preparando massa com molho."

    def accept(self, visitor):
        return visitor.visit_pasta(self)


class Salad(Dish):
    def __init__(self):
        super().__init__("Salada", "25.00", 220)

    def prepare(self) -> str:
        return "Montando salada com folhas frescas."

    def accept(self, visitor):
        return visitor.visit_salad(self)


class Drink(Dish):
    """Bebidas compartilham o mesmo preparo e a mesma visita"""

    def prepare(self) -> str:
        return f"Servindo {self.nome.lower()} gelado(a)."

    def accept(self, visitor):
        return visitor.visit_drink(self)


class Cola(Drink):
    def __init__(self):
        super().__init__("Cola", "8.00", 140)


class Wine(Drink):
    def __init__(self):
        super().__init__("Vinho", "60.00", 125)

    def prepare(self) -> str:
        return "Servindo taça de vinho tinto."


class Juice(Drink):
    def __init__(self):
        super().__init__("Suco", "10.00", 110)
