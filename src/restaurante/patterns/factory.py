from abc import ABC, abstractmethod
from typing import Dict, Optional

from .dishes import Dish, Pizza, Pasta, Salad, Cola, Juice, Wine


class DishFactory(ABC):
    """Factory Method interface para criação de pratos"""

    @abstractmethod
    def create_dish(self) -> Dish:
        pass


class PizzaFactory(DishFactory):
    def create_dish(self) -> Dish:
        return Pizza()


class PastaFactory(DishFactory):
    def create_dish(self) -> Dish:
        return Pasta()


class SaladFactory(DishFactory):
    def create_dish(self) -> Dish:
        return Salad()


class ColaFactory(DishFactory):
    def create_dish(self) -> Dish:
        return Cola()


class JuiceFactory(DishFactory):
    def create_dish(self) -> Dish:
        return Juice()


class WineFactory(DishFactory):
    def create_dish(self) -> Dish:
        return Wine()


def order_dish(factory: DishFactory) -> str:
    """Cliente do Factory Method: cria o prato e devolve o texto do preparo"""
    dish = factory.create_dish()
    return dish.prepare()


class MenuFactory:
    """Factory para gerenciar criação dos itens do cardápio"""

    def __init__(self):
        self._factories: Dict[str, DishFactory] = {
            "pizza": PizzaFactory(),
            "pasta": PastaFactory(),
            "salada": SaladFactory(),
            "cola": ColaFactory(),
            "suco": JuiceFactory(),
            "vinho": WineFactory(),
        }

    def registrar_factory(self, tipo: str, factory: DishFactory):
        """Registra uma nova factory"""
        self._factories[tipo.lower()] = factory

    def criar_prato(self, tipo: str) -> Optional[Dish]:
        """Cria prato usando a factory apropriada"""
        factory = self._factories.get(tipo.strip().lower())
        if factory:
            return factory.create_dish()
        return None

    def get_tipos_disponiveis(self) -> list:
        """Retorna tipos de pratos disponíveis"""
        return list(self._factories.keys())
