"""
Padrão Abstract Factory para montar combinações de prato + bebida
"""
from abc import ABC, abstractmethod
from typing import Tuple

from .dishes import Dish, Drink, Pizza, Pasta, Salad, Cola, Juice, Wine


class MenuSetFactory(ABC):
    """Família de produtos: um prato principal e uma bebida que combinam"""

    @abstractmethod
    def create_main_dish(self) -> Dish:
        pass

    @abstractmethod
    def create_drink(self) -> Drink:
        pass

    def get_nome(self) -> str:
        return type(self).__name__


class ItalianMenuFactory(MenuSetFactory):
    def create_main_dish(self) -> Dish:
        return Pizza()

    def create_drink(self) -> Drink:
        return Wine()

    def get_nome(self) -> str:
        return "Menu Italiano"


class KidsMenuFactory(MenuSetFactory):
    def create_main_dish(self) -> Dish:
        return Pasta()

    def create_drink(self) -> Drink:
        return Juice()

    def get_nome(self) -> str:
        return "Menu Kids"


class LightMenuFactory(MenuSetFactory):
    def create_main_dish(self) -> Dish:
        return Salad()

    def create_drink(self) -> Drink:
        return Cola()

    def get_nome(self) -> str:
        return "Menu Light"


def serve_menu_set(factory: MenuSetFactory, order) -> Tuple[Dish, Drink]:
    """Adiciona ao pedido o prato e a bebida da família escolhida"""
    prato = factory.create_main_dish()
    bebida = factory.create_drink()
    order.add_dish(prato.nome)
    order.add_dish(bebida.nome)
    print(f"[Menu] {factory.get_nome()}: {prato.nome} + {bebida.nome}")
    return prato, bebida
