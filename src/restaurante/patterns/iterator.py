"""
Padrão Iterator para percorrer os pratos de um pedido
"""
from typing import List


class DishIterator:
    """Percorre os pratos na ordem em que foram adicionados"""

    def __init__(self, dishes: List[str]):
        self._dishes = list(dishes)
        self._posicao = 0

    def __iter__(self):
        return self

    def __next__(self) -> str:
        if self._posicao >= len(self._dishes):
            raise StopIteration
        prato = self._dishes[self._posicao]
        self._posicao += 1
        return prato

    def has_next(self) -> bool:
        return self._posicao < len(self._dishes)


class ReverseDishIterator(DishIterator):
    """Percorre os pratos do último para o primeiro"""

    def __init__(self, dishes: List[str]):
        super().__init__(list(reversed(dishes)))
