import os

# Antes de importar o pacote: sem espera no preparo e bcrypt rápido
os.environ.setdefault("RESTAURANTE_COOKING_DELAY", "0")
os.environ.setdefault("RESTAURANTE_BCRYPT_ROUNDS", "4")
os.environ.setdefault("RESTAURANTE_STAFF_PASSWORD", "senha-teste")

import pytest

from restaurante.patterns import Order


@pytest.fixture
def order():
    return Order("100")
