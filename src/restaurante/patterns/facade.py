"""
Padrão Facade: uma única chamada para pedir, preparar e pagar
"""
import time
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from ..config import COOKING_DELAY
from .factory import MenuFactory
from .observer import ClientObserver, KitchenObserver
from .order import Order
from .strategy import StrategySelector


class OrderSummary(BaseModel):
    """Resumo do pedido finalizado"""
    pratos: List[str] = Field(..., description="Pratos na ordem do pedido")
    preco_base: Decimal = Field(..., description="Soma dos preços dos pratos", ge=0)
    preco_final: Decimal = Field(..., description="Valor após a strategy de preço", ge=0)
    estrategia: str = Field(..., description="Descrição da política de preço")
    preparo: List[str] = Field(default_factory=list, description="Mensagens da cozinha")


class Kitchen:
    """Subsistema: preparo simulado"""

    def __init__(self, cooking_delay: float):
        self.cooking_delay = cooking_delay

    def cook(self, pratos) -> List[str]:
        mensagens = []
        for prato in pratos:
            mensagem = prato.prepare()
            print(f"[Cozinha] {mensagem}")
            time.sleep(self.cooking_delay)
            mensagens.append(mensagem)
        return mensagens


class PaymentTerminal:
    """Subsistema: pagamento simulado"""

    def __init__(self):
        self.transacoes: List[Decimal] = []

    def charge(self, valor: Decimal) -> bool:
        print(f"[Pagamento] Valor de R$ {valor} aprovado.")
        self.transacoes.append(valor)
        return True


class RestaurantFacade:
    def __init__(self, cooking_delay: Optional[float] = None):
        self.menu_factory = MenuFactory()
        self.kitchen = Kitchen(COOKING_DELAY if cooking_delay is None else cooking_delay)
        self.payment = PaymentTerminal()

    def place_order(self, tipos: List[str], estrategia: str = "regular") -> OrderSummary:
        """Cria o pedido pelos tipos do cardápio, prepara e cobra"""
        pratos = []
        for tipo in tipos:
            prato = self.menu_factory.criar_prato(tipo)
            if prato is None:
                raise ValueError(f"Prato desconhecido: {tipo}")
            pratos.append(prato)

        strategy = StrategySelector.criar_strategy(estrategia)
        order = Order(sum((prato.preco for prato in pratos), Decimal("0")))
        order.set_strategy(strategy)
        order.attach(KitchenObserver())
        order.attach(ClientObserver())
        for prato in pratos:
            order.add_dish(prato.nome)

        preparo = self.kitchen.cook(pratos)
        self.payment.charge(order.get_final_price())

        return OrderSummary(
            pratos=order.dishes,
            preco_base=order.base_price,
            preco_final=order.get_final_price(),
            estrategia=strategy.get_descricao(),
            preparo=preparo,
        )
