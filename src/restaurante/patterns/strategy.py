from abc import ABC, abstractmethod
from decimal import Decimal

CENTAVOS = Decimal("0.01")


class PricingStrategy(ABC):
    """Interface Strategy para cálculo do preço final"""

    @abstractmethod
    def calculate_price(self, order) -> Decimal:
        """Calcula o preço final a partir do preço base do pedido"""
        pass

    @abstractmethod
    def get_descricao(self) -> str:
        """Retorna descrição da política de preço"""
        pass


class RegularPricing(PricingStrategy):
    """Strategy concreta sem alteração de preço"""

    def calculate_price(self, order) -> Decimal:
        return order.base_price

    def get_descricao(self) -> str:
        return "Preço normal"


class DiscountPricing(PricingStrategy):
    """Strategy concreta com 10% de desconto"""

    def calculate_price(self, order) -> Decimal:
        return (order.base_price * Decimal("0.9")).quantize(CENTAVOS)

    def get_descricao(self) -> str:
        return "Desconto (10%)"


class PremiumPricing(PricingStrategy):
    """Strategy concreta com acréscimo de 20%"""

    def calculate_price(self, order) -> Decimal:
        return (order.base_price * Decimal("1.2")).quantize(CENTAVOS)

    def get_descricao(self) -> str:
        return "Premium (+20%)"


class StrategySelector:
    """Selector para escolher a strategy de preço pelo nome"""

    _strategies = {
        "regular": RegularPricing,
        "discount": DiscountPricing,
        "premium": PremiumPricing,
    }

    @staticmethod
    def criar_strategy(nome: str) -> PricingStrategy:
        strategy_class = StrategySelector._strategies.get(nome.strip().lower())
        if strategy_class is None:
            raise ValueError(f"Strategy de preço desconhecida: {nome}")
        return strategy_class()

    @staticmethod
    def get_nomes_disponiveis() -> list:
        return list(StrategySelector._strategies.keys())
