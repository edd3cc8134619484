"""
Padrão Bridge: tipo de relatório (abstração) x formato de saída (implementação)
"""
from abc import ABC, abstractmethod
from typing import List


class ReportRenderer(ABC):
    @abstractmethod
    def render_title(self, titulo: str) -> str:
        pass

    @abstractmethod
    def render_item(self, texto: str) -> str:
        pass

    def join(self, partes: List[str]) -> str:
        return "\n".join(partes)


class PlainTextRenderer(ReportRenderer):
    def render_title(self, titulo: str) -> str:
        return f"{titulo.upper()}\n{'=' * len(titulo)}"

    def render_item(self, texto: str) -> str:
        return f"  {texto}"


class MarkdownRenderer(ReportRenderer):
    def render_title(self, titulo: str) -> str:
        return f"## {titulo}"

    def render_item(self, texto: str) -> str:
        return f"- {texto}"


class OrderReport(ABC):
    def __init__(self, renderer: ReportRenderer):
        self.renderer = renderer

    @abstractmethod
    def render(self, order) -> str:
        pass


class KitchenTicket(OrderReport):
    """Comanda da cozinha: só os pratos"""

    def render(self, order) -> str:
        partes = [self.renderer.render_title("Comanda")]
        partes.extend(self.renderer.render_item(dish) for dish in order)
        return self.renderer.join(partes)


class CustomerReceipt(OrderReport):
    """Recibo do cliente: pratos e valores"""

    def render(self, order) -> str:
        partes = [self.renderer.render_title("Recibo")]
        partes.extend(self.renderer.render_item(dish) for dish in order)
        strategy = order.pricing_strategy
        if strategy:
            partes.append(self.renderer.render_item(f"Política: {strategy.get_descricao()}"))
        partes.append(self.renderer.render_item(f"Subtotal: R$ {order.base_price}"))
        partes.append(self.renderer.render_item(f"Total: R$ {order.get_final_price()}"))
        return self.renderer.join(partes)
