"""
Padrão Chain of Responsibility para reclamações de clientes
"""
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, Field


class Complaint(BaseModel):
    """Reclamação registrada pelo cliente"""
    descricao: str = Field(..., description="Texto da reclamação")
    gravidade: int = Field(..., description="1 = leve, 2 = média, 3 = grave", ge=1, le=3)


class ComplaintHandler(ABC):
    def __init__(self):
        self._next: Optional["ComplaintHandler"] = None

    def set_next(self, handler: "ComplaintHandler") -> "ComplaintHandler":
        self._next = handler
        return handler

    def handle(self, complaint: Complaint) -> Optional[str]:
        if self.pode_resolver(complaint):
            resposta = self.resolver(complaint)
            print(f"[{type(self).__name__}] {resposta}")
            return resposta
        if self._next:
            return self._next.handle(complaint)
        print(f"[Reclamação] Ninguém pôde resolver: {complaint.descricao}")
        return None

    @abstractmethod
    def pode_resolver(self, complaint: Complaint) -> bool:
        pass

    @abstractmethod
    def resolver(self, complaint: Complaint) -> str:
        pass


class WaiterHandler(ComplaintHandler):
    def pode_resolver(self, complaint: Complaint) -> bool:
        return complaint.gravidade == 1

    def resolver(self, complaint: Complaint) -> str:
        return f"Garçom pede desculpas e resolve: {complaint.descricao}"


class ManagerHandler(ComplaintHandler):
    def pode_resolver(self, complaint: Complaint) -> bool:
        return complaint.gravidade == 2

    def resolver(self, complaint: Complaint) -> str:
        return f"Gerente oferece sobremesa como cortesia: {complaint.descricao}"


class DirectorHandler(ComplaintHandler):
    def pode_resolver(self, complaint: Complaint) -> bool:
        return complaint.gravidade == 3

    def resolver(self, complaint: Complaint) -> str:
        return f"Diretor devolve o valor do pedido: {complaint.descricao}"


def build_complaint_chain() -> ComplaintHandler:
    """Garçom -> Gerente -> Diretor"""
    garcom = WaiterHandler()
    garcom.set_next(ManagerHandler()).set_next(DirectorHandler())
    return garcom
