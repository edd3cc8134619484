import pytest
from pydantic import ValidationError

from restaurante.patterns import (
    Complaint, DirectorHandler, ManagerHandler, WaiterHandler, build_complaint_chain
)


@pytest.mark.parametrize("gravidade, inicio", [
    (1, "Garçom"),
    (2, "Gerente"),
    (3, "Diretor"),
])
def test_chain_routes_by_severity(gravidade, inicio):
    resposta = build_complaint_chain().handle(Complaint(descricao="Prato frio", gravidade=gravidade))
    assert resposta.startswith(inicio)
    assert resposta.endswith("Prato frio")


def test_unhandled_complaint_returns_none(capsys):
    cadeia = WaiterHandler()
    cadeia.set_next(ManagerHandler())
    assert cadeia.handle(Complaint(descricao="Conta errada", gravidade=3)) is None
    assert "Ninguém pôde resolver" in capsys.readouterr().out


def test_set_next_returns_next_handler():
    gerente = ManagerHandler()
    assert WaiterHandler().set_next(gerente) is gerente
    assert isinstance(gerente.set_next(DirectorHandler()), DirectorHandler)


def test_complaint_severity_is_validated():
    with pytest.raises(ValidationError):
        Complaint(descricao="?", gravidade=5)
