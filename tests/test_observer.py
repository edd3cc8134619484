import pytest

from restaurante.patterns import (
    ClientObserver, KitchenObserver, Observer, OrderNotifier, PriceObserver
)


class RecordingObserver(Observer):
    def __init__(self, nome, chamadas):
        self.nome = nome
        self.chamadas = chamadas

    def update(self, order):
        self.chamadas.append((self.nome, order.dishes))


class FailingObserver(Observer):
    def update(self, order):
        raise RuntimeError("falhou")


def test_observers_notified_once_in_attach_order(order):
    chamadas = []
    order.attach(RecordingObserver("a", chamadas))
    order.attach(RecordingObserver("b", chamadas))

    order.add_dish("X")

    assert chamadas == [("a", ["X"]), ("b", ["X"])]


def test_remove_and_restore_notify(order):
    chamadas = []
    order.attach(RecordingObserver("a", chamadas))
    memento = order.save_state()
    order.add_dish("X")
    order.remove_dish("X")
    order.restore_state(memento)
    assert len(chamadas) == 3


def test_duplicate_attach_notifies_twice(order):
    chamadas = []
    observer = RecordingObserver("a", chamadas)
    order.attach(observer)
    order.attach(observer)
    order.add_dish("X")
    assert len(chamadas) == 2


def test_detach_removes_only_first_match():
    chamadas = []
    notifier = OrderNotifier()
    observer = RecordingObserver("a", chamadas)
    notifier.attach(observer)
    notifier.attach(observer)

    notifier.detach(observer)

    assert len(notifier) == 1


def test_detach_absent_is_noop(order):
    chamadas = []
    order.detach(RecordingObserver("fantasma", chamadas))
    order.add_dish("X")
    assert chamadas == []


def test_detach_uses_identity():
    class SempreIgual(Observer):
        def update(self, order):
            pass

        def __eq__(self, other):
            return True

    notifier = OrderNotifier()
    registrado = SempreIgual()
    notifier.attach(registrado)
    notifier.detach(SempreIgual())
    assert len(notifier) == 1


def test_observer_error_propagates_and_stops_notification(order):
    chamadas = []
    order.attach(RecordingObserver("a", chamadas))
    order.attach(FailingObserver())
    order.attach(RecordingObserver("c", chamadas))

    with pytest.raises(RuntimeError):
        order.add_dish("X")

    assert chamadas == [("a", ["X"])]
    assert order.dishes == ["X"]


def test_console_observers(order, capsys):
    order.attach(KitchenObserver())
    order.attach(ClientObserver())
    order.attach(PriceObserver())
    order.add_dish("Pizza")

    saida = capsys.readouterr().out
    assert "[Cozinha] Pedido atualizado: Pizza." in saida
    assert "[Cliente] Seu pedido agora tem 1 prato(s)." in saida
    assert "[Caixa] Valor atual do pedido: R$ 100" in saida


def test_removing_absent_dish_still_notifies(order):
    chamadas = []
    order.attach(RecordingObserver("a", chamadas))
    order.add_dish("Pizza")

    assert order.remove_dish("Sushi") is False
    assert chamadas == [("a", ["Pizza"]), ("a", ["Pizza"])]


def test_set_strategy_does_not_notify(order):
    from restaurante.patterns import DiscountPricing

    chamadas = []
    order.attach(RecordingObserver("a", chamadas))
    order.set_strategy(DiscountPricing())
    order.set_strategy(None)
    assert chamadas == []
