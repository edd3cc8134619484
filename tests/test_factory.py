from decimal import Decimal

from restaurante.patterns import (
    CaloriesVisitor, DishFactory, ItalianMenuFactory, KidsMenuFactory,
    LightMenuFactory, MenuDescriptionVisitor, MenuFactory, Order, PastaFactory,
    Pizza, PizzaFactory, SaladFactory, order_dish, serve_menu_set, visit_all,
)
from restaurante.patterns.dishes import Cola


def test_factory_method_prepares_dishes():
    assert order_dish(PizzaFactory()) == "Preparando pizza com ingredientes."
    assert order_dish(PastaFactory()) == "Preparando massa com molho."
    assert order_dish(SaladFactory()) == "Montando salada com folhas frescas."


def test_menu_factory_creates_by_type():
    menu = MenuFactory()
    pizza = menu.criar_prato("PIZZA")
    assert isinstance(pizza, Pizza)
    assert pizza.preco == Decimal("45.00")
    assert menu.criar_prato("sushi") is None


def test_menu_factory_register_new_type():
    class ColaDupla(DishFactory):
        def create_dish(self):
            return Cola()

    menu = MenuFactory()
    menu.registrar_factory("Refri", ColaDupla())
    assert "refri" in menu.get_tipos_disponiveis()
    assert menu.criar_prato("refri").nome == "Cola"


def test_abstract_factories_build_matching_families():
    assert [ItalianMenuFactory().create_main_dish().nome, ItalianMenuFactory().create_drink().nome] == ["Pizza", "Vinho"]
    assert KidsMenuFactory().create_drink().nome == "Suco"
    assert LightMenuFactory().create_main_dish().nome == "Salada"


def test_serve_menu_set_adds_both_items():
    order = Order("0")
    serve_menu_set(LightMenuFactory(), order)
    assert order.dishes == ["Salada", "Cola"]


def test_calories_visitor():
    itens = [Pizza(), Cola()]
    assert visit_all(itens, CaloriesVisitor()).total == 850 + 140


def test_description_visitor():
    linhas = visit_all([Pizza(), Cola()], MenuDescriptionVisitor()).linhas
    assert linhas == ["Pizza - R$ 45.00 (forno a lenha)", "Cola - R$ 8.00 (bebida)"]
