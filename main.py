#!/usr/bin/env python3
"""
Demonstração dos padrões GoF do Restaurante
Executa cada padrão em sequência e imprime o roteiro no console
"""
from restaurante.patterns import (
    AddDishCommand, CaloriesVisitor, ClientObserver, CommandInvoker, Complaint,
    CustomerReceipt, DeliveryAdapter, DiscountPricing, ItalianMenuFactory,
    KitchenObserver, KitchenTicket, LegacyDeliveryService, MarkdownRenderer,
    MenuDescriptionVisitor, Order, OrderAccessProxy, OrderBuilder, OrderCaretaker,
    OrderDirector, OrderLifecycle, PastaFactory, PizzaFactory, PlainTextRenderer,
    PremiumPricing, RestaurantFacade, RestaurantMediator, ReverseDishIterator,
    Waiter, Chef, Cashier, AccessDeniedError, build_complaint_chain, order_dish,
    run_script, serve_menu_set, visit_all,
)
from restaurante.config import STAFF_PASSWORD


def secao(titulo: str):
    print()
    print(f"=== {titulo} ===")


def main():
    """Função principal"""
    print("🍕 Restaurante - Padrões GoF")
    print("=" * 60)

    secao("Factory Method")
    print(order_dish(PizzaFactory()))
    print(order_dish(PastaFactory()))

    secao("Observer + Strategy")
    order = Order("100.00")
    order.attach(KitchenObserver())
    order.attach(ClientObserver())
    order.add_dish("Pizza")
    order.add_dish("Pasta")
    print(f"Preço normal: R$ {order.get_final_price()}")
    order.set_strategy(DiscountPricing())
    print(f"Com desconto: R$ {order.get_final_price()}")
    order.set_strategy(PremiumPricing())
    print(f"Premium: R$ {order.get_final_price()}")

    secao("Memento")
    caretaker = OrderCaretaker(order)
    caretaker.backup()
    order.add_dish("Cola")
    caretaker.show_history()
    caretaker.undo()
    print(f"Pratos após desfazer: {order.dishes}")
    caretaker.undo()

    secao("Command")
    invoker = CommandInvoker()
    invoker.execute_command(AddDishCommand(order, "Salada"))
    invoker.undo()
    invoker.redo()

    secao("Prototype + Iterator")
    copia = order.clone()
    copia.add_dish("Sobremesa")
    print(f"Original: {order.dishes}")
    print(f"Cópia: {copia.dishes}")
    print("Do último para o primeiro:", ", ".join(ReverseDishIterator(copia.dishes)))

    secao("Abstract Factory + Visitor")
    jantar = Order("105.00")
    prato, bebida = serve_menu_set(ItalianMenuFactory(), jantar)
    calorias = visit_all([prato, bebida], CaloriesVisitor())
    print(f"Calorias: {calorias.total} kcal")
    for linha in visit_all([prato, bebida], MenuDescriptionVisitor()).linhas:
        print(linha)

    secao("Builder")
    familia = OrderDirector(OrderBuilder()).build_family_dinner()
    print(f"Jantar em família: {familia.dishes} -> R$ {familia.get_final_price()}")

    secao("State")
    lifecycle = OrderLifecycle(familia)
    lifecycle.advance()
    lifecycle.cancel()
    lifecycle.advance()
    lifecycle.advance()

    secao("Interpreter")
    script = run_script("add Pizza; add Cola; remove Cola; pricing discount", Order("50.00"))
    print(f"Resultado: {script.dishes} -> R$ {script.get_final_price()}")

    secao("Chain of Responsibility")
    cadeia = build_complaint_chain()
    cadeia.handle(Complaint(descricao="Demora no atendimento", gravidade=1))
    cadeia.handle(Complaint(descricao="Prato frio", gravidade=2))
    cadeia.handle(Complaint(descricao="Intoxicação alimentar", gravidade=3))

    secao("Mediator")
    mediator = RestaurantMediator(Waiter("Ana"), Chef("Luigi"), Cashier("Rui"))
    mediator.waiter.take_order(order)

    secao("Proxy")
    proxy = OrderAccessProxy(order)
    proxy.add_dish("Pão de alho")
    try:
        proxy.remove_dish("Pão de alho")
    except AccessDeniedError as e:
        print(f"Acesso negado: {e}")
    proxy.autenticar(STAFF_PASSWORD)
    proxy.remove_dish("Pão de alho")

    secao("Bridge")
    print(KitchenTicket(PlainTextRenderer()).render(order))
    print(CustomerReceipt(MarkdownRenderer()).render(order))

    secao("Adapter")
    DeliveryAdapter(LegacyDeliveryService()).deliver(order)

    secao("Facade")
    resumo = RestaurantFacade().place_order(["pizza", "salada", "suco"], "discount")
    print(f"Resumo: {resumo.pratos} -> R$ {resumo.preco_final}")

    print("\n🎉 Demonstração concluída!")
    return 0


if __name__ == "__main__":
    exit(main())
