"""
Padrões GoF implementados em torno do pedido do restaurante
"""
from .strategy import PricingStrategy, RegularPricing, DiscountPricing, PremiumPricing, StrategySelector
from .observer import Observer, OrderNotifier, KitchenObserver, ClientObserver, PriceObserver
from .memento import OrderMemento, OrderCaretaker
from .iterator import DishIterator, ReverseDishIterator
from .order import Order
from .command import Command, AddDishCommand, RemoveDishCommand, CommandInvoker
from .dishes import Dish, Pizza, Pasta, Salad, Drink, Cola, Wine, Juice
from .factory import DishFactory, PizzaFactory, PastaFactory, SaladFactory, MenuFactory, order_dish
from .abstract_factory import (
    MenuSetFactory, ItalianMenuFactory, KidsMenuFactory, LightMenuFactory, serve_menu_set
)
from .builder import OrderBuilder, OrderDirector
from .state import OrderLifecycle
from .chain import Complaint, ComplaintHandler, WaiterHandler, ManagerHandler, DirectorHandler, build_complaint_chain
from .interpreter import OrderCommandParser, run_script
from .mediator import RestaurantMediator, Waiter, Chef, Cashier
from .visitor import DishVisitor, CaloriesVisitor, MenuDescriptionVisitor, visit_all
from .proxy import OrderAccessProxy, AccessDeniedError
from .bridge import PlainTextRenderer, MarkdownRenderer, KitchenTicket, CustomerReceipt
from .adapter import DeliveryService, LegacyDeliveryService, DeliveryAdapter
from .facade import RestaurantFacade, OrderSummary

__all__ = [
    # Strategy Pattern
    'PricingStrategy',
    'RegularPricing',
    'DiscountPricing',
    'PremiumPricing',
    'StrategySelector',

    # Observer Pattern
    'Observer',
    'OrderNotifier',
    'KitchenObserver',
    'ClientObserver',
    'PriceObserver',

    # Memento Pattern
    'OrderMemento',
    'OrderCaretaker',

    # Iterator / Prototype
    'DishIterator',
    'ReverseDishIterator',
    'Order',

    # Command Pattern
    'Command',
    'AddDishCommand',
    'RemoveDishCommand',
    'CommandInvoker',

    # Factory Method / Abstract Factory
    'Dish',
    'Pizza',
    'Pasta',
    'Salad',
    'Drink',
    'Cola',
    'Wine',
    'Juice',
    'DishFactory',
    'PizzaFactory',
    'PastaFactory',
    'SaladFactory',
    'MenuFactory',
    'order_dish',
    'MenuSetFactory',
    'ItalianMenuFactory',
    'KidsMenuFactory',
    'LightMenuFactory',
    'serve_menu_set',

    # Builder / State
    'OrderBuilder',
    'OrderDirector',
    'OrderLifecycle',

    # Chain of Responsibility / Interpreter
    'Complaint',
    'ComplaintHandler',
    'WaiterHandler',
    'ManagerHandler',
    'DirectorHandler',
    'build_complaint_chain',
    'OrderCommandParser',
    'run_script',

    # Mediator / Visitor
    'RestaurantMediator',
    'Waiter',
    'Chef',
    'Cashier',
    'DishVisitor',
    'CaloriesVisitor',
    'MenuDescriptionVisitor',
    'visit_all',

    # Proxy / Bridge / Adapter / Facade
    'OrderAccessProxy',
    'AccessDeniedError',
    'PlainTextRenderer',
    'MarkdownRenderer',
    'KitchenTicket',
    'CustomerReceipt',
    'DeliveryService',
    'LegacyDeliveryService',
    'DeliveryAdapter',
    'RestaurantFacade',
    'OrderSummary',
]
