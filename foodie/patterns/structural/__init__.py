"""
Structural patterns: wrapping and composing FoodieApp objects.
"""

from foodie.patterns.structural.adapter import (
    AdapterDemo,
    Payment,
    StripeAdapter,
    StripeService,
)
from foodie.patterns.structural.composite import Combo, CompositeDemo, FoodItem, SimpleFood
from foodie.patterns.structural.decorator import (
    BaconDecorator,
    BasicFood,
    CheeseDecorator,
    DecoratorDemo,
    Food,
    FoodDecorator,
)
from foodie.patterns.structural.facade import (
    DeliveryService,
    FacadeDemo,
    OrderFacade,
    OrderService,
    PaymentService,
)
from foodie.patterns.structural.proxy import (
    OrderHistory,
    OrderHistoryProxy,
    ProxyDemo,
    RealOrderHistory,
)

DEMOS = [AdapterDemo, DecoratorDemo, FacadeDemo, CompositeDemo, ProxyDemo]

__all__ = [
    "Payment",
    "StripeService",
    "StripeAdapter",
    "Food",
    "BasicFood",
    "FoodDecorator",
    "CheeseDecorator",
    "BaconDecorator",
    "OrderService",
    "PaymentService",
    "DeliveryService",
    "OrderFacade",
    "FoodItem",
    "SimpleFood",
    "Combo",
    "OrderHistory",
    "RealOrderHistory",
    "OrderHistoryProxy",
    "DEMOS",
]
