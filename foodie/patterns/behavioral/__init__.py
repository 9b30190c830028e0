"""
Behavioral patterns: how FoodieApp objects talk to each other.
"""

from foodie.patterns.behavioral.chain import (
    ChainDemo,
    OrderValidation,
    PaymentValidator,
    StockValidator,
    ValidationHandler,
    build_chain,
)
from foodie.patterns.behavioral.command import AddItemCommand, Command, CommandDemo
from foodie.patterns.behavioral.observer import (
    Delivery,
    Kitchen,
    Observer,
    ObserverDemo,
    OrderSubject,
)
from foodie.patterns.behavioral.state import (
    CookingOrder,
    DeliveredOrder,
    DeliveryOrder,
    NewOrder,
    OrderContext,
    OrderState,
    StateDemo,
)
from foodie.patterns.behavioral.strategy import (
    DistanceShipping,
    FreeShipping,
    ShippingContext,
    ShippingStrategy,
    StrategyDemo,
)

DEMOS = [ObserverDemo, StrategyDemo, CommandDemo, StateDemo, ChainDemo]

__all__ = [
    "Observer",
    "Kitchen",
    "Delivery",
    "OrderSubject",
    "ShippingStrategy",
    "DistanceShipping",
    "FreeShipping",
    "ShippingContext",
    "Command",
    "AddItemCommand",
    "OrderState",
    "NewOrder",
    "CookingOrder",
    "DeliveryOrder",
    "DeliveredOrder",
    "OrderContext",
    "OrderValidation",
    "ValidationHandler",
    "StockValidator",
    "PaymentValidator",
    "build_chain",
    "DEMOS",
]
