"""
Creational patterns: different ways FoodieApp builds its objects.
"""

from foodie.patterns.creational.abstract_factory import (
    AbstractFactoryDemo,
    ArgentinianEmpanada,
    ArgentinianFoodFactory,
    ArgentinianPizza,
    FoodFamilyFactory,
    JapaneseEmpanada,
    JapaneseFoodFactory,
    JapanesePizza,
)
from foodie.patterns.creational.builder import BuilderDemo, Lasagna, LasagnaBuilder
from foodie.patterns.creational.factory import (
    Empanada,
    FactoryDemo,
    Food,
    FoodFactory,
    Pizza,
    UnknownFoodTypeError,
)
from foodie.patterns.creational.prototype import Clonable, Order, PrototypeDemo
from foodie.patterns.creational.singleton import ConfigManager, SingletonDemo

DEMOS = [FactoryDemo, AbstractFactoryDemo, BuilderDemo, SingletonDemo, PrototypeDemo]

__all__ = [
    "Food",
    "Pizza",
    "Empanada",
    "FoodFactory",
    "UnknownFoodTypeError",
    "FoodFamilyFactory",
    "ArgentinianFoodFactory",
    "ArgentinianPizza",
    "ArgentinianEmpanada",
    "JapaneseFoodFactory",
    "JapanesePizza",
    "JapaneseEmpanada",
    "Lasagna",
    "LasagnaBuilder",
    "ConfigManager",
    "Clonable",
    "Order",
    "DEMOS",
]
