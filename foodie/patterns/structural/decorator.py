"""
Decorator pattern: stacking extras on top of a basic dish.

Each decorator asks the wrapped dish first and then adds its own
contribution, so extras can be stacked in any order. The order only
changes the description, never the total cost.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from foodie.patterns.base import PatternDemo, PatternGroup


class Food(ABC):
    @abstractmethod
    def get_description(self) -> str:
        """Human-readable name including extras."""

    @abstractmethod
    def get_cost(self) -> float:
        """Total price including extras."""


class BasicFood(Food):
    def get_description(self) -> str:
        return "Comida"

    def get_cost(self) -> float:
        return 100


class FoodDecorator(Food):
    """Base decorator that forwards everything to the wrapped dish."""

    def __init__(self, food: Food) -> None:
        self.food = food

    def get_description(self) -> str:
        return self.food.get_description()

    def get_cost(self) -> float:
        return self.food.get_cost()


class CheeseDecorator(FoodDecorator):
    def get_description(self) -> str:
        return f"{super().get_description()} with extra cheese"

    def get_cost(self) -> float:
        return super().get_cost() + 20


class BaconDecorator(FoodDecorator):
    def get_description(self) -> str:
        return f"{super().get_description()} with extra bacon"

    def get_cost(self) -> float:
        return super().get_cost() + 30


class DecoratorDemo(PatternDemo):
    """Basic food with cheese, then bacon."""

    name = "decorator"
    group = PatternGroup.STRUCTURAL

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        self._header(verbose, "Adding extras to a basic dish")

        pizza: Food = BasicFood()
        pizza = CheeseDecorator(pizza)
        pizza = BaconDecorator(pizza)

        description = pizza.get_description()
        cost = pizza.get_cost()
        self.logger.info(f"{description} {cost}")
        return {"description": description, "cost": cost}
