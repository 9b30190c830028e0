"""
Factory Method pattern: creating dishes from a type tag.
"""

# pylint: disable=too-few-public-methods

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Type

from foodie.observability.logging import get_logger
from foodie.patterns.base import PatternDemo, PatternGroup

logger = get_logger("creational.factory", pattern="factory")


class UnknownFoodTypeError(ValueError):
    """Raised when a factory is asked for a dish it cannot make."""

    def __init__(self, food_type: str, known: List[str]) -> None:
        super().__init__(f"Unknown food type: {food_type!r}. Expected one of {known}")
        self.food_type = food_type
        self.known = known


class Food(ABC):
    @abstractmethod
    def prepare(self) -> str:
        """Prepare the dish and return what was done."""


class Pizza(Food):
    def prepare(self) -> str:
        return announce_preparation("prepare pizza")


class Empanada(Food):
    def prepare(self) -> str:
        return announce_preparation("prepare empanada")


def announce_preparation(message: str) -> str:
    logger.info(message)
    return message


FOOD_TYPES: Dict[str, Type[Food]] = {
    "pizza": Pizza,
    "empanada": Empanada,
}


class FoodFactory:
    """Maps a closed set of type tags to concrete dishes."""

    @staticmethod
    def create_food(food_type: str) -> Food:
        """Create the dish registered under ``food_type`` (case-insensitive).

        Raises:
            UnknownFoodTypeError: If no dish is registered for ``food_type``
        """
        food_cls = FOOD_TYPES.get(food_type.lower())
        if food_cls is None:
            raise UnknownFoodTypeError(food_type, sorted(FOOD_TYPES))
        return food_cls()


class FactoryDemo(PatternDemo):
    """Make a pizza by tag, then ask for something the kitchen doesn't make."""

    name = "factory"
    group = PatternGroup.CREATIONAL

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        self._header(verbose, "Creating food from a type tag")

        food = FoodFactory.create_food("pizza")
        prepared = food.prepare()

        rejected = None
        try:
            FoodFactory.create_food("sushi")
        except UnknownFoodTypeError as e:
            self.logger.warning(str(e))
            rejected = e.food_type

        return {"prepared": prepared, "rejected": rejected}
