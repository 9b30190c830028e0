"""
Composite pattern: combos made of dishes or of other combos.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from foodie.patterns.base import PatternDemo, PatternGroup


class FoodItem(ABC):
    @abstractmethod
    def get_name(self) -> str:
        """Display name."""

    @abstractmethod
    def get_price(self) -> float:
        """Price of the item, including any children."""


class SimpleFood(FoodItem):
    """Leaf item with a fixed name and price."""

    def __init__(self, name: str, price: float) -> None:
        self.name = name
        self.price = price

    def get_name(self) -> str:
        return self.name

    def get_price(self) -> float:
        return self.price


class Combo(FoodItem):
    """Container that aggregates the names and prices of its children."""

    def __init__(self) -> None:
        self._items: List[FoodItem] = []

    @property
    def items(self) -> List[FoodItem]:
        return list(self._items)

    def add(self, item: FoodItem) -> "Combo":
        self._items.append(item)
        return self

    def get_name(self) -> str:
        return f"Combo {', '.join(item.get_name() for item in self._items)}"

    def get_price(self) -> float:
        return sum(item.get_price() for item in self._items)


class CompositeDemo(PatternDemo):
    name = "composite"
    group = PatternGroup.STRUCTURAL

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        self._header(verbose, "Building a combo")

        combo = Combo()
        combo.add(SimpleFood("Pizza", 100))
        combo.add(SimpleFood("Empanada", 50))

        name = combo.get_name()
        price = combo.get_price()
        self.logger.info(name)
        self.logger.info(str(price))
        return {"name": name, "price": price}
