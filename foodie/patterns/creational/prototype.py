"""
Prototype pattern: cloning an order to start a new one from it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, TypeVar

from foodie.patterns.base import PatternDemo, PatternGroup

T = TypeVar("T")


class Clonable(ABC, Generic[T]):
    @abstractmethod
    def clone(self) -> T:
        """Return an independent copy."""


class Order(Clonable["Order"]):
    """Order whose item list is owned by the order itself."""

    def __init__(self, items: List[str], address: str) -> None:
        self.items = items
        self.address = address

    def clone(self) -> "Order":
        # items is copied so the clone can grow or shrink on its own
        return Order(list(self.items), self.address)

    def __repr__(self) -> str:
        return f"Order(items={self.items!r}, address={self.address!r})"


class PrototypeDemo(PatternDemo):
    name = "prototype"
    group = PatternGroup.CREATIONAL

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        self._header(verbose, "Cloning an order")

        original = Order(["pizza", "empanada"], "calle la mentira")
        cloned = original.clone()
        cloned.items.append("sushi")

        self.logger.info(f"Original Order {','.join(original.items)}")
        self.logger.info(f"Cloned Order {','.join(cloned.items)}")
        return {"original": list(original.items), "cloned": list(cloned.items)}
