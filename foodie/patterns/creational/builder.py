"""
Builder pattern: assembling a lasagna step by step.
"""

from dataclasses import dataclass
from typing import Any, Dict

from foodie.observability.logging import get_logger
from foodie.patterns.base import PatternDemo, PatternGroup

logger = get_logger("creational.builder", pattern="builder")


@dataclass(frozen=True)
class Lasagna:
    """Finished lasagna; immutable once built."""

    size: str
    cheese: str

    def describe(self) -> str:
        message = f"La lasaña es de tamaño {self.size} y tiene queso {self.cheese}"
        logger.info(message)
        return message


class LasagnaBuilder:
    """Collects lasagna options through chained setters.

    Usage:
        lasagna = LasagnaBuilder().set_size("grande").set_cheese("cheddar").build()
    """

    DEFAULT_SIZE = "Large"
    DEFAULT_CHEESE = "mozzarella"

    def __init__(self) -> None:
        self.size = self.DEFAULT_SIZE
        self.cheese = self.DEFAULT_CHEESE

    def set_size(self, size: str) -> "LasagnaBuilder":
        self.size = size
        return self

    def set_cheese(self, cheese: str) -> "LasagnaBuilder":
        self.cheese = cheese
        return self

    def build(self) -> Lasagna:
        return Lasagna(size=self.size, cheese=self.cheese)


class BuilderDemo(PatternDemo):
    name = "builder"
    group = PatternGroup.CREATIONAL

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        self._header(verbose, "Building lasagnas")

        lasagna = LasagnaBuilder().set_size("grande").set_cheese("cheddar").build()
        small = LasagnaBuilder().set_size("pequeña").build()

        return {"descriptions": [lasagna.describe(), small.describe()]}
