"""
Strategy pattern: interchangeable shipping cost calculations.
"""

# pylint: disable=too-few-public-methods

from abc import ABC, abstractmethod
from typing import Any, Dict

from foodie.patterns.base import PatternDemo, PatternGroup


class ShippingStrategy(ABC):
    """Algorithm that prices shipping for an order amount."""

    @abstractmethod
    def calculate(self, amount: float) -> float:
        """Return the shipping cost for ``amount``."""


class DistanceShipping(ShippingStrategy):
    """Charges 20% on top of the order amount."""

    RATE = 1.2

    def calculate(self, amount: float) -> float:
        return amount * self.RATE


class FreeShipping(ShippingStrategy):
    def calculate(self, amount: float) -> float:
        return 0


class ShippingContext:
    """Thin wrapper that delegates pricing to its strategy."""

    def __init__(self, strategy: ShippingStrategy) -> None:
        self.strategy = strategy

    def get_shipping_cost(self, amount: float) -> float:
        """Price shipping for ``amount``.

        Raises:
            ValueError: If ``amount`` is negative
        """
        if amount < 0:
            raise ValueError(f"Order amount must be non-negative, got {amount}")
        return self.strategy.calculate(amount)


class StrategyDemo(PatternDemo):
    """Same amount, two shipping strategies."""

    name = "strategy"
    group = PatternGroup.BEHAVIORAL

    AMOUNT = 100

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        self._header(verbose, f"Shipping cost for an order of {self.AMOUNT}")

        costs: Dict[str, float] = {}
        for strategy in (DistanceShipping(), FreeShipping()):
            context = ShippingContext(strategy)
            cost = context.get_shipping_cost(self.AMOUNT)
            costs[type(strategy).__name__] = cost
            self.logger.info(f"{type(strategy).__name__}: {cost}")

        return {"amount": self.AMOUNT, "costs": costs}
