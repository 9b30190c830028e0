"""
Adapter pattern: exposing a third-party payment API as our ``Payment`` interface.
"""

# pylint: disable=too-few-public-methods

from abc import ABC, abstractmethod
from typing import Any, Dict

from foodie.observability.logging import get_logger
from foodie.patterns.base import PatternDemo, PatternGroup

logger = get_logger("structural.adapter", pattern="adapter")


class Payment(ABC):
    """Payment interface the rest of FoodieApp expects."""

    @abstractmethod
    def pay(self, amount: float) -> str:
        """Charge ``amount`` and return a receipt line."""


class StripeService:
    """Stand-in for an external SDK with its own call shape."""

    def make_payment(self, value: float) -> str:
        message = f"Paying ${value} with Stripe"
        logger.info(message)
        return message


class StripeAdapter(Payment):
    def __init__(self, stripe: StripeService) -> None:
        self.stripe = stripe

    def pay(self, amount: float) -> str:
        return self.stripe.make_payment(amount)


class AdapterDemo(PatternDemo):
    name = "adapter"
    group = PatternGroup.STRUCTURAL

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        self._header(verbose, "Paying through the Stripe adapter")

        payment: Payment = StripeAdapter(StripeService())
        return {"receipt": payment.pay(100)}
