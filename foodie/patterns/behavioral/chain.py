"""
Chain of Responsibility pattern: order validation pipeline.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from foodie.observability.logging import get_logger
from foodie.patterns.base import PatternDemo, PatternGroup

logger = get_logger("behavioral.chain", pattern="chain")


@dataclass(frozen=True)
class OrderValidation:
    """Facts about an order that the validators check."""

    in_stock: bool
    paid: bool


class ValidationHandler:
    """Link of a validation chain.

    The base link approves by delegating to its successor. A chain whose
    last link has no successor approves the order.
    """

    def __init__(self) -> None:
        self._next: Optional["ValidationHandler"] = None

    @property
    def next_handler(self) -> Optional["ValidationHandler"]:
        return self._next

    def set_next(self, handler: "ValidationHandler") -> "ValidationHandler":
        """Link ``handler`` after this one and return it for fluent chaining."""
        self._next = handler
        return handler

    def handle(self, order: OrderValidation) -> bool:
        if self._next is not None:
            return self._next.handle(order)
        return True


class StockValidator(ValidationHandler):
    def handle(self, order: OrderValidation) -> bool:
        if not order.in_stock:
            logger.warning("Sin stock")
            return False
        return super().handle(order)


class PaymentValidator(ValidationHandler):
    def handle(self, order: OrderValidation) -> bool:
        if not order.paid:
            logger.warning("No pagado")
            return False
        return super().handle(order)


def build_chain(*handlers: ValidationHandler) -> ValidationHandler:
    """Link ``handlers`` in the given order and return the head.

    Raises:
        ValueError: If no handlers are given
    """
    if not handlers:
        raise ValueError("A validation chain needs at least one handler")

    head = handlers[0]
    current = head
    for handler in handlers[1:]:
        current = current.set_next(handler)
    return head


class ChainDemo(PatternDemo):
    """Run the stock -> payment chain over the three canonical orders."""

    name = "chain"
    group = PatternGroup.BEHAVIORAL

    ORDERS = (
        OrderValidation(in_stock=True, paid=False),
        OrderValidation(in_stock=False, paid=True),
        OrderValidation(in_stock=True, paid=True),
    )

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        self._header(verbose, "Validating orders")

        stock_validation = StockValidator()
        stock_validation.set_next(PaymentValidator())

        results = []
        for step, order in enumerate(self.ORDERS, start=1):
            approved = stock_validation.handle(order)
            self.logger.info(f"{asdict(order)} -> {approved}", step=step)
            results.append({"order": asdict(order), "approved": approved})

        return {"results": results}
