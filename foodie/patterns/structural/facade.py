"""
Facade pattern: placing an order with a single call.
"""

# pylint: disable=too-few-public-methods

from typing import Any, Dict, List

from foodie.observability.logging import get_logger
from foodie.patterns.base import PatternDemo, PatternGroup

logger = get_logger("structural.facade", pattern="facade")


class OrderService:
    def create_order(self) -> str:
        logger.info("Orden creada")
        return "Orden creada"


class PaymentService:
    def process_payment(self) -> str:
        logger.info("Pago procesado")
        return "Pago procesado"


class DeliveryService:
    def dispatch_order(self) -> str:
        logger.info("Pedido despachado")
        return "Pedido despachado"


class OrderFacade:
    """Hides order creation, payment and dispatch behind ``place_order``.

    The three services are called in that fixed order. Nothing is rolled
    back if a later step fails.
    """

    def __init__(
        self,
        order: OrderService,
        payment: PaymentService,
        delivery: DeliveryService,
    ) -> None:
        self.order = order
        self.payment = payment
        self.delivery = delivery

    def place_order(self) -> List[str]:
        return [
            self.order.create_order(),
            self.payment.process_payment(),
            self.delivery.dispatch_order(),
        ]


class FacadeDemo(PatternDemo):
    name = "facade"
    group = PatternGroup.STRUCTURAL

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        self._header(verbose, "Placing an order through the facade")

        facade = OrderFacade(OrderService(), PaymentService(), DeliveryService())
        return {"steps": facade.place_order()}
