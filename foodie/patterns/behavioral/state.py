"""
State pattern: an order moving through its delivery lifecycle.

The lifecycle is linear and closed:

    nuevo -> En cocina -> En entrega -> Entregado

``Entregado`` is absorbing: advancing a delivered order only logs a notice.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from foodie.observability.logging import get_logger
from foodie.patterns.base import PatternDemo, PatternGroup

logger = get_logger("behavioral.state", pattern="state")


class OrderState(ABC):
    """One step of the order lifecycle."""

    terminal = False

    @abstractmethod
    def next(self, order: "OrderContext") -> None:
        """Move ``order`` to the successor of this state."""

    @abstractmethod
    def get_status(self) -> str:
        """Display label of this state."""


class NewOrder(OrderState):
    def next(self, order: "OrderContext") -> None:
        order.set_state(CookingOrder())

    def get_status(self) -> str:
        return "nuevo"


class CookingOrder(OrderState):
    def next(self, order: "OrderContext") -> None:
        order.set_state(DeliveryOrder())

    def get_status(self) -> str:
        return "En cocina"


class DeliveryOrder(OrderState):
    def next(self, order: "OrderContext") -> None:
        order.set_state(DeliveredOrder())

    def get_status(self) -> str:
        return "En entrega"


class DeliveredOrder(OrderState):
    terminal = True

    def next(self, order: "OrderContext") -> None:
        logger.info("El pedido ya fue entregado")

    def get_status(self) -> str:
        return "Entregado"


class OrderContext:
    """Order whose behaviour depends on its current state."""

    def __init__(self) -> None:
        self._state: OrderState = NewOrder()

    @property
    def state(self) -> OrderState:
        return self._state

    def set_state(self, state: OrderState) -> None:
        logger.debug(f"{self._state.get_status()} -> {state.get_status()}")
        self._state = state

    def next(self) -> None:
        self._state.next(self)

    def get_status(self) -> str:
        return self._state.get_status()

    @property
    def is_delivered(self) -> bool:
        return self._state.terminal


class StateDemo(PatternDemo):
    """Walk a fresh order one step past delivery."""

    name = "state"
    group = PatternGroup.BEHAVIORAL

    TRANSITIONS = 4

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        self._header(verbose, "Advancing an order through its lifecycle")

        order = OrderContext()
        statuses: List[str] = [order.get_status()]
        self.logger.info(statuses[0], step=0)

        for step in range(1, self.TRANSITIONS + 1):
            order.next()
            statuses.append(order.get_status())
            self.logger.info(statuses[-1], step=step)

        return {"statuses": statuses, "delivered": order.is_delivered}
