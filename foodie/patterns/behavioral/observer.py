"""
Observer pattern: an order subject fans an order id out to its subscribers.
"""

# pylint: disable=too-few-public-methods

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple

from foodie.observability.logging import get_logger
from foodie.patterns.base import PatternDemo, PatternGroup

logger = get_logger("behavioral.observer", pattern="observer")


class Observer(ABC):
    """Subscriber that reacts to a new order."""

    @abstractmethod
    def update(self, order_id: str) -> str:
        """Handle a notification for ``order_id``."""


class Kitchen(Observer):
    """Starts cooking as soon as an order is announced."""

    def update(self, order_id: str) -> str:
        message = f"Cocina: preparando pedido {order_id}"
        logger.info(message)
        return message


class Delivery(Observer):
    """Waits for the order to be ready for pickup."""

    def update(self, order_id: str) -> str:
        message = f"Delivery: esperando pedido {order_id}"
        logger.info(message)
        return message


class OrderSubject:
    """Publisher holding an ordered list of observers.

    Observers are notified in insertion order. The same observer may be
    added more than once and is then notified once per registration.
    """

    def __init__(self) -> None:
        self._observers: List[Observer] = []

    @property
    def observers(self) -> List[Observer]:
        """Snapshot of the current subscribers."""
        return list(self._observers)

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Remove the first registration of ``observer``; unknown ones are ignored."""
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, order_id: str) -> Dict[str, Any]:
        """Call ``update(order_id)`` on every observer.

        A failing observer does not stop the fan-out: its exception is
        logged and collected, and the remaining observers are still notified.

        Args:
            order_id: Identifier of the order being announced

        Returns:
            Dictionary with 'notified' (observers that succeeded),
            'failed' (observer, exception) pairs and 'messages'
        """
        notified: List[Observer] = []
        failed: List[Tuple[Observer, Exception]] = []
        messages: List[str] = []

        for observer in list(self._observers):
            try:
                messages.append(observer.update(order_id))
            except Exception as e:  # pylint: disable=broad-exception-caught
                logger.error(
                    f"Observer {type(observer).__name__} failed for order {order_id}: {e}",
                    exc_info=True,
                )
                failed.append((observer, e))
            else:
                notified.append(observer)

        return {"notified": notified, "failed": failed, "messages": messages}


class ObserverDemo(PatternDemo):
    """Kitchen and delivery subscribe to new orders."""

    name = "observer"
    group = PatternGroup.BEHAVIORAL

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        order_id = self.catalogue.config.order_id
        self._header(verbose, f"Announcing order {order_id}")

        subject = OrderSubject()
        subject.add_observer(Kitchen())
        subject.add_observer(Delivery())

        report = subject.notify(order_id)
        self.logger.debug(
            "Notification finished",
            extra={"notified": len(report["notified"]), "failed": len(report["failed"])},
        )
        return {"order_id": order_id, "messages": report["messages"]}
