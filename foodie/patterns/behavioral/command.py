"""
Command pattern: adding an item to an order as an undoable action.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from foodie.observability.logging import get_logger
from foodie.patterns.base import PatternDemo, PatternGroup

logger = get_logger("behavioral.command", pattern="command")


class Command(ABC):
    """Action that can be executed and reverted."""

    @abstractmethod
    def execute(self) -> None:
        """Apply the action."""

    @abstractmethod
    def undo(self) -> None:
        """Revert the last ``execute``."""


class AddItemCommand(Command):
    """Appends one item to an externally owned order list.

    Both ``order`` and ``logs`` are mutated in place. Only the most recent
    ``execute`` can be undone; there is no redo.
    """

    def __init__(
        self,
        order: List[str],
        item: str,
        logs: Optional[List[str]] = None,
    ) -> None:
        self.order = order
        self.item = item
        self.logs = logs if logs is not None else []
        self._executed = False

    def execute(self) -> None:
        self.order.append(self.item)
        self.logs.append(f"Agregado {self.item}")
        self._executed = True

    def undo(self) -> None:
        if not self._executed:
            logger.warning(f"Nothing to undo for {self.item}")
            return
        self.order.pop()
        self.logs.append(f"Eliminado {self.item}")
        self._executed = False


class CommandDemo(PatternDemo):
    """Add a pizza, then take it back."""

    name = "command"
    group = PatternGroup.BEHAVIORAL

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        self._header(verbose, "Add and undo an order item")

        order: List[str] = []
        add_pizza = AddItemCommand(order, "Pizza")

        add_pizza.execute()
        after_execute = list(order)
        self.logger.info(f"Order after execute: {after_execute}", step=1)

        add_pizza.undo()
        after_undo = list(order)
        self.logger.info(f"Order after undo: {after_undo}", step=2)

        return {
            "after_execute": after_execute,
            "after_undo": after_undo,
            "logs": list(add_pizza.logs),
        }
