"""
Lifecycle hooks for demo runs.

The catalogue emits one ``DemoRun`` record when a demo starts, one when it
finishes and one when it fails. Listeners can subscribe to any of them,
e.g. to time the demos or to check in tests which ones ran.
"""

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Callable, DefaultDict, List, Optional

from foodie.observability.logging import get_logger

logger = get_logger("hooks")


class DemoEvent(Enum):
    START = "demo_start"
    END = "demo_end"
    ERROR = "demo_error"


@dataclass(frozen=True)
class DemoRun:
    """What a listener learns about one step of a demo run."""

    event: DemoEvent
    demo: str
    session_id: str
    duration_ms: Optional[float] = None
    error: Optional[BaseException] = None


DemoListener = Callable[[DemoRun], None]


class DemoHooks:
    """Listeners keyed by demo event.

    Usage:
        hooks = DemoHooks()
        hooks.subscribe(print, DemoEvent.END)
        catalogue = Catalogue(hooks=hooks)
    """

    def __init__(self) -> None:
        self._listeners: DefaultDict[DemoEvent, List[DemoListener]] = defaultdict(list)

    def subscribe(self, listener: DemoListener, *events: DemoEvent) -> None:
        """Call ``listener`` for ``events``, or for every event when none are given."""
        for event in events or tuple(DemoEvent):
            if listener not in self._listeners[event]:
                self._listeners[event].append(listener)

    def unsubscribe(self, listener: DemoListener, *events: DemoEvent) -> None:
        for event in events or tuple(DemoEvent):
            if listener in self._listeners[event]:
                self._listeners[event].remove(listener)

    def emit(self, run: DemoRun) -> None:
        """Hand ``run`` to its listeners; a failing listener never stops the demo."""
        for listener in list(self._listeners[run.event]):
            try:
                listener(run)
            except (TypeError, ValueError, RuntimeError, AttributeError) as e:
                logger.warning(f"Listener for {run.event.value} of {run.demo} failed: {e}")
