"""
Proxy pattern: caching a slow order-history lookup.
"""

import threading
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Any, Dict, List, Optional

from foodie.observability.logging import get_logger
from foodie.patterns.base import PatternDemo, PatternGroup

logger = get_logger("structural.proxy", pattern="proxy")


class OrderHistory(ABC):
    @abstractmethod
    def get_orders(self, user_id: str) -> List[str]:
        """Past orders of ``user_id``."""


class RealOrderHistory(OrderHistory):
    """Simulated database lookup; counts how often it is hit."""

    def __init__(self) -> None:
        self.lookups = 0

    def get_orders(self, user_id: str) -> List[str]:
        self.lookups += 1
        logger.info(f"Consultando DB {user_id}")
        return ["pedido1", "pedido2"]


class OrderHistoryProxy(OrderHistory):
    """Caching proxy in front of an ``OrderHistory``.

    The first lookup for a user goes to the real history; later ones are
    served from the cache. With ``max_entries`` unset the cache is never
    evicted. Otherwise the least recently used user is dropped once the
    cache is full.
    """

    def __init__(
        self,
        real_history: OrderHistory,
        max_entries: Optional[int] = None,
    ) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be a positive integer")
        self.real_history = real_history
        self.max_entries = max_entries
        self._cache: "OrderedDict[str, List[str]]" = OrderedDict()
        self._lock = threading.Lock()

    def get_orders(self, user_id: str) -> List[str]:
        with self._lock:
            if user_id in self._cache:
                logger.debug(f"Cache hit for {user_id}")
                self._cache.move_to_end(user_id)
                return self._cache[user_id]

            orders = self.real_history.get_orders(user_id)
            self._cache[user_id] = orders
            if self.max_entries is not None and len(self._cache) > self.max_entries:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug(f"Evicted {evicted} from cache")
            return orders

    def is_cached(self, user_id: str) -> bool:
        with self._lock:
            return user_id in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)


class ProxyDemo(PatternDemo):
    """Same user twice; only the first call reaches the database."""

    name = "proxy"
    group = PatternGroup.STRUCTURAL

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        self._header(verbose, "Looking up order history through the cache")

        real = RealOrderHistory()
        history = OrderHistoryProxy(
            real, max_entries=self.catalogue.config.proxy_cache_size
        )

        first = history.get_orders("user1")
        self.logger.info(str(first), step=1)
        second = history.get_orders("user1")
        self.logger.info(str(second), step=2)

        return {"first": first, "second": second, "lookups": real.lookups}
