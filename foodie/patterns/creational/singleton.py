"""
Singleton pattern: one process-wide configuration store.
"""

import threading
from typing import Any, Dict, Optional

from foodie.observability.logging import get_logger
from foodie.patterns.base import PatternDemo, PatternGroup

logger = get_logger("creational.singleton", pattern="singleton")


class ConfigManager:
    """Process-wide key/value store.

    The instance is created lazily on first access and lives until the
    process exits. Constructing the class directly hands back the same
    instance, so every holder shares one store.
    """

    _instance: Optional["ConfigManager"] = None
    _lock = threading.Lock()

    _config: Dict[str, Any]
    _store_lock: threading.Lock

    def __new__(cls) -> "ConfigManager":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    # store is ready before any other thread can see the instance
                    instance._config = {}
                    instance._store_lock = threading.Lock()
                    cls._instance = instance
                    logger.debug("Config manager initialized")
        return cls._instance

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        return cls()

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance. Only meant for test isolation."""
        with cls._lock:
            cls._instance = None

    def set(self, key: str, value: Any) -> None:
        with self._store_lock:
            self._config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        with self._store_lock:
            return self._config.get(key, default)


class SingletonDemo(PatternDemo):
    """Write through one handle, read through another."""

    name = "singleton"
    group = PatternGroup.CREATIONAL

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        self._header(verbose, "Sharing configuration through a singleton")

        config1 = ConfigManager.get_instance()
        config2 = ConfigManager.get_instance()

        for key, value in self.catalogue.config.settings.items():
            config1.set(key, value)

        seen = {key: config2.get(key) for key in self.catalogue.config.settings}
        same_instance = config1 is config2
        self.logger.info(f"Values seen through second handle: {seen}")
        self.logger.info(f"Same instance: {same_instance}")

        return {"seen": seen, "same_instance": same_instance}
