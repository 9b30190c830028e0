"""
Catalogue of pattern demos.

This module provides a Catalogue class that registers the pattern demos
and runs them one by one, per group, or all at once.
"""

import time
import uuid
from typing import Any, Dict, List, Optional, Type

from foodie.config import CatalogueConfig
from foodie.observability.hooks import DemoEvent, DemoHooks, DemoRun
from foodie.observability.logging import PatternLogger, get_logger, session_scope
from foodie.patterns import behavioral, creational, structural
from foodie.patterns.base import PatternDemo, PatternGroup

BUILTIN_DEMOS: List[Type[PatternDemo]] = (
    behavioral.DEMOS + structural.DEMOS + creational.DEMOS
)


class Catalogue:
    """Registry and runner for pattern demos.

    Usage:
        catalogue = Catalogue()
        catalogue.run("state", verbose=True)
        results = catalogue.run_group(PatternGroup.STRUCTURAL)
        everything = catalogue.run_all()
    """

    def __init__(
        self,
        config: Optional[CatalogueConfig] = None,
        hooks: Optional[DemoHooks] = None,
        session_id: Optional[str] = None,
    ) -> None:
        """Initialize the catalogue with the built-in demos.

        Args:
            config: Catalogue configuration
            hooks: Lifecycle hooks notified around every demo run
            session_id: Session identifier for logging/tracing
        """
        self.config = config or CatalogueConfig()
        self.hooks = hooks or DemoHooks()
        self.session_id = session_id or str(uuid.uuid4())
        self._demos: Dict[str, PatternDemo] = {}

        self._logger: PatternLogger = get_logger(
            name="catalogue",
            session_id=self.session_id,
        )

        for demo_cls in BUILTIN_DEMOS:
            self.register(demo_cls)

        self._logger.debug(f"Catalogue initialized with {len(self._demos)} demos")

    def register(self, demo_cls: Type[PatternDemo]) -> PatternDemo:
        """Register a demo class.

        Args:
            demo_cls: PatternDemo subclass to instantiate

        Returns:
            The created demo instance

        Raises:
            ValueError: If a demo with the same name is already registered
        """
        if demo_cls.name in self._demos:
            raise ValueError(f"Demo '{demo_cls.name}' is already registered")

        demo = demo_cls(self)
        self._demos[demo.name] = demo
        return demo

    def get_demo(self, name: str) -> Optional[PatternDemo]:
        return self._demos.get(name)

    def list_demos(self, group: Optional[PatternGroup] = None) -> List[str]:
        """Get demo names in registration order.

        Args:
            group: Only list demos of this group

        Returns:
            List of demo names
        """
        return [
            name
            for name, demo in self._demos.items()
            if group is None or demo.group == group
        ]

    def run(self, name: str, verbose: bool = False) -> Dict[str, Any]:
        """Run a single demo.

        Args:
            name: Demo name
            verbose: Whether to print progress

        Returns:
            The demo's result dictionary

        Raises:
            ValueError: If no demo is registered under ``name``
        """
        demo = self._demos.get(name)
        if not demo:
            raise ValueError(f"Demo '{name}' not found")

        with session_scope(self.session_id):
            self.hooks.emit(DemoRun(DemoEvent.START, name, self.session_id))
            self._logger.info(f"Running demo: {name}", pattern=name)
            start_time = time.perf_counter()

            try:
                result = demo.run(verbose=verbose)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                self.hooks.emit(
                    DemoRun(DemoEvent.ERROR, name, self.session_id, duration_ms, e)
                )
                self._logger.error(
                    f"Demo failed: {name} - {e}",
                    pattern=name,
                    duration_ms=duration_ms,
                    exc_info=True,
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            self.hooks.emit(DemoRun(DemoEvent.END, name, self.session_id, duration_ms))
            self._logger.info(
                f"Demo completed: {name}", pattern=name, duration_ms=duration_ms
            )
        return result

    def run_group(
        self,
        group: PatternGroup,
        verbose: bool = False,
    ) -> Dict[str, Dict[str, Any]]:
        """Run every demo of ``group`` in registration order.

        Returns:
            Dictionary of demo_name -> result
        """
        if verbose:
            print(f"\n{'#' * 60}")
            print(f"# {group.value.capitalize()} patterns")
            print(f"{'#' * 60}")

        return {name: self.run(name, verbose) for name in self.list_demos(group)}

    def run_all(self, verbose: bool = False) -> Dict[str, Dict[str, Any]]:
        """Run the demos of every group enabled in the config.

        Returns:
            Dictionary of demo_name -> result
        """
        results: Dict[str, Dict[str, Any]] = {}
        for group in self.config.enabled_groups:
            results.update(self.run_group(group, verbose))
        return results

    def __repr__(self) -> str:
        return f"Catalogue(demos={len(self._demos)})"
