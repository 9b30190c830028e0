"""
FoodieApp design pattern catalogue.

Classic behavioral, structural and creational patterns, each illustrated
with a small food-ordering example and a one-shot demo.
"""

from foodie.catalogue import Catalogue
from foodie.config import CatalogueConfig
from foodie.observability import (
    DemoEvent,
    DemoHooks,
    DemoRun,
    PatternLogger,
    configure_logging,
    get_logger,
)
from foodie.patterns import PatternDemo, PatternGroup

__all__ = [
    # Core components
    "Catalogue",
    "CatalogueConfig",
    "PatternDemo",
    "PatternGroup",
    # Observability
    "DemoEvent",
    "DemoHooks",
    "DemoRun",
    "PatternLogger",
    "configure_logging",
    "get_logger",
]
