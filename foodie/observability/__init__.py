"""
Observability module for the pattern catalogue.

This module provides pattern-aware logging and demo lifecycle hooks.
"""

from .hooks import DemoEvent, DemoHooks, DemoRun
from .logging import PatternLogger, configure_logging, get_logger, session_scope

__all__ = [
    # Logging
    "PatternLogger",
    "configure_logging",
    "get_logger",
    "session_scope",
    # Hooks
    "DemoEvent",
    "DemoHooks",
    "DemoRun",
]
