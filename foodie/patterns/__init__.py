"""
Design patterns.

Each pattern lives in its own module together with the demo that
runs it. Modules are grouped by pattern family.
"""

from foodie.patterns.base import PatternDemo, PatternGroup

__all__ = ["PatternDemo", "PatternGroup"]
