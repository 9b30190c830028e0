"""
Catalogue configuration management with YAML support.

This module provides the dataclass that controls how the demos run
(logging, which pattern groups are enabled, demo inputs) and utilities
for loading it from YAML files.
"""

# pylint: disable=too-many-instance-attributes

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from foodie.patterns.base import PatternGroup

DEFAULT_GROUPS = [group.value for group in PatternGroup]


@dataclass
class CatalogueConfig:
    """Configuration for a catalogue run.

    Attributes:
        log_level: Minimum log level name (DEBUG, INFO, ...)
        json_logs: Whether console logs are emitted as JSON
        use_colors: Whether human-readable logs use ANSI colors
        log_file: Optional path of a JSON log file
        groups: Pattern groups enabled for run_all
        order_id: Order id broadcast by the observer demo
        proxy_cache_size: Max cached users in the proxy demo (None = unbounded)
        settings: Key/values seeded into the singleton config store
    """

    log_level: str = "INFO"
    json_logs: bool = False
    use_colors: bool = True
    log_file: Optional[str] = None
    groups: List[str] = field(default_factory=lambda: list(DEFAULT_GROUPS))
    order_id: str = "7264526"
    proxy_cache_size: Optional[int] = None
    settings: Dict[str, Any] = field(
        default_factory=lambda: {"apiUrl": "https://api.foodieapp.com"}
    )

    def __post_init__(self) -> None:
        if not isinstance(self.log_level, str):
            raise ValueError(
                f"log_level must be a level name such as 'INFO', got {self.log_level!r}"
            )
        unknown = [g for g in self.groups if g not in DEFAULT_GROUPS]
        if unknown:
            raise ValueError(
                f"Unknown pattern groups: {unknown}. Expected any of {DEFAULT_GROUPS}"
            )
        if self.proxy_cache_size is not None and self.proxy_cache_size < 1:
            raise ValueError("proxy_cache_size must be a positive integer or null")

    @property
    def enabled_groups(self) -> List[PatternGroup]:
        """Enabled groups as enum members, in configured order."""
        return [PatternGroup(g) for g in self.groups]

    @classmethod
    def from_yaml(cls, path: Path | str) -> "CatalogueConfig":
        """Load catalogue configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            CatalogueConfig instance with values from the file

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Catalogue config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data: Dict[str, Any] = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogueConfig":
        """Create catalogue configuration from a dictionary."""
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "log_level": self.log_level,
            "json_logs": self.json_logs,
            "use_colors": self.use_colors,
            "log_file": self.log_file,
            "groups": list(self.groups),
            "order_id": self.order_id,
            "proxy_cache_size": self.proxy_cache_size,
            "settings": dict(self.settings),
        }

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path where the YAML file will be saved
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
