#!/usr/bin/env python3
"""
FoodieApp Pattern Catalogue Demo.

This script runs the design pattern demos:
1. Behavioral patterns (observer, strategy, command, state, chain)
2. Structural patterns (adapter, decorator, facade, composite, proxy)
3. Creational patterns (factory, abstract factory, builder, singleton, prototype)

Environment variables (also read from a .env file):
    FOODIE_CONFIG     Path to a catalogue YAML config
    FOODIE_LOG_LEVEL  Overrides the configured log level

Usage:
    python main.py
"""
# pylint: disable=wrong-import-position

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(override=True)

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from foodie import Catalogue, CatalogueConfig, PatternGroup, configure_logging

DEFAULT_CONFIG = PROJECT_ROOT / "config" / "catalogue.yaml"

GROUP_CHOICES = {
    "1": PatternGroup.BEHAVIORAL,
    "2": PatternGroup.STRUCTURAL,
    "3": PatternGroup.CREATIONAL,
}


def load_config() -> CatalogueConfig:
    """Load the catalogue config from FOODIE_CONFIG or the default file."""
    config_path = Path(os.getenv("FOODIE_CONFIG", str(DEFAULT_CONFIG)))

    if config_path.exists():
        config = CatalogueConfig.from_yaml(config_path)
    else:
        config = CatalogueConfig()

    log_level = os.getenv("FOODIE_LOG_LEVEL")
    if log_level:
        config.log_level = log_level

    return config


def main() -> int:
    """Main entry point."""
    print("=" * 60)
    print("FoodieApp Design Pattern Catalogue")
    print("=" * 60)

    try:
        config = load_config()
        configure_logging(
            level=config.log_level,
            log_file=config.log_file,
            json_format=config.json_logs,
            use_colors=config.use_colors,
        )
    except (ValueError, TypeError, OSError) as e:
        print(f"\nInvalid configuration: {e}")
        return 1

    catalogue = Catalogue(config)

    print("\nAvailable demos:")
    print("a. All enabled pattern groups")
    print("1. Behavioral - " + ", ".join(catalogue.list_demos(PatternGroup.BEHAVIORAL)))
    print("2. Structural - " + ", ".join(catalogue.list_demos(PatternGroup.STRUCTURAL)))
    print("3. Creational - " + ", ".join(catalogue.list_demos(PatternGroup.CREATIONAL)))
    print("q. Quit")

    try:
        choice = input("\nSelect demo (a/1/2/3/q, Enter for all): ").strip().lower()
        if choice in ("", "a", "all"):
            catalogue.run_all(verbose=True)
        elif choice in GROUP_CHOICES:
            catalogue.run_group(GROUP_CHOICES[choice], verbose=True)
        elif choice in ("q", "quit", "exit"):
            print("Goodbye!")
            return 0
        else:
            print("Invalid choice. Please select a, 1, 2, 3, or q.")
            return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
        return 0
    except (ValueError, RuntimeError, OSError) as e:
        print(f"\nError: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
