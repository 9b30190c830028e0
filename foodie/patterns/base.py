"""
Base class for pattern demos.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Dict

from foodie.observability.logging import PatternLogger, get_logger

if TYPE_CHECKING:
    from foodie.catalogue import Catalogue


class PatternGroup(Enum):
    """Families the catalogued patterns belong to."""

    BEHAVIORAL = "behavioral"
    STRUCTURAL = "structural"
    CREATIONAL = "creational"


class PatternDemo(ABC):
    """Abstract base class for a one-shot pattern demonstration."""

    # pylint: disable=too-few-public-methods

    name: ClassVar[str]
    group: ClassVar[PatternGroup]

    def __init__(self, catalogue: "Catalogue") -> None:
        """Initialize the demo.

        Args:
            catalogue: The catalogue that owns this demo
        """
        self.catalogue = catalogue
        self.logger: PatternLogger = get_logger(
            f"{self.group.value}.{self.name}",
            session_id=catalogue.session_id,
            pattern=self.name,
        )

    @abstractmethod
    def run(self, verbose: bool = False) -> Dict[str, Any]:
        """Run the fixed demonstration sequence.

        Args:
            verbose: Whether to print progress

        Returns:
            Dictionary with the observable outcomes of the demo
        """

    def _header(self, verbose: bool, title: str) -> None:
        if verbose:
            print(f"\n[{self.name}] {title}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, group={self.group.value!r})"
