"""
Abstract Factory pattern: regional families of dishes.

A concrete factory always produces products of the same region, so a
caller holding an ``ArgentinianFoodFactory`` can never end up with a
Japanese empanada.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from foodie.patterns.base import PatternDemo, PatternGroup
from foodie.patterns.creational.factory import Empanada, Pizza, announce_preparation


class ArgentinianPizza(Pizza):
    def prepare(self) -> str:
        return announce_preparation("prepare argentinian pizza")


class ArgentinianEmpanada(Empanada):
    def prepare(self) -> str:
        return announce_preparation("prepare argentinian empanada")


class JapanesePizza(Pizza):
    def prepare(self) -> str:
        return announce_preparation("prepare japanese pizza")


class JapaneseEmpanada(Empanada):
    def prepare(self) -> str:
        return announce_preparation("prepare japanese empanada")


class FoodFamilyFactory(ABC):
    """Creates one consistent family of dishes."""

    region: str

    @abstractmethod
    def create_pizza(self) -> Pizza:
        """Pizza of this factory's region."""

    @abstractmethod
    def create_empanada(self) -> Empanada:
        """Empanada of this factory's region."""


class ArgentinianFoodFactory(FoodFamilyFactory):
    region = "argentinian"

    def create_pizza(self) -> Pizza:
        return ArgentinianPizza()

    def create_empanada(self) -> Empanada:
        return ArgentinianEmpanada()


class JapaneseFoodFactory(FoodFamilyFactory):
    region = "japanese"

    def create_pizza(self) -> Pizza:
        return JapanesePizza()

    def create_empanada(self) -> Empanada:
        return JapaneseEmpanada()


class AbstractFactoryDemo(PatternDemo):
    name = "abstract_factory"
    group = PatternGroup.CREATIONAL

    def run(self, verbose: bool = False) -> Dict[str, Any]:
        self._header(verbose, "Preparing a menu per region")

        menus: Dict[str, list] = {}
        for factory in (ArgentinianFoodFactory(), JapaneseFoodFactory()):
            menus[factory.region] = [
                factory.create_pizza().prepare(),
                factory.create_empanada().prepare(),
            ]
        return {"menus": menus}
