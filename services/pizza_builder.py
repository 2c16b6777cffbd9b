"""
Pizza builders - step-wise construction of Pizza products
"""
import copy
import logging
from abc import ABC, abstractmethod
from typing import Union

from models.pizza import Pizza, PizzaVariant

logger = logging.getLogger(__name__)


class PizzaBuilder(ABC):
    # Builder capability: each instance owns exactly one in-progress pizza

    def __init__(self):
        self._pizza = Pizza()

    @property
    @abstractmethod
    def variant(self) -> PizzaVariant:
        # Label of the pizza this builder is meant for
        ...

    def set_size(self, size: str):
        logger.debug("%s: size=%r", self.variant.value, size)
        self._pizza.size = size

    def set_crust(self, crust: str):
        logger.debug("%s: crust=%r", self.variant.value, crust)
        self._pizza.crust = crust

    def set_sauce(self, sauce: str):
        logger.debug("%s: sauce=%r", self.variant.value, sauce)
        self._pizza.sauce = sauce

    def set_cheese(self, cheese: str):
        logger.debug("%s: cheese=%r", self.variant.value, cheese)
        self._pizza.cheese = cheese

    def add_topping(self, topping: str):
        logger.debug("%s: add topping %r", self.variant.value, topping)
        self._pizza.toppings.append(topping)

    def build(self) -> Pizza:
        # Hand out a copy so later steps on this builder never touch it
        return copy.deepcopy(self._pizza)


class MargheritaPizzaBuilder(PizzaBuilder):
    """Builder for Margherita pizzas"""

    @property
    def variant(self) -> PizzaVariant:
        return PizzaVariant.MARGHERITA


class PepperoniPizzaBuilder(PizzaBuilder):
    """Builder for Pepperoni pizzas"""

    @property
    def variant(self) -> PizzaVariant:
        return PizzaVariant.PEPPERONI


BUILDERS = {
    PizzaVariant.MARGHERITA: MargheritaPizzaBuilder,
    PizzaVariant.PEPPERONI: PepperoniPizzaBuilder,
}


def create_builder(variant: Union[PizzaVariant, str]) -> PizzaBuilder:
    # Fresh builder for a variant; unknown names raise ValueError
    return BUILDERS[PizzaVariant(variant)]()
