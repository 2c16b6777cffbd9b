"""
PizzaDirector - runs fixed recipes against any PizzaBuilder
"""
import logging
from typing import Union

from models.pizza import Pizza, PizzaVariant
from services.pizza_builder import PizzaBuilder

logger = logging.getLogger(__name__)


class PizzaDirector:
    # Sequences builder steps into named recipes; does not own the builder

    def __init__(self, builder: PizzaBuilder):
        self._builder = builder

    def construct_margherita(self) -> Pizza:
        logger.info("Constructing margherita with %s", type(self._builder).__name__)
        self._builder.set_size("Large")
        self._builder.set_crust("Thin Crust")
        self._builder.set_sauce("Tomato")
        self._builder.set_cheese("Mozzarella")
        self._builder.add_topping("Basil")

        return self._builder.build()

    def construct_pepperoni(self) -> Pizza:
        # Crust is left unset for this recipe
        logger.info("Constructing pepperoni with %s", type(self._builder).__name__)
        self._builder.set_size("Medium")
        self._builder.set_sauce("Hot Sauce")
        self._builder.set_cheese("Mozzarella")
        self._builder.add_topping("Pepperoni")

        return self._builder.build()

    def construct(self, variant: Union[PizzaVariant, str]) -> Pizza:
        # Run the recipe named by variant; unknown names raise ValueError
        recipes = {
            PizzaVariant.MARGHERITA: self.construct_margherita,
            PizzaVariant.PEPPERONI: self.construct_pepperoni,
        }
        return recipes[PizzaVariant(variant)]()
