"""
Main entry point for Pizzeria Builder
"""
import sys
import logging

from config import get_log_level
from core.pizza_director import PizzaDirector
from models.pizza import PizzaVariant
from services.pizza_builder import create_builder
from ui.console_ui import ConsoleUI


def main() -> int:
    # Build one pizza of each variant, each with its own builder, and print them
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr
    )
    ui = ConsoleUI()

    for index, variant in enumerate([PizzaVariant.MARGHERITA, PizzaVariant.PEPPERONI]):
        if index:
            ui.show_separator()
        director = PizzaDirector(create_builder(variant))
        pizza = director.construct(variant)
        ui.show_pizza(f"{variant.value.title()} Pizza Ready", pizza)

    return 0


if __name__ == "__main__":
    sys.exit(main())
