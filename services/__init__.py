"""
Services package for Pizzeria Builder
Contains the pizza builder implementations
"""

from .pizza_builder import (
    PizzaBuilder, MargheritaPizzaBuilder, PepperoniPizzaBuilder, create_builder
)

__all__ = [
    'PizzaBuilder', 'MargheritaPizzaBuilder', 'PepperoniPizzaBuilder',
    'create_builder'
]
