"""
Models package for Pizzeria Builder
Contains the pizza product and variant definitions
"""

from .pizza import Pizza, PizzaVariant

__all__ = [
    'Pizza', 'PizzaVariant'
]
