"""
Core package for Pizzeria Builder
Contains the director that orchestrates pizza construction
"""

from .pizza_director import PizzaDirector

__all__ = [
    'PizzaDirector'
]
