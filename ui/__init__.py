"""
UI package for Pizzeria Builder
Contains user interface implementations
"""

from .console_ui import ConsoleUI

__all__ = [
    'ConsoleUI'
]
