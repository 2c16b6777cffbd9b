"""
Console UI for showing constructed pizzas
"""
import sys
from typing import TextIO, Optional

from models.pizza import Pizza

SEPARATOR = "." * 29


class ConsoleUI:
    """Writes pizzas to a text stream"""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def show_pizza(self, title: str, pizza: Pizza):
        """Print a heading followed by the pizza details"""
        print(title, file=self.stream)
        print(pizza.display(), file=self.stream)

    def show_separator(self):
        print(SEPARATOR, file=self.stream)
