"""
Pizza related data models
"""
from dataclasses import dataclass, field
from typing import Optional, List
from enum import Enum


class PizzaVariant(Enum):
    MARGHERITA = "margherita"
    PEPPERONI = "pepperoni"


@dataclass
class Pizza:
    """Pizza data model"""
    size: Optional[str] = None
    crust: Optional[str] = None
    sauce: Optional[str] = None
    cheese: Optional[str] = None
    toppings: List[str] = field(default_factory=list)

    def display(self) -> str:
        """Render size, crust, sauce and toppings, one per line"""
        lines = [
            f"Size:{self.size or ''}",
            f"Crust:{self.crust or ''}",
            f"Sauce:{self.sauce or ''}",
        ]
        lines.extend(self.toppings)
        return "\n".join(lines)
