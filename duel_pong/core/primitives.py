"""
Value types shared by the Duel Pong entities and the collision classifier
"""

from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """Player side of the court"""

    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> "Side":
        return _OPPOSITE_SIDES[self]


_OPPOSITE_SIDES = {Side.LEFT: Side.RIGHT, Side.RIGHT: Side.LEFT}


class Command(Enum):
    """Discrete paddle movement command"""

    MOVE_TOWARD_ZERO = "toward_zero"  # Up on screen
    MOVE_AWAY_FROM_ZERO = "away_from_zero"  # Down on screen
    NONE = "none"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)
