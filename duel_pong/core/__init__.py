"""
Core module of Duel Pong game
"""

from duel_pong.core.collision import Crossing
from duel_pong.core.collision import CrossingKind
from duel_pong.core.collision import Surface
from duel_pong.core.collision import classify_crossing
from duel_pong.core.entities import Ball
from duel_pong.core.entities import GameState
from duel_pong.core.entities import Paddle
from duel_pong.core.physics import RoundController
from duel_pong.core.physics import RoundState
from duel_pong.core.primitives import Command
from duel_pong.core.primitives import Side
from duel_pong.core.primitives import Vector2D

__all__ = [
    "Ball",
    "Paddle",
    "GameState",
    "Crossing",
    "CrossingKind",
    "Surface",
    "classify_crossing",
    "RoundController",
    "RoundState",
    "Command",
    "Side",
    "Vector2D",
]
