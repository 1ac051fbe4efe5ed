"""
Crossing classification for Duel Pong

The ball moves in fixed steps, so every contact is decided from the ball
state at the start of a tick. Side-outs and walls fire once the ball has
reached its boundary while still heading toward it. Paddles fire on the tick
whose step would carry the ball's leading edge across the paddle face, so a
ball that already slipped past a paddle is never pulled back.
"""

from dataclasses import dataclass
from enum import Enum

from duel_pong.core.primitives import Side
from duel_pong.core.primitives import Vector2D
from duel_pong.utils.config import GameConfig


class CrossingKind(Enum):
    """Outcome categories of one tick"""

    NOTHING = "nothing"
    BOUNCE = "bounce"
    SIDE_OUT = "side_out"


class Surface(Enum):
    """What the ball bounced off"""

    TOP_WALL = "top_wall"
    BOTTOM_WALL = "bottom_wall"
    LEFT_PADDLE = "left_paddle"
    RIGHT_PADDLE = "right_paddle"


@dataclass(frozen=True)
class Crossing:
    """Result of classifying one tick"""

    kind: CrossingKind
    velocity: Vector2D | None = None  # New velocity, set for bounces
    surface: Surface | None = None
    winner: Side | None = None  # Scoring side, set for side-outs

    @classmethod
    def nothing(cls) -> "Crossing":
        return cls(CrossingKind.NOTHING)

    @classmethod
    def bounce(cls, velocity: Vector2D, surface: Surface) -> "Crossing":
        return cls(CrossingKind.BOUNCE, velocity=velocity, surface=surface)

    @classmethod
    def side_out(cls, winner: Side) -> "Crossing":
        return cls(CrossingKind.SIDE_OUT, winner=winner)


def _paddle_covers(y: float, paddle_position: float, paddle_height: float) -> bool:
    return paddle_position <= y <= paddle_position + paddle_height


def classify_crossing(
    position: Vector2D,
    velocity: Vector2D,
    left_paddle_position: float,
    right_paddle_position: float,
    config: GameConfig,
) -> Crossing:
    """
    Classifies what the ball meets on this tick

    Rules are checked in order and the first match wins: left side-out,
    right side-out, top or bottom wall, then the paddle the ball is heading
    toward.

    Args:
        position: Ball center
        velocity: Ball velocity per tick
        left_paddle_position: Axis position of the left paddle
        right_paddle_position: Axis position of the right paddle
        config: Court geometry

    Returns:
        Crossing: NOTHING, BOUNCE with the reflected velocity, or SIDE_OUT
        with the side that scores
    """
    max_position = config.paddle_max_position
    assert 0 <= left_paddle_position <= max_position, "left paddle outside the court"
    assert 0 <= right_paddle_position <= max_position, "right paddle outside the court"

    x, y = position.x, position.y
    dx, dy = velocity.x, velocity.y
    radius = config.BALL_RADIUS

    # Side-outs take priority over walls at the corners, the side whose edge is crossed loses
    if dx < 0 and x <= radius:
        return Crossing.side_out(Side.LEFT.opposite())
    if dx > 0 and x >= config.COURT_WIDTH - radius:
        return Crossing.side_out(Side.RIGHT.opposite())

    if dy > 0 and y >= config.COURT_HEIGHT - radius:
        return Crossing.bounce(Vector2D(dx, -dy), Surface.BOTTOM_WALL)
    if dy < 0 and y <= radius:
        return Crossing.bounce(Vector2D(dx, -dy), Surface.TOP_WALL)

    if dx < 0:
        face = config.left_paddle_face
        edge = x - radius
        if edge + dx < face <= edge and _paddle_covers(
            y, left_paddle_position, config.PADDLE_HEIGHT
        ):
            return Crossing.bounce(Vector2D(-dx, dy), Surface.LEFT_PADDLE)
    elif dx > 0:
        face = config.right_paddle_face
        edge = x + radius
        if edge <= face < edge + dx and _paddle_covers(
            y, right_paddle_position, config.PADDLE_HEIGHT
        ):
            return Crossing.bounce(Vector2D(-dx, dy), Surface.RIGHT_PADDLE)

    return Crossing.nothing()
