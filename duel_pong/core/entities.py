"""
Duel Pong game entities: ball, paddles, game state snapshot
"""

from dataclasses import dataclass

from duel_pong.core.collision import Crossing
from duel_pong.core.collision import CrossingKind
from duel_pong.core.collision import classify_crossing
from duel_pong.core.primitives import Command
from duel_pong.core.primitives import Side
from duel_pong.core.primitives import Vector2D
from duel_pong.utils.config import GameConfig


class Paddle:
    """Player paddle moving along the vertical axis"""

    def __init__(self, side: Side, config: GameConfig):
        self.side = side
        self.config = config
        self.axis_position = config.paddle_center_position
        self.score = 0

    @property
    def x(self) -> float:
        return self.config.left_paddle_x if self.side is Side.LEFT else self.config.right_paddle_x

    def handle(self, command: Command) -> None:
        """Applies one movement command, clamped to the court"""
        if command is Command.MOVE_TOWARD_ZERO:
            self.axis_position = max(0.0, self.axis_position - self.config.PADDLE_SPEED)
        elif command is Command.MOVE_AWAY_FROM_ZERO:
            self.axis_position = min(
                self.config.paddle_max_position, self.axis_position + self.config.PADDLE_SPEED
            )

    def win(self) -> None:
        self.score += 1

    def reset_position(self) -> None:
        """Moves the paddle back to the vertical center, keeping the score"""
        self.axis_position = self.config.paddle_center_position

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the paddle rectangle (x, y, width, height)"""
        return (self.x, self.axis_position, self.config.PADDLE_WIDTH, self.config.PADDLE_HEIGHT)


class Ball:
    """Game ball"""

    def __init__(self, config: GameConfig):
        self.config = config
        self.position = Vector2D(*config.ball_center)
        self.velocity = Vector2D(config.BALL_SPEED, config.BALL_SPEED)
        self._last_crossing = Crossing.nothing()

    def update(self, left_paddle_position: float, right_paddle_position: float) -> Crossing:
        """
        Advances the ball by one tick

        The crossing is classified from the state before the move. A bounce
        replaces the velocity, then the position always advances by it.

        Args:
            left_paddle_position: Axis position of the left paddle
            right_paddle_position: Axis position of the right paddle

        Returns:
            Crossing: The outcome computed for this tick
        """
        crossing = classify_crossing(
            self.position,
            self.velocity,
            left_paddle_position,
            right_paddle_position,
            self.config,
        )
        if crossing.kind is CrossingKind.BOUNCE and crossing.velocity is not None:
            self.velocity = crossing.velocity.copy()

        self.position += self.velocity
        self._last_crossing = crossing
        return crossing

    def last_crossing(self) -> Crossing:
        """Returns the outcome of the most recent update"""
        return self._last_crossing

    def reset(self) -> None:
        """Puts the ball back at the center with the initial diagonal velocity"""
        self.position = Vector2D(*self.config.ball_center)
        self.velocity = Vector2D(self.config.BALL_SPEED, self.config.BALL_SPEED)
        self._last_crossing = Crossing.nothing()


@dataclass(frozen=True)
class GameState:
    """Snapshot of one tick for renderers"""

    ball_position: tuple[float, float]
    ball_velocity: tuple[float, float]
    ball_radius: float
    left_paddle: tuple[float, float, float, float]
    right_paddle: tuple[float, float, float, float]
    score: tuple[int, int]
    round_over: bool
    tick: int
