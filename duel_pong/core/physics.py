"""
Round controller for Duel Pong
"""

from enum import Enum
from typing import Any

from duel_pong.core.collision import CrossingKind
from duel_pong.core.collision import Surface
from duel_pong.core.entities import Ball
from duel_pong.core.entities import GameState
from duel_pong.core.entities import Paddle
from duel_pong.core.primitives import Command
from duel_pong.core.primitives import Side
from duel_pong.utils.config import GameConfig
from duel_pong.utils.logger import logger


class RoundState(Enum):
    """Round lifecycle"""

    IN_PROGRESS = "in_progress"
    ROUND_OVER = "round_over"


class RoundController:
    """Owns both paddles and the ball and runs one tick at a time"""

    def __init__(self, config: GameConfig | None = None):
        # Private copy: edits to the caller's config never reach a running round
        self.config = config.model_copy(deep=True) if config is not None else GameConfig()
        self.left = Paddle(Side.LEFT, self.config)
        self.right = Paddle(Side.RIGHT, self.config)
        self.ball = Ball(self.config)

        self.state = RoundState.IN_PROGRESS
        self.pause_elapsed = 0
        self.tick_count = 0

    def paddle(self, side: Side) -> Paddle:
        return self.left if side is Side.LEFT else self.right

    @property
    def score(self) -> tuple[int, int]:
        return (self.left.score, self.right.score)

    def is_round_over(self) -> bool:
        return self.state is RoundState.ROUND_OVER

    def handle_command(self, side: Side, command: Command) -> None:
        """Routes a movement command to the paddle on the given side"""
        self.paddle(side).handle(command)

    def tick(self) -> dict[str, Any]:
        """
        Runs one simulation step

        While a round is in progress the ball advances and a side-out
        credits the winner and ends the round. A finished round waits
        `ROUND_OVER_TICKS` ticks with the ball frozen, then the next tick
        only puts the ball and both paddles back at the center.

        Returns:
            Dict of events for this tick:
            {
                "wall_bounces": [...],
                "paddle_hits": [...],
                "side_outs": [...],
                "round_reset": bool
            }
        """
        self.tick_count += 1
        events: dict[str, Any] = {
            "wall_bounces": [],
            "paddle_hits": [],
            "side_outs": [],
            "round_reset": False,
        }

        if self.state is RoundState.ROUND_OVER:
            if self.pause_elapsed < self.config.ROUND_OVER_TICKS:
                self.pause_elapsed += 1
            else:
                self.reset_round()
                events["round_reset"] = True
            return events

        crossing = self.ball.update(self.left.axis_position, self.right.axis_position)

        if crossing.kind is CrossingKind.BOUNCE:
            if crossing.surface in (Surface.TOP_WALL, Surface.BOTTOM_WALL):
                events["wall_bounces"].append(crossing.surface.value)
            elif crossing.surface is not None:
                side = Side.LEFT if crossing.surface is Surface.LEFT_PADDLE else Side.RIGHT
                events["paddle_hits"].append({"side": side.value})
        elif crossing.kind is CrossingKind.SIDE_OUT and crossing.winner is not None:
            self.paddle(crossing.winner).win()
            self.state = RoundState.ROUND_OVER
            self.pause_elapsed = 0
            events["side_outs"].append({"winner": crossing.winner.value, "score": self.score})
            logger.debug("Side-out won by %s, score %s", crossing.winner.value, self.score)

        return events

    def reset_round(self) -> None:
        """Centers the ball and both paddles and starts a new round"""
        self.left.reset_position()
        self.right.reset_position()
        self.ball.reset()
        self.state = RoundState.IN_PROGRESS
        self.pause_elapsed = 0
        logger.debug("Round reset at tick %d", self.tick_count)

    def get_game_state(self) -> GameState:
        """Returns the state renderers need for this tick"""
        return GameState(
            ball_position=self.ball.position.to_tuple(),
            ball_velocity=self.ball.velocity.to_tuple(),
            ball_radius=self.config.BALL_RADIUS,
            left_paddle=self.left.get_rect(),
            right_paddle=self.right.get_rect(),
            score=self.score,
            round_over=self.is_round_over(),
            tick=self.tick_count,
        )
