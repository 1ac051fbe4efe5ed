"""
Unit tests for the round controller

Tests round controller functionality including:
- Tick events for walls, paddles and side-outs
- Scoring and round reset
- Configurable pause after a point
- Speed conservation and paddle clamping over long runs
- The full 800x600 serve-to-point scenario
"""

import random

import pytest

from duel_pong.core.collision import Crossing
from duel_pong.core.collision import CrossingKind
from duel_pong.core.physics import RoundController
from duel_pong.core.physics import RoundState
from duel_pong.core.primitives import Command
from duel_pong.core.primitives import Side
from duel_pong.core.primitives import Vector2D
from duel_pong.utils.config import GameConfig

CENTER = Vector2D(397.5, 297.5)
INITIAL_VELOCITY = Vector2D(2.5, 2.5)


def score_point(controller: RoundController, winner: Side) -> None:
    """Put the ball on the loser's edge and run the side-out tick"""
    if winner is Side.LEFT:
        controller.ball.position = Vector2D(795.0, 300.0)
        controller.ball.velocity = Vector2D(2.5, 2.5)
    else:
        controller.ball.position = Vector2D(5.0, 300.0)
        controller.ball.velocity = Vector2D(-2.5, 2.5)
    controller.tick()


class TestRoundController:
    """Test the tick state machine"""

    def test_initialization(self):
        controller = RoundController()

        assert controller.state is RoundState.IN_PROGRESS
        assert controller.score == (0, 0)
        assert controller.ball.position == CENTER
        assert controller.left.side is Side.LEFT
        assert controller.right.side is Side.RIGHT
        assert controller.tick_count == 0

    def test_tick_advances_ball(self):
        controller = RoundController()

        events = controller.tick()

        assert controller.ball.position == Vector2D(400.0, 300.0)
        assert events == {
            "wall_bounces": [],
            "paddle_hits": [],
            "side_outs": [],
            "round_reset": False,
        }

    def test_wall_bounce_event(self):
        controller = RoundController()
        controller.ball.position = Vector2D(400.0, 5.0)
        controller.ball.velocity = Vector2D(2.5, -2.5)

        events = controller.tick()

        assert events["wall_bounces"] == ["top_wall"]
        assert controller.ball.velocity == Vector2D(2.5, 2.5)

    def test_paddle_hit_event(self):
        controller = RoundController()
        controller.ball.position = Vector2D(785.0, 300.0)

        events = controller.tick()

        assert events["paddle_hits"] == [{"side": "right"}]
        assert controller.ball.velocity == Vector2D(-2.5, 2.5)
        assert controller.ball.position == Vector2D(782.5, 302.5)

    def test_moved_paddle_is_used_for_collision(self):
        controller = RoundController()
        controller.ball.position = Vector2D(785.0, 300.0)
        for _ in range(10):
            controller.handle_command(Side.RIGHT, Command.MOVE_TOWARD_ZERO)

        events = controller.tick()

        assert events["paddle_hits"] == []
        assert controller.ball.velocity == Vector2D(2.5, 2.5)

    def test_handle_command_moves_only_that_paddle(self):
        controller = RoundController()

        controller.handle_command(Side.LEFT, Command.MOVE_AWAY_FROM_ZERO)

        assert controller.left.axis_position == 285.0
        assert controller.right.axis_position == 275.0

    def test_right_side_out_scores_left(self):
        controller = RoundController()
        controller.ball.position = Vector2D(795.0, 300.0)

        events = controller.tick()

        assert controller.ball.last_crossing() == Crossing.side_out(Side.LEFT)
        assert events["side_outs"] == [{"winner": "left", "score": (1, 0)}]
        assert controller.score == (1, 0)
        assert controller.is_round_over()

    def test_left_side_out_scores_right(self):
        controller = RoundController()

        score_point(controller, Side.RIGHT)

        assert controller.score == (0, 1)
        assert controller.state is RoundState.ROUND_OVER

    def test_reset_tick_only_resets(self):
        controller = RoundController()
        controller.handle_command(Side.LEFT, Command.MOVE_TOWARD_ZERO)
        controller.handle_command(Side.RIGHT, Command.MOVE_AWAY_FROM_ZERO)
        score_point(controller, Side.LEFT)

        events = controller.tick()

        assert events["round_reset"] is True
        assert controller.state is RoundState.IN_PROGRESS
        assert controller.ball.position == CENTER
        assert controller.ball.velocity == INITIAL_VELOCITY
        assert controller.ball.last_crossing().kind is CrossingKind.NOTHING
        assert controller.left.axis_position == 275.0
        assert controller.right.axis_position == 275.0
        assert controller.score == (1, 0)

    @pytest.mark.parametrize("winner", [Side.LEFT, Side.RIGHT])
    def test_round_reset_is_independent_of_prior_state(self, winner):
        rng = random.Random(7)
        controller = RoundController()
        for _ in range(rng.randint(1, 30)):
            controller.handle_command(Side.LEFT, rng.choice(list(Command)))
            controller.handle_command(Side.RIGHT, rng.choice(list(Command)))

        score_point(controller, winner)
        controller.tick()

        assert controller.ball.position == CENTER
        assert controller.ball.velocity == INITIAL_VELOCITY
        assert controller.left.axis_position == controller.right.axis_position == 275.0

    def test_scores_accumulate_across_rounds(self):
        controller = RoundController()

        for winner in (Side.LEFT, Side.RIGHT, Side.LEFT):
            score_point(controller, winner)
            controller.tick()

        assert controller.score == (2, 1)

    def test_get_game_state(self):
        controller = RoundController()
        controller.tick()

        state = controller.get_game_state()

        assert state.ball_position == (400.0, 300.0)
        assert state.ball_velocity == (2.5, 2.5)
        assert state.ball_radius == 5.0
        assert state.left_paddle == (5.0, 275.0, 5.0, 50.0)
        assert state.right_paddle == (790.0, 275.0, 5.0, 50.0)
        assert state.score == (0, 0)
        assert state.round_over is False
        assert state.tick == 1

    def test_separate_controllers_use_their_own_config(self):
        small = RoundController(GameConfig(COURT_WIDTH=400, COURT_HEIGHT=300))
        default = RoundController()

        assert small.ball.position == Vector2D(197.5, 147.5)
        assert default.ball.position == CENTER

    def test_caller_config_edits_do_not_reach_running_round(self):
        config = GameConfig()
        controller = RoundController(config)
        for _ in range(100):
            controller.handle_command(Side.RIGHT, Command.MOVE_AWAY_FROM_ZERO)
        assert controller.right.axis_position == 550.0

        config.PADDLE_HEIGHT = 100.0
        controller.tick()

        assert controller.config.PADDLE_HEIGHT == 50.0
        assert controller.get_game_state().right_paddle == (790.0, 550.0, 5.0, 50.0)
        assert controller.config is not config


class TestRoundOverPause:
    """Test the frozen ticks between a point and the reset"""

    @pytest.mark.parametrize("delay", [0, 1, 3, 10])
    def test_reset_after_delay(self, delay):
        controller = RoundController(GameConfig(ROUND_OVER_TICKS=delay))
        score_point(controller, Side.LEFT)
        frozen_at = controller.ball.position.copy()

        for _ in range(delay):
            events = controller.tick()
            assert events["round_reset"] is False
            assert controller.is_round_over()
            assert controller.ball.position == frozen_at
            assert controller.get_game_state().round_over is True

        events = controller.tick()

        assert events["round_reset"] is True
        assert controller.state is RoundState.IN_PROGRESS
        assert controller.ball.position == CENTER
        assert controller.score == (1, 0)

    def test_commands_during_pause_are_discarded_by_reset(self):
        controller = RoundController(GameConfig(ROUND_OVER_TICKS=2))
        score_point(controller, Side.RIGHT)

        controller.tick()
        controller.handle_command(Side.LEFT, Command.MOVE_TOWARD_ZERO)
        controller.tick()
        controller.tick()

        assert controller.left.axis_position == 275.0


class TestInvariants:
    """Properties that hold on every tick"""

    def test_speed_conserved(self):
        rng = random.Random(1234)
        controller = RoundController()
        speed = controller.config.BALL_SPEED

        for _ in range(5000):
            controller.handle_command(Side.LEFT, rng.choice(list(Command)))
            controller.handle_command(Side.RIGHT, rng.choice(list(Command)))
            controller.tick()
            assert abs(controller.ball.velocity.x) == speed
            assert abs(controller.ball.velocity.y) == speed

    def test_paddles_stay_in_court(self):
        rng = random.Random(99)
        controller = RoundController(GameConfig(PADDLE_SPEED=13.0))
        max_position = controller.config.COURT_HEIGHT - controller.config.PADDLE_HEIGHT

        for _ in range(2000):
            controller.handle_command(Side.LEFT, rng.choice(list(Command)))
            controller.handle_command(Side.RIGHT, rng.choice(list(Command)))
            controller.tick()
            for paddle in (controller.left, controller.right):
                assert 0.0 <= paddle.axis_position <= max_position

    def test_ball_stays_in_court_while_in_progress(self):
        controller = RoundController()
        config = controller.config

        for _ in range(3000):
            if controller.state is RoundState.IN_PROGRESS:
                assert config.BALL_RADIUS <= controller.ball.position.y
                assert controller.ball.position.y <= config.COURT_HEIGHT - config.BALL_RADIUS
            controller.tick()


class TestServeToPoint:
    """800x600 court, ball served from the center until the left player scores"""

    def test_scenario(self):
        config = GameConfig(
            COURT_WIDTH=800,
            COURT_HEIGHT=600,
            PADDLE_HEIGHT=50.0,
            BALL_RADIUS=5.0,
            BALL_SPEED=2.5,
        )
        controller = RoundController(config)
        ball = controller.ball
        assert ball.position == CENTER
        assert ball.velocity == INITIAL_VELOCITY

        ticks = 0
        while not (ball.position.x == 795.0 and ball.velocity.x == 2.5):
            controller.tick()
            ticks += 1
            assert controller.score == (0, 0)
            assert ticks < 1000, "ball never reached the right edge"

        # One bottom-wall bounce on the way, the right paddle misses
        assert ticks == 159
        assert ball.position.y == 495.0

        controller.tick()

        assert ball.last_crossing() == Crossing.side_out(Side.LEFT)
        assert controller.left.score == 1
        assert controller.right.score == 0
        assert controller.is_round_over()

        controller.tick()

        assert ball.position == Vector2D(397.5, 297.5)
        assert ball.velocity == Vector2D(2.5, 2.5)
        assert controller.left.axis_position == 275.0
        assert controller.right.axis_position == 275.0
        assert controller.state is RoundState.IN_PROGRESS
