"""
GUI module for Duel Pong - PyGame interface
"""

from duel_pong.gui.game_app import DuelPongApp
from duel_pong.gui.game_app import controls_help
from duel_pong.gui.game_app import main
from duel_pong.gui.human_player import HumanPlayer
from duel_pong.gui.human_player import InputManager
from duel_pong.gui.human_player import create_human_players
from duel_pong.gui.pygame_renderer import PygameRenderer

__all__ = [
    "PygameRenderer",
    "HumanPlayer",
    "InputManager",
    "create_human_players",
    "DuelPongApp",
    "controls_help",
    "main",
]
