"""
Utility modules for Duel Pong
"""

from duel_pong.utils.config import GameConfig
from duel_pong.utils.config import validate_game_config
from duel_pong.utils.logger import logger
from duel_pong.utils.logger import setup_logging

__all__ = ["GameConfig", "validate_game_config", "logger", "setup_logging"]
