#!/usr/bin/env python3
"""
Main script to launch Duel Pong with PyGame graphical interface
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from duel_pong.gui.game_app import controls_help
from duel_pong.gui.game_app import main
from duel_pong.utils.config import GameConfig
from duel_pong.utils.keyboard_layout import get_preferred_layout
from duel_pong.utils.logger import logger
from duel_pong.utils.logger import setup_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player Pong")
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--layout", help="Keyboard layout (qwerty, azerty, qwertz)")
    parser.add_argument("--round-delay", type=int, help="Frozen ticks after each point")
    parser.add_argument("--debug", action="store_true", help="Log bounces and round resets")
    return parser.parse_args()


def build_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load_from_file(args.config) if args.config else GameConfig()
    if args.layout:
        config.KEYBOARD_LAYOUT = args.layout
    elif not args.config:
        config.KEYBOARD_LAYOUT = get_preferred_layout(config)
    if args.round_delay is not None:
        config.ROUND_OVER_TICKS = args.round_delay
    return config


if __name__ == "__main__":
    args = parse_args()
    setup_logging(logging.DEBUG if args.debug else logging.INFO)

    try:
        config = build_config(args)
    except (FileNotFoundError, ValidationError) as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(2)

    print("=== DUEL PONG ===")
    print()
    print(controls_help(config))
    print()

    try:
        main(config)
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)
