"""
Logging setup for Duel Pong
"""

import logging

logger = logging.getLogger("duel_pong")


def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logging for the launch scripts"""
    # Set level to DEBUG to trace bounces and round resets
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
