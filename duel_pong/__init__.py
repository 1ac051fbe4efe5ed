"""
Duel Pong - two-paddle ball bouncing simulation
"""

__version__ = "0.1.0"
