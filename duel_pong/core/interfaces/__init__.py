"""
Interfaces for collaborators of the Duel Pong core
"""

from duel_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["RendererProtocol"]
