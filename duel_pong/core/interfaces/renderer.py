"""
Renderer protocol - defines interface for rendering collaborators
"""

from typing import Protocol

from duel_pong.core.entities import GameState


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The core never draws; a renderer reads one GameState per tick.
    """

    def render_frame(self, state: GameState) -> None:
        """
        Draw a complete frame without presenting it.

        Args:
            state: Snapshot of the tick to draw
        """
        ...

    def present(self) -> None:
        """Show the drawn frame and wait for the next one"""
        ...

    def cleanup(self) -> None:
        """Release renderer resources"""
        ...

    def toggle_fps_display(self) -> None:
        """Show or hide the frame rate"""
        ...

    def toggle_debug_display(self) -> None:
        """Show or hide tick debug lines"""
        ...
