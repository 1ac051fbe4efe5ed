"""
Human player input for Duel Pong
"""

import pygame

from duel_pong.core.physics import RoundController
from duel_pong.core.primitives import Command
from duel_pong.core.primitives import Side
from duel_pong.utils.keyboard_layout import get_keyboard_layout


class HumanPlayer:
    """Maps key-down events to commands for one paddle"""

    def __init__(self, side: Side, control_scheme: str = "arrows", layout_name: str = "qwerty"):
        """
        Initialize human player

        Args:
            side: Paddle controlled by this player
            control_scheme: "arrows" for arrow keys or "letters" for the layout's letter keys
            layout_name: Keyboard layout used by the letter scheme
        """
        self.side = side
        self.control_scheme = control_scheme

        layout = get_keyboard_layout(layout_name)
        if control_scheme == "arrows":
            key_mapping = layout.arrow_keys
        elif control_scheme == "letters":
            key_mapping = layout.letter_keys
        else:
            raise ValueError(f"Unknown control scheme: {control_scheme}")

        self.commands = {
            key_mapping["up"]: Command.MOVE_TOWARD_ZERO,
            key_mapping["down"]: Command.MOVE_AWAY_FROM_ZERO,
        }

    def command_for_key(self, key: int) -> Command:
        return self.commands.get(key, Command.NONE)


class InputManager:
    """Routes key-down events from all human players to the controller"""

    def __init__(self) -> None:
        self.players: dict[Side, HumanPlayer] = {}

    def add_player(self, player: HumanPlayer) -> None:
        self.players[player.side] = player

    def handle_event(self, event: pygame.event.Event, controller: RoundController) -> bool:
        """
        Apply a key-down event to the matching paddle

        Returns:
            True if the event moved a paddle
        """
        if event.type != pygame.KEYDOWN:
            return False

        handled = False
        for player in self.players.values():
            command = player.command_for_key(event.key)
            if command is not Command.NONE:
                controller.handle_command(player.side, command)
                handled = True
        return handled


def create_human_players(layout_name: str = "qwerty") -> InputManager:
    """Left paddle on letter keys, right paddle on arrows"""
    manager = InputManager()
    manager.add_player(HumanPlayer(Side.LEFT, "letters", layout_name))
    manager.add_player(HumanPlayer(Side.RIGHT, "arrows", layout_name))
    return manager
