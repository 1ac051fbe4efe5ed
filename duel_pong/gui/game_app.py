"""
Main game application with PyGame GUI
"""

import pygame

from duel_pong.core.interfaces.renderer import RendererProtocol
from duel_pong.core.physics import RoundController
from duel_pong.gui.human_player import InputManager
from duel_pong.gui.human_player import create_human_players
from duel_pong.gui.pygame_renderer import PygameRenderer
from duel_pong.utils.config import GameConfig
from duel_pong.utils.config import validate_game_config
from duel_pong.utils.keyboard_layout import show_layout_help
from duel_pong.utils.logger import logger


class DuelPongApp:
    """Host loop: key events, one tick, one frame"""

    def __init__(
        self,
        config: GameConfig | None = None,
        renderer: RendererProtocol | None = None,
        headless: bool = False,
    ) -> None:
        self.config = config if config is not None else GameConfig()

        for warning in validate_game_config(self.config):
            logger.warning("Configuration: %s", warning)

        self.controller = RoundController(self.config)
        self.renderer: RendererProtocol = (
            renderer if renderer is not None else PygameRenderer(self.config, headless=headless)
        )
        self.input_manager: InputManager = create_human_players(self.config.KEYBOARD_LAYOUT)
        self.running = True

    def handle_event(self, event: pygame.event.Event) -> None:
        """Quit, display toggles, then paddle keys"""
        if event.type == pygame.QUIT:
            self.running = False
            return

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
                return
            if event.key == pygame.K_F2:
                self.renderer.toggle_fps_display()
                return
            if event.key == pygame.K_F3:
                self.renderer.toggle_debug_display()
                return

        self.input_manager.handle_event(event, self.controller)

    def step(self) -> None:
        """Advance the simulation by one tick and draw it"""
        events = self.controller.tick()
        for side_out in events["side_outs"]:
            logger.info("Point for %s paddle, score %s", side_out["winner"], side_out["score"])

        self.renderer.render_frame(self.controller.get_game_state())
        self.renderer.present()

    def run(self) -> None:
        """Main application loop"""
        logger.info("Starting Duel Pong...")

        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                if self.running:
                    self.step()
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        logger.info("Final score %s", self.controller.score)
        self.renderer.cleanup()


def controls_help(config: GameConfig) -> str:
    """Paddle keys for the configured layout followed by the display keys"""
    help_text = show_layout_help(config.KEYBOARD_LAYOUT)
    help_text += "\nF2: Show FPS\n"
    help_text += "F3: Show debug info\n"
    help_text += "ESC: Quit\n"
    return help_text


def main(config: GameConfig | None = None) -> None:
    """Main entry point"""
    app = DuelPongApp(config)
    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("User interruption")
