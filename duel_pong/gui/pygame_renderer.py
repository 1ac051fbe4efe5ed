"""
PyGame renderer for Duel Pong
"""

from typing import Any

import pygame

from duel_pong.core.entities import GameState
from duel_pong.utils.config import GameConfig

# Held keys keep moving the paddle (milliseconds)
KEY_REPEAT_DELAY = 150
KEY_REPEAT_INTERVAL = 30


class PygameRenderer:
    """PyGame-based renderer for Duel Pong"""

    def __init__(self, config: GameConfig, headless: bool = False):
        """
        Initialize the PyGame renderer

        Args:
            config: Court size, colors and frame rate
            headless: Draw on an off-screen surface instead of opening a window
        """
        self.config = config
        self.width = config.COURT_WIDTH
        self.height = config.COURT_HEIGHT
        self.headless = headless

        pygame.init()

        if headless:
            self.screen = pygame.Surface((self.width, self.height))
        else:
            self.screen = pygame.display.set_mode((self.width, self.height), pygame.NOFRAME)
            pygame.display.set_caption("Pong!")
            pygame.key.set_repeat(KEY_REPEAT_DELAY, KEY_REPEAT_INTERVAL)

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.background_color: tuple[int, int, int] = config.BACKGROUND_COLOR
        self.ball_color: tuple[int, int, int] = config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = config.PADDLE_COLOR
        self.line_color: tuple[int, int, int] = config.LINE_COLOR
        self.text_color: tuple[int, int, int] = (255, 255, 255)

        self.font_large = pygame.font.Font(None, 74)
        self.font_small = pygame.font.Font(None, 28)

        self.show_fps = False
        self.show_debug = False

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_field(self) -> None:
        """Draw the center divider"""
        center_x = self.width // 2
        pygame.draw.line(self.screen, self.line_color, (center_x, 0), (center_x, self.height), 2)

    def draw_ball(self, position: tuple[float, float], radius: float) -> None:
        pos = (int(position[0]), int(position[1]))
        pygame.draw.circle(self.screen, self.ball_color, pos, int(radius))

    def draw_paddle(self, rect: tuple[float, float, float, float]) -> None:
        x, y, width, height = rect
        rect_px = pygame.Rect(int(x), int(y), int(width), int(height))
        pygame.draw.rect(self.screen, self.paddle_color, rect_px)

    def draw_score(self, score: tuple[int, int]) -> None:
        """Draw each score on its own half of the court"""
        for value, centerx in ((score[0], self.width // 4), (score[1], 3 * self.width // 4)):
            text_surface = self.font_large.render(str(value), True, self.text_color)
            text_rect = text_surface.get_rect()
            text_rect.centerx = centerx
            text_rect.top = 20
            self.screen.blit(text_surface, text_rect)

    def draw_ui_info(self, info: dict[str, Any]) -> None:
        """Draw FPS and debug lines in the top-left corner"""
        y_offset = 10

        if self.show_fps:
            fps_text = f"FPS: {self.clock.get_fps():.0f}"
            fps_surface = self.font_small.render(fps_text, True, self.text_color)
            self.screen.blit(fps_surface, (10, y_offset))
            y_offset += 25

        if self.show_debug:
            for key, value in info.items():
                debug_surface = self.font_small.render(f"{key}: {value}", True, self.text_color)
                self.screen.blit(debug_surface, (10, y_offset))
                y_offset += 25

    def render_frame(self, state: GameState) -> None:
        """Render the complete game state"""
        self.clear_screen()
        self.draw_field()
        self.draw_paddle(state.left_paddle)
        self.draw_paddle(state.right_paddle)
        self.draw_ball(state.ball_position, state.ball_radius)
        self.draw_score(state.score)
        self.draw_ui_info(
            {
                "Tick": state.tick,
                "Ball": f"({state.ball_position[0]:.1f}, {state.ball_position[1]:.1f})",
                "Round over": state.round_over,
            }
        )

    def present(self) -> None:
        """Present the rendered frame and maintain frame rate"""
        if not self.headless:
            pygame.display.flip()
        self.clock.tick(self.config.FPS)

    def toggle_fps_display(self) -> None:
        self.show_fps = not self.show_fps

    def toggle_debug_display(self) -> None:
        self.show_debug = not self.show_debug

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
