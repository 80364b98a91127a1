"""Geometric skin - flat shapes, HUD strip under the board."""

from typing import Optional

import pygame

from brickfall.config import BACKGROUND_COLOR, BALL_COLOR, HUD_COLOR, PADDLE_COLOR
from brickfall.game.snapshot import (
    BallView,
    BrickView,
    FrameSnapshot,
    PaddleView,
    ParticleView,
    PowerUpView,
)

from .base import BrickfallSkin

HUD_HEIGHT = 40


class GeometricSkin(BrickfallSkin):
    """Renders the game using simple shapes.

    - Paddle: blue rectangle
    - Ball: red circle
    - Bricks: filled rectangles with a white outline; Multi bricks show
      their remaining hits, indestructible bricks an infinity mark
    - Power-up: colored circle with a white ring
    - HUD: score, high score, lives, level and bricks left in a strip
      below the board, the current message centered over the board
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes"

    BACKGROUND_COLOR = BACKGROUND_COLOR
    OUTLINE_COLOR = (255, 255, 255)
    HUD_BG_COLOR = (34, 34, 44)
    PARTICLE_SIZE = 4

    def __init__(self, board_width: float, board_height: float):
        """Initialize geometric skin.

        Args:
            board_width: Board width in pixels
            board_height: Board height in pixels (the HUD goes below it)
        """
        self._board_width = int(board_width)
        self._board_height = int(board_height)
        self._font: Optional[pygame.font.Font] = None
        self._small_font: Optional[pygame.font.Font] = None

    @property
    def screen_size(self) -> tuple:
        """Surface size needed for board plus HUD."""
        return (self._board_width, self._board_height + HUD_HEIGHT)

    def _ensure_font(self) -> None:
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 28)
            self._small_font = pygame.font.Font(None, 20)

    def render_paddle(self, paddle: PaddleView, screen: pygame.Surface) -> None:
        pygame.draw.rect(screen, PADDLE_COLOR, (paddle.x, paddle.y, paddle.width, paddle.height))

    def render_ball(self, ball: BallView, screen: pygame.Surface) -> None:
        pygame.draw.circle(screen, BALL_COLOR, (int(ball.x), int(ball.y)), int(ball.radius))

    def render_brick(self, brick: BrickView, screen: pygame.Surface) -> None:
        if not brick.alive:
            return

        rect = (brick.x, brick.y, brick.width, brick.height)
        pygame.draw.rect(screen, brick.color, rect)
        pygame.draw.rect(screen, self.OUTLINE_COLOR, rect, 1)

        label = None
        if brick.kind == 'indestructible':
            label = "∞"
        elif brick.kind == 'multi' and brick.hits_left is not None and brick.hits_left > 1:
            label = str(brick.hits_left)

        if label:
            self._ensure_font()
            text = self._small_font.render(label, True, self.OUTLINE_COLOR)
            screen.blit(text, text.get_rect(center=(int(brick.x + brick.width / 2),
                                                   int(brick.y + brick.height / 2))))

    def render_power_up(self, power_up: PowerUpView, screen: pygame.Surface) -> None:
        center = (int(power_up.x), int(power_up.y))
        pygame.draw.circle(screen, power_up.color, center, int(power_up.radius))
        pygame.draw.circle(screen, self.OUTLINE_COLOR, center, int(power_up.radius), 1)

    def render_particle(self, particle: ParticleView, screen: pygame.Surface) -> None:
        square = pygame.Surface((self.PARTICLE_SIZE, self.PARTICLE_SIZE))
        square.fill(particle.color)
        square.set_alpha(max(0, min(255, int(particle.alpha * 255))))
        screen.blit(square, (int(particle.x), int(particle.y)))

    def render_hud(self, snapshot: FrameSnapshot, screen: pygame.Surface) -> None:
        self._ensure_font()

        pygame.draw.rect(screen, self.HUD_BG_COLOR,
                         (0, self._board_height, self._board_width, HUD_HEIGHT))

        bricks_left = sum(1 for b in snapshot.alive_bricks() if b.kind != 'indestructible')
        labels = [
            f"Score: {snapshot.score}",
            f"High Score: {snapshot.high_score}",
            f"Lives: {snapshot.lives}",
            f"Level: {snapshot.level}",
            f"Bricks: {bricks_left}",
        ]
        slot = self._board_width / len(labels)
        y = self._board_height + HUD_HEIGHT // 2
        for i, label in enumerate(labels):
            text = self._font.render(label, True, HUD_COLOR)
            screen.blit(text, text.get_rect(center=(int(slot * (i + 0.5)), y)))

        if snapshot.message:
            text = self._font.render(snapshot.message, True, HUD_COLOR)
            screen.blit(text, text.get_rect(center=(self._board_width // 2,
                                                   self._board_height // 2)))
