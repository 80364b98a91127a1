"""Base class for Brickfall skins.

Skins handle ALL rendering - the session only manages state. A skin draws
a FrameSnapshot and never touches the live simulation.
"""

from abc import ABC, abstractmethod

import pygame

from brickfall.game.snapshot import (
    BallView,
    BrickView,
    FrameSnapshot,
    PaddleView,
    ParticleView,
    PowerUpView,
)


class BrickfallSkin(ABC):
    """Base class for game skins."""

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    BACKGROUND_COLOR = (17, 17, 17)

    @abstractmethod
    def render_paddle(self, paddle: PaddleView, screen: pygame.Surface) -> None:
        """Render the paddle."""
        pass

    @abstractmethod
    def render_ball(self, ball: BallView, screen: pygame.Surface) -> None:
        """Render a ball."""
        pass

    @abstractmethod
    def render_brick(self, brick: BrickView, screen: pygame.Surface) -> None:
        """Render a brick (skips dead bricks)."""
        pass

    def render_power_up(self, power_up: PowerUpView, screen: pygame.Surface) -> None:
        """Render the falling power-up."""
        pass

    def render_particle(self, particle: ParticleView, screen: pygame.Surface) -> None:
        """Render one particle."""
        pass

    def render_hud(self, snapshot: FrameSnapshot, screen: pygame.Surface) -> None:
        """Render score, high score, lives, level and the current message."""
        pass

    def render(self, snapshot: FrameSnapshot, screen: pygame.Surface) -> None:
        """Render a full frame.

        Args:
            snapshot: Frame to draw
            screen: Pygame surface to draw on
        """
        screen.fill(self.BACKGROUND_COLOR)

        for column in snapshot.bricks:
            for brick in column:
                self.render_brick(brick, screen)

        self.render_paddle(snapshot.paddle, screen)

        for ball in snapshot.balls:
            self.render_ball(ball, screen)

        if snapshot.power_up is not None:
            self.render_power_up(snapshot.power_up, screen)

        for particle in snapshot.particles:
            self.render_particle(particle, screen)

        self.render_hud(snapshot, screen)
