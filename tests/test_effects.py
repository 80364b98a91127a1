"""
Tests for timed power-up effects (Expand, Slow).
"""

import pytest

from brickfall.config import GameConfig
from brickfall.game.effects import EffectTimer
from brickfall.game.entities import Ball, Paddle, PowerUpKind


@pytest.fixture
def setup():
    config = GameConfig()
    paddle = Paddle(config.board_width, config.paddle_top, width=config.paddle_width)
    balls = [Ball(100, 100, dx=3, dy=-3), Ball(200, 200, dx=-2, dy=1)]
    return EffectTimer(config), paddle, balls


class TestExpand:
    """Test the Expand effect."""

    def test_widens_paddle(self, setup):
        effects, paddle, balls = setup
        effects.activate(PowerUpKind.EXPAND, paddle, balls)
        assert paddle.width == 120
        assert effects.active.kind == PowerUpKind.EXPAND
        assert effects.active.remaining == 500

    def test_reverts_after_duration(self, setup):
        """Test the paddle returns to base width after 500 ticks."""
        effects, paddle, balls = setup
        effects.activate(PowerUpKind.EXPAND, paddle, balls)

        for _ in range(499):
            assert effects.tick(paddle, balls) is None
        assert paddle.width == 120

        assert effects.tick(paddle, balls) == PowerUpKind.EXPAND
        assert paddle.width == 80
        assert effects.active is None


class TestSlow:
    """Test the Slow effect."""

    def test_scales_balls(self, setup):
        effects, paddle, balls = setup
        effects.activate(PowerUpKind.SLOW, paddle, balls)
        assert balls[0].dx == pytest.approx(1.8)
        assert balls[1].dy == pytest.approx(0.6)
        assert effects.slow_active
        assert effects.speed_scale == pytest.approx(0.6)

    def test_reverts_after_duration(self, setup):
        """Test balls return to their pre-Slow velocity after 438 ticks."""
        effects, paddle, balls = setup
        effects.activate(PowerUpKind.SLOW, paddle, balls)
        for _ in range(438):
            effects.tick(paddle, balls)
        assert balls[0].dx == pytest.approx(3)
        assert balls[0].dy == pytest.approx(-3)
        assert effects.speed_scale == 1.0


class TestOverride:
    """Test that one timed effect replaces another."""

    def test_expand_replaces_slow(self, setup):
        """Test Slow is reverted before Expand applies."""
        effects, paddle, balls = setup
        effects.activate(PowerUpKind.SLOW, paddle, balls)
        effects.activate(PowerUpKind.EXPAND, paddle, balls)

        assert balls[0].dx == pytest.approx(3)
        assert paddle.width == 120
        assert not effects.slow_active

    def test_slow_replaces_expand(self, setup):
        effects, paddle, balls = setup
        effects.activate(PowerUpKind.EXPAND, paddle, balls)
        effects.activate(PowerUpKind.SLOW, paddle, balls)

        assert paddle.width == 80
        assert balls[0].dx == pytest.approx(1.8)
        assert effects.active.remaining == 438

    def test_same_kind_restarts_timer(self, setup):
        """Test a second Expand does not stack and gets a fresh timer."""
        effects, paddle, balls = setup
        effects.activate(PowerUpKind.EXPAND, paddle, balls)
        for _ in range(100):
            effects.tick(paddle, balls)
        effects.activate(PowerUpKind.EXPAND, paddle, balls)

        assert paddle.width == 120
        assert effects.active.remaining == 500

    def test_extra_life_is_not_timed(self, setup):
        effects, paddle, balls = setup
        with pytest.raises(ValueError):
            effects.activate(PowerUpKind.EXTRA_LIFE, paddle, balls)

    def test_clear_forgets_without_reverting(self, setup):
        effects, paddle, balls = setup
        effects.activate(PowerUpKind.EXPAND, paddle, balls)
        effects.clear()
        assert effects.active is None
        assert paddle.width == 120
