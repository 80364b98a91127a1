"""
Tests for Brickfall entities: Ball, Paddle, Brick, PowerUp, Particle.
"""

import math
import random

import pytest

from brickfall.game.entities import (
    Ball,
    Brick,
    BrickKind,
    Paddle,
    PowerUp,
    PowerUpKind,
    burst,
)

DAMAGED = (221, 221, 221)


class TestBrick:
    """Test brick hits and the alive flag."""

    def test_normal_brick_one_hit(self):
        """Test a Normal brick is destroyed by its first hit."""
        brick = Brick(0, 0, 28, 40, 60, 20)
        assert brick.hit(DAMAGED) is True
        assert not brick.alive
        assert brick.hits_left == 0

    def test_multi_brick_takes_three_hits(self):
        """Test a Multi brick survives two hits and recolors."""
        brick = Brick(0, 0, 28, 40, 60, 20, kind=BrickKind.MULTI, hits=3, color=(142, 68, 173))

        assert brick.hit(DAMAGED) is False
        assert brick.alive
        assert brick.hits_left == 2
        assert brick.color == DAMAGED

        assert brick.hit(DAMAGED) is False
        assert brick.hit(DAMAGED) is True
        assert not brick.alive

    def test_indestructible_absorbs_hits(self):
        """Test an Indestructible brick never changes."""
        brick = Brick(0, 0, 28, 40, 60, 20, kind=BrickKind.INDESTRUCTIBLE, color=(85, 85, 85))
        for _ in range(10):
            assert brick.hit(DAMAGED) is False
        assert brick.alive
        assert brick.hits_left == math.inf
        assert brick.color == (85, 85, 85)
        assert brick.indestructible

    def test_dead_brick_ignores_hits(self):
        """Test hitting a destroyed brick is a no-op."""
        brick = Brick(0, 0, 28, 40, 60, 20)
        brick.hit(DAMAGED)
        assert brick.hit(DAMAGED) is False
        assert brick.hits_left == 0

    def test_geometry(self):
        brick = Brick(2, 1, 164, 68, 60, 20)
        assert brick.grid_position == (2, 1)
        assert brick.rect == (164, 68, 60, 20)
        assert brick.center_x == 194
        assert brick.center_y == 78


class TestPaddle:
    """Test paddle movement and width changes."""

    def test_starts_centered(self):
        paddle = Paddle(660, 485, width=80)
        assert paddle.x == 290
        assert paddle.center_x == 330

    def test_moves_by_speed(self):
        paddle = Paddle(660, 485, width=80, speed=7)
        paddle.move(-1)
        assert paddle.x == 283
        paddle.move(1)
        paddle.move(1)
        assert paddle.x == 297

    def test_no_direction_no_move(self):
        paddle = Paddle(660, 485)
        paddle.move(0)
        assert paddle.x == 290

    def test_clamped_to_board(self):
        """Test the paddle never leaves [0, board_width - width]."""
        paddle = Paddle(660, 485, width=80, speed=7)
        for _ in range(100):
            paddle.move(-1)
        assert paddle.x == 0
        for _ in range(100):
            paddle.move(1)
        assert paddle.x == 580
        assert paddle.right == 660

    def test_widen_at_right_edge_stays_on_board(self):
        """Test expanding next to the right wall shifts the paddle left."""
        paddle = Paddle(660, 485, width=80)
        for _ in range(100):
            paddle.move(1)
        paddle.set_width(120)
        assert paddle.width == 120
        assert paddle.right == 660

    def test_reset(self):
        paddle = Paddle(660, 485, width=80)
        paddle.set_width(120)
        paddle.move(-1)
        paddle.reset()
        assert paddle.width == 80
        assert paddle.x == 290


class TestBall:
    """Test ball motion and rebounds."""

    def test_move(self):
        ball = Ball(100, 100, dx=2, dy=-3)
        ball.move()
        assert (ball.x, ball.y) == (102, 97)

    def test_bounces(self):
        ball = Ball(100, 100, dx=2, dy=-3)
        ball.bounce_horizontal()
        ball.bounce_vertical()
        assert (ball.dx, ball.dy) == (-2, 3)

    def test_paddle_bounce_center(self):
        """Test hitting the paddle center sends the ball straight up."""
        ball = Ball(330, 480, dx=2, dy=3)
        offset = ball.bounce_off_paddle(330, 80, 3.0)
        assert offset == 0
        assert ball.dx == 0
        assert ball.dy == -3

    def test_paddle_bounce_offset(self):
        """Test the rebound angle follows the strike position."""
        ball = Ball(350, 480, dx=0, dy=3)
        offset = ball.bounce_off_paddle(330, 80, 3.0)
        assert offset == pytest.approx(0.5)
        assert ball.dx == pytest.approx(1.5)

    def test_paddle_bounce_forces_upward(self):
        """Test dy is made negative even if already moving up."""
        ball = Ball(330, 480, dx=0, dy=-3)
        ball.bounce_off_paddle(330, 80, 3.0)
        assert ball.dy == -3

    def test_paddle_bounce_offset_clamped(self):
        ball = Ball(500, 480, dx=0, dy=3)
        assert ball.bounce_off_paddle(330, 80, 3.0) == 1.0
        assert ball.dx == 3.0

    def test_paddle_bounce_damping(self):
        ball = Ball(330, 480, dx=0, dy=3)
        ball.bounce_off_paddle(330, 80, 3.0, damping=0.6)
        assert ball.dy == pytest.approx(-1.8)

    def test_scale_velocity(self):
        ball = Ball(0, 0, dx=3, dy=-4)
        assert ball.speed == 5
        ball.scale_velocity(0.5)
        assert ball.speed == pytest.approx(2.5)


class TestPowerUpAndParticles:
    """Test falling pickups and particle bursts."""

    def test_power_up_falls(self):
        power_up = PowerUp(PowerUpKind.EXPAND, 100, 50, (0, 255, 0), speed=3)
        power_up.fall()
        assert power_up.y == 53
        assert power_up.x == 100

    def test_burst(self):
        """Test a burst creates count particles at the point."""
        particles = burst(10, 20, (1, 2, 3), 8, random.Random(0))
        assert len(particles) == 8
        for p in particles:
            assert (p.x, p.y) == (10, 20)
            assert -1 <= p.dx < 1
            assert -1 <= p.dy < 1
            assert p.alpha == 1.0

    def test_particle_fades(self):
        particle = burst(0, 0, (1, 2, 3), 1, random.Random(0))[0]
        for _ in range(33):
            particle.update(0.03)
        assert not particle.faded
        particle.update(0.03)
        assert particle.faded
