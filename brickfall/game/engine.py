"""Brickfall simulation engine.

Advances a SessionState by one fixed step. The order of the steps inside
`tick()` decides which events can happen together:

1. paddle movement and particles (every phase except READY and terminal)
2. phase gate: LEVEL_TRANSITION counts down, anything but PLAYING stops here
3. per ball: brick scan, movement, walls, paddle, bottom exit
4. falling power-up
5. level completion
"""

import random
from typing import List, Optional

from brickfall.config import GameConfig
from brickfall.events import EventKind, GameEvent
from brickfall.game_state import GamePhase, PaddleIntent
from brickfall.logging import get_logger

from .board import check_win, generate_board, iter_bricks, remaining_bricks
from .entities.ball import Ball
from .entities.brick import Brick
from .entities.particle import burst
from .entities.power_up import PowerUp, PowerUpKind
from .physics.collision import (
    ball_hits_paddle,
    ball_intersects_rect,
    crosses_side_wall,
    crosses_top_wall,
    exits_bottom,
    power_up_hits_paddle,
)
from .state import SessionState

log = get_logger('engine')

RESUME_PROMPT = "Press Pause/Resume or Arrow Key to continue!"


class SimulationEngine:
    """Fixed-step rules for ball, paddle, bricks, power-ups and progression.

    The engine holds no game state of its own. Every method takes the
    SessionState to read and mutate, and `tick()` returns the events the
    step produced.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        """Initialize engine.

        Args:
            config: Game configuration
            rng: Random source for board layout, drops and particles
        """
        self._config = config
        self._rng = rng or random.Random()

    @property
    def config(self) -> GameConfig:
        return self._config

    # =========================================================================
    # Setup
    # =========================================================================

    def new_game(self, state: SessionState) -> None:
        """Reset score, lives and level, then build level 1."""
        state.score = 0
        state.lives = self._config.starting_lives
        state.level = 1
        state.final_score = None
        state.new_high_score = False
        self.setup_level(state)
        log.info("New game: %d lives", state.lives)

    def setup_level(self, state: SessionState) -> None:
        """Build the board for state.level and put a fresh ball in play.

        Score and lives are kept.
        """
        state.board = generate_board(state.level, self._config, self._rng)
        state.paddle.reset()
        state.effects.clear()
        state.combo.reset()
        state.power_up = None
        state.particles.clear()
        state.intent = PaddleIntent.NONE
        self.reset_balls(state)
        state.phase = GamePhase.PLAYING
        state.set_message("")
        log.info("Level %d started (%d x %d bricks)",
                 state.level, len(state.board[0]) if state.board else 0, len(state.board))

    def reset_balls(self, state: SessionState) -> None:
        """Replace all balls with one at the spawn point."""
        speed = self._config.ball_speed(state.level) * state.effects.speed_scale
        direction = 1 if self._rng.random() > 0.5 else -1
        state.balls = [Ball(
            self._config.board_width / 2,
            self._config.board_height - self._config.ball_spawn_offset,
            dx=speed * direction,
            dy=-speed,
            radius=self._config.ball_radius,
        )]

    # =========================================================================
    # Tick
    # =========================================================================

    def tick(self, state: SessionState) -> List[GameEvent]:
        """Advance the simulation by one step.

        Returns:
            Events emitted during the step, in order
        """
        events: List[GameEvent] = []
        state.tick_count += 1

        if state.phase == GamePhase.READY or state.phase.is_terminal:
            return events

        state.paddle.move(state.intent.value)
        self._update_particles(state)

        if state.phase == GamePhase.LEVEL_TRANSITION:
            state.transition_remaining -= 1
            if state.transition_remaining <= 0:
                self.setup_level(state)
            return events

        if state.phase != GamePhase.PLAYING:
            return events

        self._advance_timers(state)

        for ball in list(state.balls):
            if ball not in state.balls:
                continue
            if not self._update_ball(state, ball, events):
                return events

        self._update_power_up(state, events)

        if check_win(state.board):
            self._complete_level(state, events)

        return events

    def _emit(self, state: SessionState, events: List[GameEvent], kind: EventKind, **data) -> None:
        events.append(GameEvent(kind=kind, tick=state.tick_count, data=data))

    def _update_particles(self, state: SessionState) -> None:
        for particle in state.particles:
            particle.update(self._config.particle_fade)
        state.particles[:] = [p for p in state.particles if not p.faded]

    def _advance_timers(self, state: SessionState) -> None:
        state.combo.tick()

        if state.effects.tick(state.paddle, state.balls) is not None:
            state.set_message("")

        if state.message_remaining > 0:
            state.message_remaining -= 1
            if state.message_remaining == 0:
                state.message = ""

    # =========================================================================
    # Balls
    # =========================================================================

    def _update_ball(self, state: SessionState, ball: Ball, events: List[GameEvent]) -> bool:
        """Run brick, wall, paddle and bottom checks for one ball.

        Returns:
            False if the phase changed and the rest of the tick must stop
        """
        hit = self._collide_bricks(state, ball, events)
        ball.move()
        self._resolve_walls(ball, events, state)

        if hit is not None and hit.indestructible:
            return True

        if ball_hits_paddle(ball, state.paddle):
            damping = self._config.slow_factor if state.effects.slow_active else 1.0
            offset = ball.bounce_off_paddle(
                state.paddle.center_x,
                state.paddle.width,
                self._config.ball_speed(state.level),
                damping,
            )
            self._emit(state, events, EventKind.PADDLE_BOUNCE, offset=round(offset, 3))

        if exits_bottom(ball, self._config.board_height):
            return self._lose_ball(state, ball, events)

        return True

    def _collide_bricks(
        self,
        state: SessionState,
        ball: Ball,
        events: List[GameEvent],
    ) -> Optional[Brick]:
        """Hit the first alive brick containing the ball's center.

        Returns:
            The brick hit, or None
        """
        for brick in iter_bricks(state.board):
            if not brick.alive:
                continue
            if not ball_intersects_rect(ball, *brick.rect):
                continue

            if brick.indestructible:
                ball.bounce_vertical()
                state.particles.extend(burst(
                    brick.center_x, brick.center_y, brick.color,
                    self._config.particle_count, self._rng,
                ))
                self._emit(state, events, EventKind.INDESTRUCTIBLE_HIT,
                           col=brick.col, row=brick.row)
                log.trace("Indestructible brick %s hit", brick.grid_position)
                return brick

            state.particles.extend(burst(
                ball.x, ball.y, brick.color,
                self._config.particle_count, self._rng,
            ))
            if brick.hit(self._config.damaged_color):
                self._on_brick_destroyed(state, ball, brick, events)
            else:
                self._emit(state, events, EventKind.BRICK_DAMAGED,
                           col=brick.col, row=brick.row, hits_left=int(brick.hits_left))
                log.trace("Brick %s damaged, %d hits left", brick.grid_position, brick.hits_left)

            ball.bounce_vertical()
            return brick

        return None

    def _on_brick_destroyed(
        self,
        state: SessionState,
        ball: Ball,
        brick: Brick,
        events: List[GameEvent],
    ) -> None:
        state.score += 1
        self._emit(state, events, EventKind.BRICK_DESTROYED,
                   col=brick.col, row=brick.row, brick_kind=brick.kind.value)
        log.trace("Brick %s destroyed, %d left", brick.grid_position, remaining_bricks(state.board))

        if (self._rng.random() < self._config.multiball_chance
                and len(state.balls) < self._config.max_balls):
            self._spawn_extra_ball(state, ball, events)

        if self._rng.random() < self._config.power_up_chance:
            self._spawn_power_up(state, brick)

        bonus = state.combo.record_destruction()
        if bonus:
            state.score += bonus
            state.set_message(f"Combo Bonus: +{bonus}")
            self._emit(state, events, EventKind.COMBO_BONUS,
                       bonus=bonus, count=state.combo.count)
            log.debug("Combo x%d: +%d", state.combo.count, bonus)

    def _spawn_extra_ball(self, state: SessionState, source: Ball, events: List[GameEvent]) -> None:
        speed = self._config.ball_speed(state.level) * state.effects.speed_scale
        direction = 1 if self._rng.random() > 0.5 else -1
        state.balls.append(Ball(
            source.x, source.y,
            dx=speed * direction,
            dy=-speed,
            radius=self._config.ball_radius,
        ))
        state.set_message("Multiball!")
        self._emit(state, events, EventKind.MULTIBALL, balls=len(state.balls))
        log.debug("Multiball: %d balls in play", len(state.balls))

    def _resolve_walls(self, ball: Ball, events: List[GameEvent], state: SessionState) -> None:
        side = crosses_side_wall(ball, self._config.board_width)
        if side is not None:
            ball.bounce_horizontal()
            x = ball.radius if side == "left" else self._config.board_width - ball.radius
            ball.set_position(x, ball.y)
            self._emit(state, events, EventKind.WALL_BOUNCE, side=side)

        if crosses_top_wall(ball):
            ball.bounce_vertical()
            ball.set_position(ball.x, ball.radius)
            self._emit(state, events, EventKind.WALL_BOUNCE, side="top")

    def _lose_ball(self, state: SessionState, ball: Ball, events: List[GameEvent]) -> bool:
        if ball in state.balls:
            state.balls.remove(ball)
        if state.balls:
            return True

        state.lives -= 1
        self._emit(state, events, EventKind.LIFE_LOST, lives=state.lives)
        log.info("Life lost, %d remaining", state.lives)

        if state.lives <= 0:
            self._end_game(state, events, victory=False)
            return False

        self.reset_balls(state)
        state.phase = GamePhase.PAUSED
        state.set_message(RESUME_PROMPT)
        return False

    # =========================================================================
    # Power-ups
    # =========================================================================

    def _spawn_power_up(self, state: SessionState, brick: Brick) -> None:
        """Drop a random pickup from brick, unless one is already falling."""
        if state.power_up is not None:
            return

        kind = self._rng.choice(list(PowerUpKind))
        colors = {
            PowerUpKind.EXPAND: self._config.expand_color,
            PowerUpKind.SLOW: self._config.slow_color,
            PowerUpKind.EXTRA_LIFE: self._config.life_color,
        }
        state.power_up = PowerUp(
            kind,
            brick.center_x,
            brick.center_y,
            colors[kind],
            radius=self._config.power_up_radius,
            speed=self._config.power_up_speed,
        )
        log.debug("Power-up %s dropped", kind.value)

    def _update_power_up(self, state: SessionState, events: List[GameEvent]) -> None:
        power_up = state.power_up
        if power_up is None:
            return

        power_up.fall()
        if power_up_hits_paddle(power_up, state.paddle):
            state.power_up = None
            self.activate_power_up(state, power_up.kind, events)
        elif power_up.y > self._config.board_height:
            state.power_up = None

    def activate_power_up(
        self,
        state: SessionState,
        kind: PowerUpKind,
        events: Optional[List[GameEvent]] = None,
    ) -> None:
        """Apply a collected power-up.

        ExtraLife adds a life and leaves any timed effect running. Expand
        and Slow replace the running timed effect.
        """
        if events is not None:
            self._emit(state, events, EventKind.POWER_UP_COLLECTED, power_up=kind.value)

        if kind == PowerUpKind.EXTRA_LIFE:
            state.lives += 1
            state.set_message("Power-Up: Extra Life!", self._config.message_ticks)
            log.info("Extra life: %d lives", state.lives)
            return

        state.effects.activate(kind, state.paddle, state.balls)
        if kind == PowerUpKind.EXPAND:
            state.set_message("Power-Up: Expanded Paddle!")
        else:
            state.set_message("Power-Up: Slow Ball!")

    # =========================================================================
    # Progression
    # =========================================================================

    def _complete_level(self, state: SessionState, events: List[GameEvent]) -> None:
        next_level = state.level + 1
        self._emit(state, events, EventKind.LEVEL_UP, level=next_level)
        log.info("Level %d cleared, best combo %d", state.level, state.combo.max_count)

        # The counter stays at max_level once the last level is cleared
        if next_level > self._config.max_level:
            self._end_game(state, events, victory=True)
            return

        state.level = next_level
        state.phase = GamePhase.LEVEL_TRANSITION
        state.transition_remaining = self._config.level_transition_ticks
        state.set_message(f"Level Up! Starting Level {state.level}...")

    def _end_game(self, state: SessionState, events: List[GameEvent], victory: bool) -> None:
        state.final_score = state.score
        if state.score > state.high_score:
            state.high_score = state.score
            state.new_high_score = True

        if victory:
            state.phase = GamePhase.VICTORY
            state.set_message(
                f"Congratulations! You finished all levels! Final Score: {state.score}")
            self._emit(state, events, EventKind.VICTORY, score=state.score)
        else:
            state.phase = GamePhase.GAME_OVER
            state.set_message(f"Game Over! Final Score: {state.score}")
            self._emit(state, events, EventKind.GAME_OVER, score=state.score)

        state.balls.clear()
        state.power_up = None
        log.info("%s with score %d", state.phase.value, state.score)
