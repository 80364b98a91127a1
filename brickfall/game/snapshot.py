"""
Read-only frame snapshots for renderers.

A FrameSnapshot is built from live engine state once per frame. All models
are frozen, so a renderer cannot mutate the simulation through them.
"""

from typing import TYPE_CHECKING, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from brickfall.game_state import GamePhase

if TYPE_CHECKING:
    from .state import SessionState

Color = Tuple[int, int, int]


class _View(BaseModel):
    model_config = ConfigDict(frozen=True)


class BallView(_View):
    x: float
    y: float
    dx: float
    dy: float
    radius: float


class PaddleView(_View):
    x: float
    y: float
    width: float
    height: float


class BrickView(_View):
    col: int
    row: int
    x: float
    y: float
    width: float
    height: float
    kind: str
    hits_left: Optional[int] = Field(default=None, description="None for indestructible bricks")
    alive: bool
    color: Color


class PowerUpView(_View):
    kind: str
    x: float
    y: float
    radius: float
    color: Color


class ParticleView(_View):
    x: float
    y: float
    alpha: float
    color: Color


class EffectView(_View):
    kind: str
    remaining: int


class FrameSnapshot(_View):
    """Everything a renderer or HUD needs for one frame."""
    paddle: PaddleView
    balls: Tuple[BallView, ...] = ()
    bricks: Tuple[Tuple[BrickView, ...], ...] = ()
    power_up: Optional[PowerUpView] = None
    particles: Tuple[ParticleView, ...] = ()
    active_effect: Optional[EffectView] = None

    score: int = Field(default=0, ge=0)
    high_score: int = Field(default=0, ge=0)
    lives: int = 0
    level: int = Field(default=1, ge=1)
    phase: GamePhase = GamePhase.READY
    message: str = ""

    def alive_bricks(self) -> List[BrickView]:
        """Flattened list of bricks still on the board."""
        return [brick for column in self.bricks for brick in column if brick.alive]


def build_snapshot(state: 'SessionState') -> FrameSnapshot:
    """Copy the renderable parts of a SessionState into a FrameSnapshot."""
    paddle = state.paddle
    effect = state.effects.active

    return FrameSnapshot(
        paddle=PaddleView(x=paddle.x, y=paddle.top, width=paddle.width, height=paddle.height),
        balls=tuple(
            BallView(x=b.x, y=b.y, dx=b.dx, dy=b.dy, radius=b.radius)
            for b in state.balls
        ),
        bricks=tuple(
            tuple(
                BrickView(
                    col=brick.col,
                    row=brick.row,
                    x=brick.x,
                    y=brick.y,
                    width=brick.width,
                    height=brick.height,
                    kind=brick.kind.value,
                    hits_left=None if brick.indestructible else int(brick.hits_left),
                    alive=brick.alive,
                    color=brick.color,
                )
                for brick in column
            )
            for column in state.board
        ),
        power_up=None if state.power_up is None else PowerUpView(
            kind=state.power_up.kind.value,
            x=state.power_up.x,
            y=state.power_up.y,
            radius=state.power_up.radius,
            color=state.power_up.color,
        ),
        particles=tuple(
            ParticleView(x=p.x, y=p.y, alpha=p.alpha, color=p.color)
            for p in state.particles
        ),
        active_effect=None if effect is None else EffectView(
            kind=effect.kind.value, remaining=effect.remaining,
        ),
        score=state.score,
        high_score=state.high_score,
        lives=state.lives,
        level=state.level,
        phase=state.phase,
        message=state.message,
    )
