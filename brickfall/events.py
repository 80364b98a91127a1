"""
Brickfall Event Types

Discrete notifications emitted by the simulation engine. The audio skin,
the HUD and the structured event log all consume these. Events are
fire-and-forget: listeners never acknowledge them and cannot alter the
tick that produced them.
"""

from enum import Enum
from typing import Any, Callable, Dict

from pydantic import BaseModel, ConfigDict, Field


class EventKind(str, Enum):
    """Kinds of engine events."""
    WALL_BOUNCE = "wall_bounce"
    PADDLE_BOUNCE = "paddle_bounce"
    BRICK_DAMAGED = "brick_damaged"
    BRICK_DESTROYED = "brick_destroyed"
    INDESTRUCTIBLE_HIT = "indestructible_hit"
    LIFE_LOST = "life_lost"
    COMBO_BONUS = "combo_bonus"
    MULTIBALL = "multiball"
    POWER_UP_COLLECTED = "power_up_collected"
    LEVEL_UP = "level_up"
    GAME_OVER = "game_over"
    VICTORY = "victory"


class GameEvent(BaseModel):
    """
    One engine event.

    `tick` is the engine tick counter at emission time. `data` carries
    kind-specific details (e.g. `bonus` for COMBO_BONUS, `side` for
    WALL_BOUNCE, `power_up` for POWER_UP_COLLECTED).
    """
    model_config = ConfigDict(frozen=True)

    kind: EventKind
    tick: int = Field(default=0, ge=0, description="Engine tick when emitted")
    data: Dict[str, Any] = Field(default_factory=dict, description="Kind-specific details")

    def __str__(self) -> str:
        return f"GameEvent({self.kind.value}, t={self.tick}, {self.data})"


EventListener = Callable[[GameEvent], None]
