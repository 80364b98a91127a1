"""Configuration for Brickfall.

Contains display settings (from .env), the validated GameConfig model with
every tunable of the simulation, difficulty presets and the YAML loader.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

# Load .env from the working directory, then from the package directory
load_dotenv()
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display settings
FPS = _get_int('BRICKFALL_FPS', 60)
SCREEN_SCALE = _get_float('BRICKFALL_SCREEN_SCALE', 1.0)
CONFIG_FILE = os.getenv('BRICKFALL_CONFIG')
HIGHSCORE_FILE = os.getenv('BRICKFALL_HIGHSCORE_FILE')

Color = Tuple[int, int, int]

BACKGROUND_COLOR: Color = (17, 17, 17)
HUD_COLOR: Color = (255, 255, 255)
PADDLE_COLOR: Color = (52, 152, 219)
BALL_COLOR: Color = (231, 76, 60)

BRICK_PALETTE: Tuple[Color, ...] = (
    (230, 126, 34),
    (192, 57, 43),
    (142, 68, 173),
    (41, 128, 185),
    (39, 174, 96),
    (243, 156, 18),
)


class ConfigError(Exception):
    """Raised when a configuration file is missing or invalid."""
    pass


class GameConfig(BaseModel):
    """Every tunable constant of the simulation.

    Distances are pixels, speeds are pixels per tick and durations are
    ticks (one tick is one 16 ms step at the 60 Hz design point).
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    # Board
    board_width: float = Field(default=660.0, gt=0)
    board_height: float = Field(default=500.0, gt=0)
    base_rows: int = Field(default=4, ge=1)
    base_cols: int = Field(default=7, ge=1)
    growth_cap: int = Field(default=2, ge=0)
    brick_width: float = Field(default=60.0, gt=0)
    brick_height: float = Field(default=20.0, gt=0)
    brick_padding: float = Field(default=8.0, ge=0)
    brick_offset_top: float = Field(default=40.0, ge=0)
    brick_offset_left: float = Field(default=28.0, ge=0)
    indestructible_chance: float = Field(default=0.05, ge=0, le=1)
    multi_chance: float = Field(default=0.10, ge=0, le=1)
    multi_hits: int = Field(default=3, ge=2)

    # Paddle
    paddle_width: float = Field(default=80.0, gt=0)
    paddle_height: float = Field(default=10.0, gt=0)
    paddle_offset: float = Field(default=5.0, ge=0)
    paddle_speed: float = Field(default=7.0, gt=0)

    # Ball
    ball_radius: float = Field(default=8.0, gt=0)
    ball_speed_base: float = Field(default=3.0, gt=0)
    ball_speed_increment: float = Field(default=0.4, ge=0)
    ball_spawn_offset: float = Field(default=40.0, gt=0)
    max_balls: int = Field(default=4, ge=1)
    multiball_chance: float = Field(default=0.06, ge=0, le=1)

    # Power-ups
    power_up_chance: float = Field(default=0.12, ge=0, le=1)
    power_up_speed: float = Field(default=3.0, gt=0)
    power_up_radius: float = Field(default=12.0, gt=0)
    expand_factor: float = Field(default=1.5, gt=1)
    expand_ticks: int = Field(default=500, ge=1)
    slow_factor: float = Field(default=0.6, gt=0, lt=1)
    slow_ticks: int = Field(default=438, ge=1)

    # Combo
    combo_threshold: int = Field(default=4, ge=0)
    combo_window: int = Field(default=50, ge=1)
    combo_bonus: int = Field(default=5, ge=0)

    # Progression
    max_level: int = Field(default=6, ge=1)
    starting_lives: int = Field(default=3, ge=1)
    level_transition_ticks: int = Field(default=113, ge=1)
    message_ticks: int = Field(default=125, ge=1)

    # Particles
    particle_count: int = Field(default=8, ge=0)
    particle_fade: float = Field(default=0.03, gt=0)

    # Colors
    palette: Tuple[Color, ...] = BRICK_PALETTE
    multi_color: Color = (142, 68, 173)
    indestructible_color: Color = (85, 85, 85)
    damaged_color: Color = (221, 221, 221)
    expand_color: Color = (46, 204, 64)
    slow_color: Color = (0, 188, 212)
    life_color: Color = (255, 224, 102)

    @model_validator(mode='after')
    def validate_layout(self) -> 'GameConfig':
        """Ensure the paddle and kind probabilities fit."""
        if self.paddle_width * self.expand_factor > self.board_width:
            raise ValueError("expanded paddle is wider than the board")
        if self.indestructible_chance + self.multi_chance > 1:
            raise ValueError("indestructible_chance + multi_chance must not exceed 1")
        if not self.palette:
            raise ValueError("palette must contain at least one color")
        return self

    @property
    def paddle_top(self) -> float:
        """Y coordinate of the paddle's top edge."""
        return self.board_height - self.paddle_height - self.paddle_offset

    def ball_speed(self, level: int) -> float:
        """Ball speed for a level (pixels per tick)."""
        return self.ball_speed_base + (level - 1) * self.ball_speed_increment


@dataclass
class DifficultyPreset:
    """Difficulty adjustments applied on top of a GameConfig.

    - easy: slower ball, wider paddle, extra life
    - normal: the defaults
    - hard: faster ball, narrower paddle, fewer lives
    """

    name: str
    ball_speed_scale: float    # Multiplier on ball_speed_base
    paddle_width_scale: float  # Multiplier on paddle_width
    lives_delta: int           # Added to starting_lives


DIFFICULTY_PRESETS: Dict[str, DifficultyPreset] = {
    'easy': DifficultyPreset(
        name='easy',
        ball_speed_scale=0.8,
        paddle_width_scale=1.25,
        lives_delta=2,
    ),
    'normal': DifficultyPreset(
        name='normal',
        ball_speed_scale=1.0,
        paddle_width_scale=1.0,
        lives_delta=0,
    ),
    'hard': DifficultyPreset(
        name='hard',
        ball_speed_scale=1.3,
        paddle_width_scale=0.8,
        lives_delta=-1,
    ),
}


def get_difficulty_preset(name: str) -> DifficultyPreset:
    """Get difficulty preset by name, with fallback to normal."""
    return DIFFICULTY_PRESETS.get(name, DIFFICULTY_PRESETS['normal'])


def apply_difficulty(config: GameConfig, name: str) -> GameConfig:
    """Return a copy of config adjusted by the named difficulty preset."""
    preset = get_difficulty_preset(name)
    return config.model_copy(update={
        'ball_speed_base': config.ball_speed_base * preset.ball_speed_scale,
        'paddle_width': config.paddle_width * preset.paddle_width_scale,
        'starting_lives': max(1, config.starting_lives + preset.lives_delta),
    })


def load_game_config(path: Optional[Union[str, Path]] = None) -> GameConfig:
    """Load a GameConfig, applying YAML overrides on top of the defaults.

    Args:
        path: YAML file with any subset of GameConfig fields. None returns
              the defaults.

    Returns:
        Validated GameConfig

    Raises:
        ConfigError: If the file doesn't exist, isn't valid YAML, isn't a
                     mapping, or fails validation
    """
    if path is None:
        return GameConfig()

    yaml_path = Path(path)
    if not yaml_path.exists():
        raise ConfigError(f"Config file not found: {yaml_path}")

    try:
        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML file '{yaml_path}': {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{yaml_path}' must contain a mapping")

    try:
        return GameConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in '{yaml_path}':\n{e}") from e
