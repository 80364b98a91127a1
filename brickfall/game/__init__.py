"""Brickfall simulation core: entities, collision, board, engine."""

from .board import generate_board, grid_dimensions, check_win, iter_bricks
from .combo import ComboTracker
from .effects import ActiveEffect, EffectTimer
from .engine import SimulationEngine
from .state import SessionState

__all__ = [
    'generate_board',
    'grid_dimensions',
    'check_win',
    'iter_bricks',
    'ComboTracker',
    'ActiveEffect',
    'EffectTimer',
    'SimulationEngine',
    'SessionState',
]
