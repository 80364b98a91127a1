"""Brickfall skins for rendering and audio."""

from .base import BrickfallSkin
from .geometric import GeometricSkin
from .audio import ToneAudio, Tone, tone_for, synthesize

__all__ = [
    'BrickfallSkin',
    'GeometricSkin',
    'ToneAudio',
    'Tone',
    'tone_for',
    'synthesize',
]
