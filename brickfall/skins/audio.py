"""
Tone-based audio feedback for Brickfall.

Each engine event maps to a short synthesized beep (frequency, duration,
waveform). Tones are generated with numpy and played through
pygame.mixer. If the mixer can't start, audio disables itself and events
are ignored.

Classes:
    Tone: One beep description
    ToneAudio: Event listener that plays tones
"""

from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np
import pygame

from brickfall.events import EventKind, GameEvent
from brickfall.logging import get_logger

log = get_logger('audio')

SAMPLE_RATE = 22050
VOLUME = 0.12


@dataclass(frozen=True)
class Tone:
    """A beep: frequency in Hz, duration in ms, waveform name."""
    frequency: float
    duration_ms: int
    waveform: str = 'square'


TONES: Dict[EventKind, Tone] = {
    EventKind.WALL_BOUNCE: Tone(600, 80),
    EventKind.PADDLE_BOUNCE: Tone(440, 60),
    EventKind.BRICK_DAMAGED: Tone(700, 50),
    EventKind.BRICK_DESTROYED: Tone(900, 60),
    EventKind.INDESTRUCTIBLE_HIT: Tone(100, 90),
    EventKind.LIFE_LOST: Tone(220, 120, 'triangle'),
    EventKind.COMBO_BONUS: Tone(1500, 180, 'triangle'),
    EventKind.MULTIBALL: Tone(1200, 120, 'sine'),
    EventKind.POWER_UP_COLLECTED: Tone(1200, 120, 'sine'),
    EventKind.LEVEL_UP: Tone(1000, 200, 'triangle'),
    EventKind.GAME_OVER: Tone(160, 400, 'triangle'),
    EventKind.VICTORY: Tone(1000, 200, 'triangle'),
}

CEILING_TONE = Tone(800, 70)


def tone_for(event: GameEvent) -> Optional[Tone]:
    """Pick the tone for an event (None if the event is silent)."""
    if event.kind == EventKind.WALL_BOUNCE and event.data.get('side') == 'top':
        return CEILING_TONE
    return TONES.get(event.kind)


def synthesize(tone: Tone, sample_rate: int = SAMPLE_RATE, volume: float = VOLUME) -> np.ndarray:
    """Render a tone to 16-bit stereo samples.

    Args:
        tone: Tone to render
        sample_rate: Samples per second
        volume: Peak amplitude (0-1)

    Returns:
        int16 array of shape (samples, 2)

    Raises:
        ValueError: If the waveform is unknown
    """
    num_samples = max(1, int(sample_rate * tone.duration_ms / 1000))
    t = np.arange(num_samples) / sample_rate
    phase = (tone.frequency * t) % 1.0

    if tone.waveform == 'sine':
        wave = np.sin(2.0 * np.pi * phase)
    elif tone.waveform == 'square':
        wave = np.where(phase < 0.5, 1.0, -1.0)
    elif tone.waveform == 'triangle':
        wave = 4.0 * np.abs(phase - 0.5) - 1.0
    else:
        raise ValueError(f"Unknown waveform: {tone.waveform}")

    # Short fade-out so beeps don't click
    fade_samples = max(1, num_samples // 10)
    wave[-fade_samples:] *= np.linspace(1, 0, fade_samples)

    samples = (wave * 32767 * volume).astype(np.int16)
    return np.column_stack((samples, samples))


class ToneAudio:
    """Plays a beep for every engine event while enabled.

    Attributes:
        enabled: Sound toggle (the player's on/off switch)
        available: Whether the mixer started
    """

    def __init__(self, enabled: bool = True, init_mixer: bool = True):
        """Initialize audio.

        Args:
            enabled: Initial sound toggle
            init_mixer: Start pygame.mixer now (False for headless use)
        """
        self.enabled = enabled
        self.available = False
        self._sounds: Dict[Tone, pygame.mixer.Sound] = {}

        if init_mixer:
            self._init_audio()

    def _init_audio(self) -> None:
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            log.warning("Audio initialization failed, sound disabled: %s", e)
            return
        self.available = True

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled
        log.debug("Sound %s", "on" if enabled else "off")

    def _sound(self, tone: Tone) -> pygame.mixer.Sound:
        if tone not in self._sounds:
            self._sounds[tone] = pygame.sndarray.make_sound(synthesize(tone))
        return self._sounds[tone]

    def on_event(self, event: GameEvent) -> None:
        """Play the tone for an event (no-op when muted or unavailable)."""
        if not (self.enabled and self.available):
            return

        tone = tone_for(event)
        if tone is not None:
            self._sound(tone).play()
