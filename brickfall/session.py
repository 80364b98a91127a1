"""Brickfall game session controller.

Owns the SessionState, runs the phase state machine and exposes the
command surface the input layer calls:

    session = GameSession(store=JsonHighScoreStore("~/.brickfall.json"))
    session.subscribe(audio.on_event)
    session.start()
    while session.is_running:
        session.set_paddle_intent(PaddleIntent.LEFT)
        session.tick()
        skin.render(session.snapshot(), screen)

Events produced during a tick are dispatched to listeners after the tick
has finished, so a listener that calls a command never runs in the middle
of a step.
"""

import random
from typing import Callable, List, Optional

from brickfall.config import GameConfig
from brickfall.events import EventListener, GameEvent
from brickfall.game import SessionState, SimulationEngine
from brickfall.game.snapshot import FrameSnapshot, build_snapshot
from brickfall.game_state import GamePhase, PaddleIntent
from brickfall.logging import emit_record, get_logger
from brickfall.persistence import HighScoreStore, MemoryHighScoreStore

log = get_logger('session')

PAUSED_MESSAGE = "Game Paused"


class GameSession:
    """One player's game, from start() through restarts."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        store: Optional[HighScoreStore] = None,
        rng: Optional[random.Random] = None,
        audio=None,
    ):
        """Initialize session in the READY phase.

        Args:
            config: Game configuration (default: GameConfig())
            store: High-score store (default: in-memory)
            rng: Random source shared by board generation and drops
            audio: Optional audio collaborator with an `enabled` flag,
                   `on_event(event)` and `set_enabled(bool)`; subscribed
                   automatically
        """
        self._config = config or GameConfig()
        self._store = store if store is not None else MemoryHighScoreStore()
        self._engine = SimulationEngine(self._config, rng)
        self._state = SessionState.create(self._config)
        self._listeners: List[EventListener] = []
        self._audio = audio
        self._sound_enabled = audio.enabled if audio is not None else True

        if audio is not None:
            self.subscribe(audio.on_event)

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def state(self) -> SessionState:
        """Live state (for tests and tools; renderers should use snapshot())."""
        return self._state

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def high_score(self) -> int:
        return self._state.high_score

    @property
    def lives(self) -> int:
        return self._state.lives

    @property
    def level(self) -> int:
        return self._state.level

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def message(self) -> str:
        return self._state.message

    @property
    def final_score(self) -> Optional[int]:
        """Score at the last GAME_OVER/VICTORY, None while playing."""
        return self._state.final_score

    @property
    def sound_enabled(self) -> bool:
        return self._sound_enabled

    @property
    def is_running(self) -> bool:
        """False once the game has reached a terminal phase."""
        return not self._state.phase.is_terminal

    def snapshot(self) -> FrameSnapshot:
        """Frozen copy of everything a renderer needs."""
        return build_snapshot(self._state)

    # =========================================================================
    # Commands
    # =========================================================================

    def start(self) -> None:
        """Load the stored high score and begin level 1 (READY only)."""
        if self._state.phase != GamePhase.READY:
            return

        self._state.high_score = self._store.load_high_score()
        self._engine.new_game(self._state)
        log.info("Session started, high score %d", self._state.high_score)

    def restart(self) -> None:
        """Discard the current game and begin again at level 1.

        Allowed from any phase, including GAME_OVER and VICTORY.
        """
        if self._state.phase == GamePhase.READY:
            self.start()
            return

        self._engine.new_game(self._state)
        log.info("Session restarted")

    def toggle_pause(self) -> None:
        """Switch between PLAYING and PAUSED; ignored in other phases."""
        if self._state.phase == GamePhase.PLAYING:
            self._state.phase = GamePhase.PAUSED
            self._state.set_message(PAUSED_MESSAGE)
        elif self._state.phase == GamePhase.PAUSED:
            self.resume()

    def resume(self) -> None:
        """Leave PAUSED; ignored in other phases."""
        if self._state.phase != GamePhase.PAUSED:
            return
        self._state.phase = GamePhase.PLAYING
        self._state.set_message("")

    def set_paddle_intent(self, intent: PaddleIntent) -> None:
        """Latch the held direction for the next tick.

        A direction while PAUSED also resumes play. Ignored before start()
        and in terminal phases.
        """
        phase = self._state.phase
        if phase == GamePhase.READY or phase.is_terminal:
            return

        self._state.intent = intent
        if phase == GamePhase.PAUSED and intent != PaddleIntent.NONE:
            self.resume()

    def set_sound_enabled(self, enabled: bool) -> None:
        """Forward the sound toggle to the audio collaborator."""
        self._sound_enabled = enabled
        if self._audio is not None:
            self._audio.set_enabled(enabled)

    def subscribe(self, listener: EventListener) -> Callable[[], None]:
        """Register an event listener.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def tick(self) -> List[GameEvent]:
        """Advance the simulation by one fixed step.

        Returns:
            Events emitted during the step (already dispatched)
        """
        events = self._engine.tick(self._state)

        if self._state.new_high_score and self._state.phase.is_terminal:
            self._store.save_high_score(self._state.high_score)
            self._state.new_high_score = False
            log.info("New high score: %d", self._state.high_score)

        for event in events:
            self._dispatch(event)

        return events

    def _dispatch(self, event: GameEvent) -> None:
        emit_record('events', {'kind': event.kind.value, 'tick': event.tick, **event.data})
        for listener in list(self._listeners):
            listener(event)
