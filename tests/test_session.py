"""
Tests for the GameSession controller.

Covers the command surface, phase transitions, event dispatch and
high-score persistence.
"""

import random

import pytest
from pydantic import ValidationError

from brickfall.config import GameConfig
from brickfall.events import EventKind
from brickfall.game.engine import RESUME_PROMPT
from brickfall.game.entities import Ball
from brickfall.game_state import GamePhase, PaddleIntent
from brickfall.persistence import MemoryHighScoreStore
from brickfall.session import PAUSED_MESSAGE, GameSession


class FakeAudio:
    """Records what the session sends to the audio collaborator."""

    def __init__(self):
        self.events = []
        self.enabled = True

    def on_event(self, event):
        self.events.append(event)

    def set_enabled(self, enabled):
        self.enabled = enabled


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def session(config, store):
    return GameSession(config=config, store=store, rng=random.Random(7))


def drop_ball(session):
    """Put the only ball just above the bottom edge, away from the paddle."""
    session.state.balls = [Ball(100, 495, dx=0, dy=3)]


class TestStart:
    """Test starting and restarting."""

    def test_created_ready(self, session):
        assert session.phase == GamePhase.READY
        assert session.is_running

    def test_start(self, config, store):
        store.save_high_score(40)
        session = GameSession(config=config, store=store)
        session.start()

        assert session.phase == GamePhase.PLAYING
        assert session.high_score == 40
        assert session.lives == 3
        assert session.level == 1
        assert session.score == 0

    def test_start_only_once(self, session):
        session.start()
        session.state.score = 9
        session.start()
        assert session.score == 9

    def test_restart_from_game_over(self, session):
        """Test restart resets score, lives and level after a loss."""
        session.start()
        session.state.lives = 1
        session.state.score = 5
        drop_ball(session)
        session.tick()
        assert session.phase == GamePhase.GAME_OVER

        session.restart()

        assert session.phase == GamePhase.PLAYING
        assert session.score == 0
        assert session.lives == 3
        assert session.level == 1
        assert session.final_score is None
        assert session.high_score == 5

    def test_restart_before_start_starts(self, session):
        session.restart()
        assert session.phase == GamePhase.PLAYING


class TestPause:
    """Test pause, resume and paddle intents."""

    def test_toggle_pause(self, session):
        session.start()
        session.toggle_pause()
        assert session.phase == GamePhase.PAUSED
        assert session.message == PAUSED_MESSAGE

        session.toggle_pause()
        assert session.phase == GamePhase.PLAYING
        assert session.message == ""

    def test_pause_ignored_before_start(self, session):
        session.toggle_pause()
        assert session.phase == GamePhase.READY

    def test_pause_ignored_when_terminal(self, session):
        session.start()
        session.state.lives = 1
        drop_ball(session)
        session.tick()
        session.toggle_pause()
        assert session.phase == GamePhase.GAME_OVER

    def test_intent_resumes_after_lost_ball(self, session):
        """Test an arrow key after a lost life resumes play."""
        session.start()
        drop_ball(session)
        session.tick()
        assert session.phase == GamePhase.PAUSED
        assert session.message == RESUME_PROMPT

        session.set_paddle_intent(PaddleIntent.RIGHT)

        assert session.phase == GamePhase.PLAYING
        assert session.message == ""

    def test_intent_none_does_not_resume(self, session):
        session.start()
        session.toggle_pause()
        session.set_paddle_intent(PaddleIntent.NONE)
        assert session.phase == GamePhase.PAUSED

    def test_intent_ignored_before_start(self, session):
        session.set_paddle_intent(PaddleIntent.LEFT)
        assert session.state.intent == PaddleIntent.NONE

    def test_intent_moves_paddle(self, session):
        session.start()
        x = session.state.paddle.x
        session.set_paddle_intent(PaddleIntent.LEFT)
        session.tick()
        session.tick()
        assert session.state.paddle.x == x - 14


class TestGameOver:
    """Test the three-lives-lost flow."""

    def test_three_lives_lost(self, session):
        session.start()
        for expected_lives in (2, 1):
            drop_ball(session)
            session.tick()
            assert session.lives == expected_lives
            assert session.phase == GamePhase.PAUSED
            session.resume()

        session.state.score = 7
        drop_ball(session)
        session.tick()

        assert session.phase == GamePhase.GAME_OVER
        assert session.message == "Game Over! Final Score: 7"
        assert session.final_score == 7
        assert not session.is_running


class TestHighScore:
    """Test high-score persistence."""

    def test_saved_once_when_beaten(self, session, store):
        session.start()
        session.state.lives = 1
        session.state.score = 10
        drop_ball(session)
        session.tick()
        session.tick()
        session.tick()

        assert store.save_count == 1
        assert store.load_high_score() == 10
        assert session.high_score == 10

    def test_not_saved_when_not_beaten(self, config):
        store = MemoryHighScoreStore(50)
        session = GameSession(config=config, store=store)
        session.start()
        session.state.lives = 1
        session.state.score = 10
        drop_ball(session)
        session.tick()

        assert store.save_count == 0
        assert session.high_score == 50

    def test_saved_on_victory(self, session, store, brick_factory, ball_in, config):
        session.start()
        state = session.state
        state.level = config.max_level
        target = brick_factory(0, 0)
        state.board = [[target]]
        state.balls = [ball_in(target)]
        session.tick()

        assert session.phase == GamePhase.VICTORY
        assert store.save_count == 1
        assert store.load_high_score() == 1


class TestEvents:
    """Test listener dispatch."""

    def test_listener_receives_events(self, session):
        received = []
        session.subscribe(received.append)
        session.start()
        drop_ball(session)

        events = session.tick()

        assert [e.kind for e in received] == [EventKind.LIFE_LOST]
        assert received == events

    def test_unsubscribe(self, session):
        received = []
        unsubscribe = session.subscribe(received.append)
        unsubscribe()
        session.start()
        drop_ball(session)
        session.tick()
        assert received == []

    def test_listener_command_runs_after_tick(self, session):
        """Test a listener may issue commands once the step has finished."""
        session.subscribe(lambda event: session.toggle_pause())
        session.start()
        session.state.balls = [Ball(10, 300, dx=-3, dy=-3)]

        session.tick()

        assert session.phase == GamePhase.PAUSED
        assert session.state.balls[0].x == 8


class TestSoundAndSnapshot:
    """Test the audio collaborator and frozen snapshots."""

    def test_audio_subscribed(self, config):
        audio = FakeAudio()
        session = GameSession(config=config, audio=audio)
        session.start()
        drop_ball(session)
        session.tick()
        assert [e.kind for e in audio.events] == [EventKind.LIFE_LOST]

    def test_sound_toggle_forwarded(self, config):
        audio = FakeAudio()
        session = GameSession(config=config, audio=audio)
        session.set_sound_enabled(False)
        assert not audio.enabled
        assert not session.sound_enabled

    def test_sound_flag_follows_muted_audio(self, config):
        audio = FakeAudio()
        audio.enabled = False
        session = GameSession(config=config, audio=audio)
        assert not session.sound_enabled

    def test_snapshot_contents(self, session):
        session.start()
        snap = session.snapshot()

        assert snap.phase == GamePhase.PLAYING
        assert snap.lives == 3
        assert len(snap.balls) == 1
        assert len(snap.bricks) == 7
        assert snap.paddle.width == 80
        assert len(snap.alive_bricks()) == 28

    def test_snapshot_is_frozen(self, session):
        session.start()
        snap = session.snapshot()
        with pytest.raises(ValidationError):
            snap.score = 100

    def test_snapshot_indestructible_hits(self):
        config = GameConfig(indestructible_chance=1.0, multi_chance=0.0,
                            multiball_chance=0.0, power_up_chance=0.0)
        session = GameSession(config=config)
        session.start()
        brick = session.snapshot().bricks[0][0]
        assert brick.kind == 'indestructible'
        assert brick.hits_left is None
