#!/usr/bin/env python3
"""Brickfall - Standalone Entry Point.

Usage:
    python -m brickfall.main
    python -m brickfall.main --difficulty hard
    python -m brickfall.main --config my_tuning.yaml --seed 42
"""

import argparse
import random
import sys
from pathlib import Path
from typing import Optional

import pygame

from brickfall.config import (
    CONFIG_FILE,
    DIFFICULTY_PRESETS,
    FPS,
    HIGHSCORE_FILE,
    SCREEN_SCALE,
    ConfigError,
    apply_difficulty,
    load_game_config,
)
from brickfall.game_state import GamePhase, PaddleIntent
from brickfall.logging import close_all_sinks, configure_logging, create_sink, register_sink
from brickfall.persistence import JsonHighScoreStore, MemoryHighScoreStore
from brickfall.session import GameSession
from brickfall.skins import GeometricSkin, ToneAudio

DEFAULT_HIGHSCORE_FILE = Path.home() / '.brickfall' / 'highscore.json'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Brickfall - brick-breaking arcade game")

    parser.add_argument('--config', type=str, default=CONFIG_FILE,
                        help='YAML file overriding game constants')
    parser.add_argument('--difficulty', type=str, default='normal',
                        choices=sorted(DIFFICULTY_PRESETS),
                        help='Difficulty preset')
    parser.add_argument('--lives', type=int, default=None, help='Starting lives')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--mute', action='store_true', help='Start with sound off')
    parser.add_argument('--highscore-file', type=str,
                        default=HIGHSCORE_FILE or str(DEFAULT_HIGHSCORE_FILE),
                        help='Where the high score is kept')
    parser.add_argument('--no-save', action='store_true',
                        help="Don't read or write the high score file")
    parser.add_argument('--log-level', type=str, default=None,
                        help='Default log level (TRACE, DEBUG, INFO, ...)')

    return parser


def _intent_from_keys(left: bool, right: bool) -> PaddleIntent:
    if left and not right:
        return PaddleIntent.LEFT
    if right and not left:
        return PaddleIntent.RIGHT
    return PaddleIntent.NONE


def main(argv: Optional[list] = None) -> int:
    """Run Brickfall standalone."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        config = load_game_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    config = apply_difficulty(config, args.difficulty)
    if args.lives is not None:
        config = config.model_copy(update={'starting_lives': max(1, args.lives)})

    store = MemoryHighScoreStore() if args.no_save else JsonHighScoreStore(args.highscore_file)
    register_sink('events', create_sink('events'))

    pygame.init()
    skin = GeometricSkin(config.board_width, config.board_height)
    width, height = skin.screen_size
    display = pygame.display.set_mode((int(width * SCREEN_SCALE), int(height * SCREEN_SCALE)))
    frame = pygame.Surface((width, height)) if SCREEN_SCALE != 1.0 else display
    pygame.display.set_caption("Brickfall")

    audio = ToneAudio(enabled=not args.mute)
    rng = random.Random(args.seed) if args.seed is not None else None
    session = GameSession(config=config, store=store, rng=rng, audio=audio)
    session.start()

    print("\n" + "=" * 50)
    print("BRICKFALL")
    print("=" * 50)
    print("Controls:")
    print("  - Left/Right arrows move the paddle")
    print("  - P to pause, click to resume")
    print("  - R to restart, M to toggle sound")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    clock = pygame.time.Clock()
    left_held = right_held = False
    running = True

    try:
        while running:
            clock.tick(FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in (pygame.K_LEFT, pygame.K_RIGHT):
                        if event.key == pygame.K_LEFT:
                            left_held = True
                        else:
                            right_held = True
                        # A fresh arrow press also resumes after a lost ball
                        session.set_paddle_intent(_intent_from_keys(left_held, right_held))
                    elif event.key == pygame.K_p:
                        session.toggle_pause()
                    elif event.key == pygame.K_r:
                        left_held = right_held = False
                        session.restart()
                    elif event.key == pygame.K_m:
                        session.set_sound_enabled(not session.sound_enabled)
                elif event.type == pygame.KEYUP:
                    if event.key == pygame.K_LEFT:
                        left_held = False
                    elif event.key == pygame.K_RIGHT:
                        right_held = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if session.phase == GamePhase.PAUSED:
                        session.resume()

            intent = _intent_from_keys(left_held, right_held)
            if intent != session.state.intent:
                session.set_paddle_intent(intent)

            session.tick()

            skin.render(session.snapshot(), frame)
            if frame is not display:
                pygame.transform.scale(frame, display.get_size(), display)
            pygame.display.flip()
    finally:
        close_all_sinks()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
