"""High-score stores.

The session loads the stored high score when it starts and saves a new
one when a game ends above it. Anything with `load_high_score()` and
`save_high_score(score)` can be used.
"""

import json
from pathlib import Path
from typing import Protocol, Union

from brickfall.logging import get_logger

log = get_logger('persistence')


class HighScoreStore(Protocol):
    """Interface the session uses for high-score persistence."""

    def load_high_score(self) -> int:
        ...

    def save_high_score(self, score: int) -> None:
        ...


class MemoryHighScoreStore:
    """Keeps the high score in memory (tests, --no-save runs)."""

    def __init__(self, initial: int = 0):
        self._score = initial
        self.save_count = 0

    def load_high_score(self) -> int:
        return self._score

    def save_high_score(self, score: int) -> None:
        self._score = score
        self.save_count += 1


class JsonHighScoreStore:
    """Stores the high score as `{"high_score": N}` in a JSON file.

    A missing file reads as 0. An unreadable or malformed file also reads
    as 0, with a warning. Write failures propagate.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path).expanduser()
        self.save_count = 0

    @property
    def path(self) -> Path:
        return self._path

    def load_high_score(self) -> int:
        if not self._path.exists():
            return 0

        try:
            with open(self._path, 'r') as f:
                data = json.load(f)
            score = int(data.get('high_score', 0))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            log.warning("Ignoring unreadable high score file %s: %s", self._path, e)
            return 0

        return max(score, 0)

    def save_high_score(self, score: int) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, 'w') as f:
            json.dump({'high_score': score}, f)
        self.save_count += 1
        log.info("High score %d saved to %s", score, self._path)
