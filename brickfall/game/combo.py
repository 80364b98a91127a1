"""Combo tracking for consecutive brick destructions.

Each destruction bumps the combo count and reopens the window. The window
counts down one per tick; when it runs out the count drops to zero. Every
destruction that leaves the count above the threshold pays a one-time
bonus of `count * bonus_per_combo`.

Examples:
    >>> combo = ComboTracker(threshold=4, window=50, bonus_per_combo=5)
    >>> [combo.record_destruction() for _ in range(5)]
    [0, 0, 0, 0, 25]
    >>> combo.count
    5
"""


class ComboTracker:
    """Combo count and window countdown."""

    def __init__(self, threshold: int = 4, window: int = 50, bonus_per_combo: int = 5):
        """Initialize tracker.

        Args:
            threshold: Count that must be exceeded before bonuses pay
            window: Ticks allowed between destructions
            bonus_per_combo: Bonus points per combo step
        """
        self._threshold = threshold
        self._window = window
        self._bonus_per_combo = bonus_per_combo
        self._count = 0
        self._window_remaining = 0
        self._max_count = 0

    @property
    def count(self) -> int:
        """Current consecutive destructions."""
        return self._count

    @property
    def window_remaining(self) -> int:
        """Ticks left before the combo resets."""
        return self._window_remaining

    @property
    def max_count(self) -> int:
        """Longest combo since the last reset()."""
        return self._max_count

    def record_destruction(self) -> int:
        """Count a destroyed brick.

        Returns:
            Bonus points earned by this destruction (0 if none)
        """
        self._count += 1
        self._window_remaining = self._window
        self._max_count = max(self._max_count, self._count)

        if self._count > self._threshold:
            return self._count * self._bonus_per_combo
        return 0

    def tick(self) -> None:
        """Count the window down by one tick."""
        if self._window_remaining > 0:
            self._window_remaining -= 1
            if self._window_remaining == 0:
                self._count = 0

    def reset(self) -> None:
        """Clear the combo (new level or new game)."""
        self._count = 0
        self._window_remaining = 0
        self._max_count = 0
