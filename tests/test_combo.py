"""
Tests for the combo tracker.
"""

from brickfall.game.combo import ComboTracker


class TestComboBonus:
    """Test bonus payout."""

    def test_no_bonus_up_to_threshold(self):
        combo = ComboTracker(threshold=4, window=50, bonus_per_combo=5)
        assert [combo.record_destruction() for _ in range(4)] == [0, 0, 0, 0]

    def test_fifth_destruction_pays_25(self):
        """Test the bonus is count * 5 once the count exceeds 4."""
        combo = ComboTracker(threshold=4, window=50, bonus_per_combo=5)
        bonuses = [combo.record_destruction() for _ in range(7)]
        assert bonuses == [0, 0, 0, 0, 25, 30, 35]
        assert combo.count == 7
        assert combo.max_count == 7


class TestComboWindow:
    """Test the window countdown."""

    def test_window_reopens_on_destruction(self):
        combo = ComboTracker(window=50)
        combo.record_destruction()
        for _ in range(30):
            combo.tick()
        assert combo.window_remaining == 20

        combo.record_destruction()
        assert combo.window_remaining == 50
        assert combo.count == 2

    def test_window_expiry_resets_count(self):
        """Test the count drops to zero after 50 idle ticks."""
        combo = ComboTracker(window=50)
        combo.record_destruction()
        combo.record_destruction()

        for _ in range(49):
            combo.tick()
        assert combo.count == 2

        combo.tick()
        assert combo.count == 0
        assert combo.max_count == 2

    def test_tick_without_combo(self):
        combo = ComboTracker()
        combo.tick()
        assert combo.count == 0
        assert combo.window_remaining == 0

    def test_reset(self):
        combo = ComboTracker()
        for _ in range(6):
            combo.record_destruction()
        combo.reset()
        assert combo.count == 0
        assert combo.window_remaining == 0
        assert combo.max_count == 0
        assert combo.record_destruction() == 0
