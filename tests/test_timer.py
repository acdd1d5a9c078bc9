"""
Tests for elapsed-time timers.
"""

from invaders.timer import Timer


class TestTimer:

    def test_ready_after_duration(self):
        timer = Timer(0.5)
        timer.update(0.3)
        assert not timer.ready

        timer.update(0.3)
        assert timer.ready

    def test_reset_with_new_duration(self):
        timer = Timer(0.5)
        timer.update(1.0)
        timer.reset(2.0)

        assert timer.duration == 2.0
        assert timer.elapsed == 0.0
        assert not timer.ready

    def test_consume_counts_whole_periods_and_keeps_remainder(self):
        timer = Timer(0.05)
        timer.update(0.26)

        assert timer.consume() == 5
        assert 0.0 <= timer.elapsed < 0.05
        assert timer.consume() == 0

    def test_progress_is_clamped(self):
        timer = Timer(1.0)
        assert timer.progress == 0.0

        timer.update(0.25)
        assert timer.progress == 0.25

        timer.update(5.0)
        assert timer.progress == 1.0
