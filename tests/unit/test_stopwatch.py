"""
Unit tests for Stopwatch.
"""
from minswpr import Stopwatch


class TestStopwatch:
    """Test elapsed time tracking."""

    def test_new_stopwatch_reads_zero(self, clock) -> None:
        """A stopwatch that never started reads zero."""
        stopwatch = Stopwatch(clock)
        clock.advance(5)
        assert stopwatch.elapsed == 0.0
        assert stopwatch.is_running is False

    def test_elapsed_while_running(self, clock) -> None:
        """Elapsed time follows the clock while running."""
        stopwatch = Stopwatch(clock)
        stopwatch.start()
        clock.advance(3.5)
        assert stopwatch.elapsed == 3.5
        assert stopwatch.is_running is True

    def test_stop_freezes_elapsed(self, clock) -> None:
        """Stopping keeps the elapsed time fixed."""
        stopwatch = Stopwatch(clock)
        stopwatch.start()
        clock.advance(2)
        stopwatch.stop()
        clock.advance(10)
        assert stopwatch.elapsed == 2
        assert stopwatch.is_running is False

    def test_restart_begins_from_zero(self, clock) -> None:
        """Starting again discards the previous time."""
        stopwatch = Stopwatch(clock)
        stopwatch.start()
        clock.advance(2)
        stopwatch.stop()
        stopwatch.start()
        clock.advance(1)
        assert stopwatch.elapsed == 1

    def test_reset_clears(self, clock) -> None:
        """Reset returns to zero and stops."""
        stopwatch = Stopwatch(clock)
        stopwatch.start()
        clock.advance(4)
        stopwatch.reset()
        assert stopwatch.elapsed == 0.0
        assert stopwatch.is_running is False
