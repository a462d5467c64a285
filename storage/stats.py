"""
Request latency statistics.
"""
import threading

from model import StatsSnapshot


class StatsAggregator:
    """Collects per-submission processing durations in microseconds."""

    def __init__(self):
        self._lock = threading.Lock()
        self._durations: list[int] = []

    def record(self, duration_micros: int) -> None:
        with self._lock:
            self._durations.append(duration_micros)

    def snapshot(self) -> StatsSnapshot:
        """Return the request count and the truncated mean duration."""
        with self._lock:
            total = len(self._durations)
            total_time = sum(self._durations)

        average = 0
        if total:
            # Truncate toward zero
            average = abs(total_time) // total
            if total_time < 0:
                average = -average
        return StatsSnapshot(total=total, average=average)
