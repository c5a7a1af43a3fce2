"""CPU utilisation derived from the aggregate line of /proc/stat."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_STAT_PATH = "/proc/stat"


@dataclass(frozen=True)
class CpuTimes:
    """Cumulative CPU time counters, in clock ticks."""

    user: int
    nice: int
    system: int
    idle: int

    @property
    def total(self) -> int:
        return self.user + self.nice + self.system + self.idle


_ZERO = CpuTimes(0, 0, 0, 0)


def parse_cpu_times(text: str) -> CpuTimes:
    """Parse the first ``cpu`` line of /proc/stat content."""
    first_line = text.splitlines()[0] if text else ""
    tokens = first_line.split()
    if len(tokens) < 5 or tokens[0] != "cpu":
        raise ValueError(f"not an aggregate cpu line: {first_line!r}")
    try:
        user, nice, system, idle = (int(token) for token in tokens[1:5])
    except ValueError as exc:
        raise ValueError(f"malformed cpu counters: {first_line!r}") from exc
    return CpuTimes(user, nice, system, idle)


class CpuMonitor:
    """Tracks CPU usage between successive samples."""

    def __init__(self, stat_path: str | Path = DEFAULT_STAT_PATH) -> None:
        self.stat_path = Path(stat_path)
        self._previous = _ZERO

    def update(self, times: CpuTimes) -> float | None:
        """Record new counters and return usage in percent since the last ones.

        Returns None when no time has elapsed between the two readings.
        """
        previous, self._previous = self._previous, times
        total_diff = times.total - previous.total
        if total_diff == 0:
            return None
        idle_diff = times.idle - previous.idle
        return 100.0 * (total_diff - idle_diff) / total_diff

    def sample(self) -> float | None:
        """Read the stat file and update the monitor with it."""
        return self.update(parse_cpu_times(self.stat_path.read_text()))


def format_cpu_usage(usage: float) -> str:
    return f"CPU使用率: {usage:.2f}%"