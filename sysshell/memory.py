"""Memory utilisation derived from /proc/meminfo."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_MEMINFO_PATH = "/proc/meminfo"

_KEYS = {
    "MemTotal:": "total",
    "MemFree:": "free",
    "Buffers:": "buffers",
    "Cached:": "cached",
    "MemAvailable:": "available",
}


@dataclass(frozen=True)
class MemoryInfo:
    """Memory figures in kB."""

    total: int = 0
    free: int = 0
    buffers: int = 0
    cached: int = 0
    available: int = 0

    def used_kb(self) -> int:
        """Memory in use, preferring MemAvailable when the kernel reports it."""
        if self.available > 0:
            return self.total - self.available
        return self.total - (self.free + self.buffers + self.cached)

    def usage_percent(self) -> float:
        if self.total == 0:
            raise ValueError("total memory is zero")
        return 100.0 * self.used_kb() / self.total


def parse_meminfo(text: str) -> MemoryInfo:
    """Extract the relevant fields from /proc/meminfo content."""
    values: dict[str, int] = {}
    for line in text.splitlines():
        tokens = line.split()
        if len(tokens) < 2 or tokens[0] not in _KEYS:
            continue
        try:
            values[_KEYS[tokens[0]]] = int(tokens[1])
        except ValueError:
            continue
    return MemoryInfo(**values)


def read_memory(path: str | Path = DEFAULT_MEMINFO_PATH) -> MemoryInfo:
    return parse_meminfo(Path(path).read_text())


def format_memory(info: MemoryInfo) -> str:
    used = info.used_kb()
    return (
        f"内存使用率: {info.usage_percent():.2f}% "
        f"({used / 1024.0:.2f}MB / {info.total / 1024.0:.2f}MB)"
    )