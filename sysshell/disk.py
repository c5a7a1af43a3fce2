"""Disk utilisation of a mount point as reported by df."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass


@dataclass(frozen=True)
class DiskUsage:
    """Filesystem figures in 1K blocks."""

    blocks: int
    used: int
    available: int

    def used_percent(self) -> float:
        if self.blocks == 0:
            raise ValueError("filesystem has no blocks")
        return self.used / self.blocks * 100.0


def parse_df_output(text: str) -> DiskUsage:
    """Take size, used and available from the last line of df output."""
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("empty df output")
    fields = lines[-1].split()
    if len(fields) < 4:
        raise ValueError(f"malformed df line: {lines[-1]!r}")
    try:
        blocks, used, available = (int(field) for field in fields[1:4])
    except ValueError as exc:
        raise ValueError(f"malformed df line: {lines[-1]!r}") from exc
    return DiskUsage(blocks, used, available)


def read_disk_usage(mount_point: str = "/") -> DiskUsage:
    """Run df for the mount point and parse its report."""
    result = subprocess.run(
        ["df", "-P", "-k", mount_point],
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        raise OSError(result.stderr.strip() or f"df exited with {result.returncode}")
    return parse_df_output(result.stdout)


def format_disk_usage(usage: DiskUsage) -> str:
    return (
        f"磁盘使用率: {usage.used_percent():.2f}% "
        f"({usage.used / 1024.0:.2f}MB / {usage.blocks / 1024.0:.2f}MB)"
    )