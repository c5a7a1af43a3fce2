"""Periodic overview of CPU, memory, disk and network usage."""

from __future__ import annotations

import argparse
import itertools
import time
from pathlib import Path
from typing import Callable

from sysshell.cpu import CpuMonitor, format_cpu_usage
from sysshell.disk import format_disk_usage, read_disk_usage
from sysshell.memory import format_memory, read_memory
from sysshell.network import NetworkMonitor, format_traffic

HEADER = "\n===== 系统资源监视器 ====="
FOOTER = "========================="
_CLEAR_SCREEN = "\033[H\033[2J"


class SystemMonitor:
    """Collects one report of all resources per call, keeping state between calls."""

    def __init__(self, proc_root: str | Path = "/proc", mount_point: str = "/") -> None:
        root = Path(proc_root)
        self._meminfo_path = root / "meminfo"
        self._mount_point = mount_point
        self._cpu = CpuMonitor(root / "stat")
        self._network = NetworkMonitor(root / "net" / "dev")

    def report(self) -> str:
        sections = [
            self._section(self._cpu_line, f"无法读取{self._cpu.stat_path}"),
            self._section(
                lambda: format_memory(read_memory(self._meminfo_path)),
                f"无法读取{self._meminfo_path}",
            ),
            self._section(
                lambda: format_disk_usage(read_disk_usage(self._mount_point)),
                "无法执行df命令",
            ),
            self._section(
                lambda: format_traffic(self._network.sample()),
                f"无法读取 {self._network.dev_path} 文件",
            ),
        ]
        body = [section for section in sections if section]
        return "\n".join([HEADER, *body, FOOTER])

    def _cpu_line(self) -> str | None:
        usage = self._cpu.sample()
        return None if usage is None else format_cpu_usage(usage)

    @staticmethod
    def _section(producer: Callable[[], str | None], failure: str) -> str | None:
        try:
            return producer()
        except (OSError, ValueError) as exc:
            return f"{failure}: {exc}"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Display system resource usage.")
    parser.add_argument("--interval", type=float, default=1.0, help="seconds between updates")
    parser.add_argument("--count", type=int, default=None, help="number of updates, default forever")
    parser.add_argument("--proc-root", default="/proc", help="location of the proc filesystem")
    parser.add_argument("--mount-point", default="/", help="filesystem to report on")
    args = parser.parse_args(argv)

    monitor = SystemMonitor(args.proc_root, args.mount_point)
    rounds = itertools.count() if args.count is None else range(args.count)
    try:
        for index in rounds:
            if index:
                time.sleep(args.interval)
            print(_CLEAR_SCREEN, end="")
            print(monitor.report(), flush=True)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())