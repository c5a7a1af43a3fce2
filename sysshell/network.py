"""Network traffic totals derived from /proc/net/dev."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DEV_PATH = "/proc/net/dev"
LOOPBACK = "lo"

_MB = 1024.0 * 1024.0


@dataclass(frozen=True)
class InterfaceTraffic:
    """Cumulative byte counters of one interface."""

    name: str
    rx_bytes: int
    tx_bytes: int


@dataclass(frozen=True)
class TrafficReport:
    """Totals over non-loopback interfaces and their growth since the last report."""

    interfaces: list[InterfaceTraffic] = field(default_factory=list)
    total_rx: int = 0
    total_tx: int = 0
    rx_delta: int = 0
    tx_delta: int = 0


def parse_net_dev(text: str) -> list[InterfaceTraffic]:
    """Parse /proc/net/dev content, skipping its two header lines."""
    interfaces = []
    for line in text.splitlines()[2:]:
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        fields = rest.split()
        if len(fields) < 9:
            continue
        try:
            rx_bytes, tx_bytes = int(fields[0]), int(fields[8])
        except ValueError:
            continue
        interfaces.append(InterfaceTraffic(name.strip(), rx_bytes, tx_bytes))
    return interfaces


class NetworkMonitor:
    """Tracks overall traffic between successive samples."""

    def __init__(self, dev_path: str | Path = DEFAULT_DEV_PATH) -> None:
        self.dev_path = Path(dev_path)
        self._previous_rx = 0
        self._previous_tx = 0

    def update(self, interfaces) -> TrafficReport:
        """Summarise the interfaces, excluding loopback, against the last totals."""
        counted = [iface for iface in interfaces if iface.name != LOOPBACK]
        total_rx = sum(iface.rx_bytes for iface in counted)
        total_tx = sum(iface.tx_bytes for iface in counted)
        rx_delta = _delta(self._previous_rx, total_rx)
        tx_delta = _delta(self._previous_tx, total_tx)
        self._previous_rx, self._previous_tx = total_rx, total_tx
        return TrafficReport(counted, total_rx, total_tx, rx_delta, tx_delta)

    def sample(self) -> TrafficReport:
        return self.update(parse_net_dev(self.dev_path.read_text()))


def _delta(previous: int, current: int) -> int:
    # A first reading or a counter reset yields no meaningful increment.
    difference = current - previous
    if previous == 0 or difference < 0:
        return 0
    return difference


def format_traffic(report: TrafficReport) -> str:
    lines = []
    for iface in report.interfaces:
        lines.append(f"网络接口 {iface.name}:")
        lines.append(f"  当前下载流量: {iface.rx_bytes / _MB:.2f}MB")
        lines.append(f"  当前上传流量: {iface.tx_bytes / _MB:.2f}MB")
    lines.append("--- 整体网络流量 ---")
    lines.append(
        f"  总下载流量: {report.total_rx / _MB:.2f}MB (增量: {report.rx_delta / _MB:.2f}MB)"
    )
    lines.append(
        f"  总上传流量: {report.total_tx / _MB:.2f}MB (增量: {report.tx_delta / _MB:.2f}MB)"
    )
    return "\n".join(lines)