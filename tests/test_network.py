import pytest

from sysshell.network import (
    InterfaceTraffic,
    NetworkMonitor,
    TrafficReport,
    format_traffic,
    parse_net_dev,
)

HEADER = (
    "Inter-|   Receive                                                |  Transmit\n"
    " face |bytes    packets errs drop fifo frame compressed multicast|"
    "bytes    packets errs drop fifo colls carrier compressed\n"
)


def dev_text(rows):
    body = "".join(
        f"{name}: {rx} 10 0 0 0 0 0 3 {tx} 20 0 0 0 0 0 0\n" for name, rx, tx in rows
    )
    return HEADER + body


def test_parse_reads_rx_and_tx():
    text = dev_text([("lo", 500, 500), ("eth0", 123456, 654321)])
    assert parse_net_dev(text) == [
        InterfaceTraffic("lo", 500, 500),
        InterfaceTraffic("eth0", 123456, 654321),
    ]


def test_parse_handles_name_joined_to_counter():
    text = HEADER + "  eth1:99999 1 0 0 0 0 0 0 4242 1 0 0 0 0 0 0\n"
    assert parse_net_dev(text) == [InterfaceTraffic("eth1", 99999, 4242)]


def test_parse_skips_short_and_header_lines():
    text = HEADER + "eth0: 1 2 3\nnot an interface line\n"
    assert parse_net_dev(text) == []


def test_first_update_excludes_loopback_and_has_no_delta():
    rx, tx = 2048, 4096
    monitor = NetworkMonitor()
    report = monitor.update([InterfaceTraffic("lo", 7, 7), InterfaceTraffic("eth0", rx, tx)])
    assert [iface.name for iface in report.interfaces] == ["eth0"]
    assert (report.total_rx, report.total_tx) == (rx, tx)
    assert (report.rx_delta, report.tx_delta) == (0, 0)


def test_second_update_reports_growth():
    monitor = NetworkMonitor()
    monitor.update([InterfaceTraffic("eth0", 1000, 2000)])
    report = monitor.update([InterfaceTraffic("eth0", 1500, 2600)])
    assert report.rx_delta == report.total_rx - 1000
    assert report.tx_delta == report.total_tx - 2000


def test_counter_reset_gives_zero_delta():
    monitor = NetworkMonitor()
    monitor.update([InterfaceTraffic("eth0", 5000, 5000)])
    report = monitor.update([InterfaceTraffic("eth0", 100, 100)])
    assert (report.rx_delta, report.tx_delta) == (0, 0)


def test_totals_cover_every_counted_interface():
    interfaces = [InterfaceTraffic("eth0", 10, 20), InterfaceTraffic("wlan0", 30, 40)]
    report = NetworkMonitor().update(interfaces)
    assert report.total_rx == sum(i.rx_bytes for i in report.interfaces)
    assert len(report.interfaces) == len(interfaces)


def test_sample_reads_file(tmp_path):
    path = tmp_path / "dev"
    path.write_text(dev_text([("eth0", 3000, 4000)]))
    monitor = NetworkMonitor(path)
    monitor.sample()
    path.write_text(dev_text([("eth0", 3500, 4000)]))
    report = monitor.sample()
    assert report.total_rx == 3500
    assert report.rx_delta == 3500 - 3000


def test_sample_missing_file(tmp_path):
    with pytest.raises(OSError):
        NetworkMonitor(tmp_path / "missing").sample()


def test_format_traffic_lines():
    report = TrafficReport([InterfaceTraffic("eth0", 1048576, 0)], 1048576, 0, 0, 0)
    lines = format_traffic(report).splitlines()
    assert lines[0] == "网络接口 eth0:"
    assert lines[1] == "  当前下载流量: 1.00MB"
    assert lines[3] == "--- 整体网络流量 ---"
    assert len(lines) == 6