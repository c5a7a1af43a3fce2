import subprocess
from unittest.mock import patch

import pytest

from sysshell.disk import DiskUsage, format_disk_usage, parse_df_output, read_disk_usage

DF_OUTPUT = """Filesystem     1024-blocks     Used Available Capacity Mounted on
/dev/sda1         41152736 20576368  18462808      53% /
"""


def test_parse_takes_last_line():
    assert parse_df_output(DF_OUTPUT) == DiskUsage(41152736, 20576368, 18462808)


@pytest.mark.parametrize(
    "text",
    ["", "Filesystem 1024-blocks Used Available Capacity Mounted on\n", "a 1 2\n"],
)
def test_parse_rejects_bad_output(text):
    with pytest.raises(ValueError):
        parse_df_output(text)


def test_full_disk_is_hundred_percent():
    assert DiskUsage(1000, 1000, 0).used_percent() == 100.0


def test_empty_disk_is_zero_percent():
    assert DiskUsage(1000, 0, 1000).used_percent() == 0.0


def test_zero_blocks_raises():
    with pytest.raises(ValueError):
        DiskUsage(0, 0, 0).used_percent()


def test_format_disk_usage():
    assert format_disk_usage(DiskUsage(2048, 1024, 1024)) == "磁盘使用率: 50.00% (1.00MB / 2.00MB)"


def test_read_disk_usage_runs_df():
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout=DF_OUTPUT, stderr="")
    with patch("sysshell.disk.subprocess.run", return_value=completed) as run:
        usage = read_disk_usage("/data")
    assert usage == parse_df_output(DF_OUTPUT)
    assert run.call_args.args[0][-1] == "/data"


def test_read_disk_usage_failure_raises():
    completed = subprocess.CompletedProcess(
        args=[], returncode=1, stdout="", stderr="df: /nowhere: No such file or directory"
    )
    with patch("sysshell.disk.subprocess.run", return_value=completed):
        with pytest.raises(OSError, match="nowhere"):
            read_disk_usage("/nowhere")


def test_read_disk_usage_missing_df_raises():
    with patch("sysshell.disk.subprocess.run", side_effect=FileNotFoundError("df")):
        with pytest.raises(OSError):
            read_disk_usage("/")