# sysshell

Two small console tools:

- **`sysshell`**: an interactive shell over an in-memory file tree. Nothing
  touches the real disk. You can create folders and files, move around, and
  read or replace a file's text.
- **`sys-monitor`**: a system resource view. It shows CPU, memory, disk and
  per-interface network usage, read from `/proc` and from `df`, so it needs
  Linux.

Neither needs anything outside the standard library.

## Installation

```
pip install .
```

## The shell

```
$ sysshell
Welcome to the shell!
support command: ls, pwd, touch, mkdir, 
cd, cat, tac, sysinfo, exit
command sysinfo can display system resource status
Type 'exit' to quit.
/ > mkdir docs
/ > cd docs
/docs > touch notes
/docs > tac notes hello world
/docs > cat notes
hello world
/docs > cd /
/ > ls
docs 
/ > exit
Exiting file system.
```

Commands are read one per line from standard input. Words are separated by
spaces, and only the first 50 words of a line are used.

| Command                  | Effect                                                             |
|--------------------------|--------------------------------------------------------------------|
| `ls`                     | list the current folder's entries in the order they were created   |
| `pwd`                    | print the current path                                             |
| `mkdir <name>`           | create a folder in the current folder                              |
| `touch <name>`           | create an empty file in the current folder                         |
| `cd <path>`              | change folder: `/`, `..`, a child's name, or an absolute path      |
| `cat <path>`             | print a file's content                                             |
| `tac <path> <words...>`  | replace a file's content with the words, joined by single spaces   |
| `sysinfo`                | run the system information command and wait for it to finish       |
| `exit`                   | leave the shell                                                    |

Details:

- Names must be unique inside a folder. Names longer than 49 characters are
  cut to 49, and file content longer than 199 characters is cut to 199.
- `cat` and `tac` accept a path relative to the current folder or an absolute
  one. Paths are followed by name only; `..` is understood by `cd` alone,
  and only as its whole argument.
- Mistakes are reported as `Error: ...` lines, for example
  `Error: Directory 'docs' already exists.` or
  `Error: Cannot 'cd' into a file: 'notes'`, and do not end the shell.
- The shell also ends when its input runs out.

By default `sysinfo` runs `./sys_monitor` from the current working directory.
Choose another command with `--sysinfo`, for example the monitor installed
with this package:

```
$ sysshell --sysinfo sys-monitor
```

`--sysinfo` takes the command and its arguments as separate words; arguments
that begin with `-` cannot be passed this way.

## The monitor

```
$ sys-monitor [--interval SECONDS] [--count N] [--proc-root DIR] [--mount-point PATH]
```

It clears the screen and prints a report, then repeats every `--interval`
seconds (1 by default). Without `--count` it runs until Ctrl-C.

- `--proc-root` (default `/proc`) is where `stat`, `meminfo` and `net/dev`
  are read from.
- `--mount-point` (default `/`) is the filesystem passed to `df -P -k`.

A report looks like this:

```
===== 系统资源监视器 =====
CPU使用率: 12.34%
内存使用率: 45.67% (3712.00MB / 8128.00MB)
磁盘使用率: 51.20% (52428.80MB / 102400.00MB)
网络接口 eth0:
  当前下载流量: 120.50MB
  当前上传流量: 8.25MB
--- 整体网络流量 ---
  总下载流量: 120.50MB (增量: 0.00MB)
  总上传流量: 8.25MB (增量: 0.00MB)
=========================
```

CPU usage and the network increments are measured against the previous
report; the first report's CPU figure covers the time since boot, and its
increments are zero. The loopback interface `lo` is left out. Memory in use
is `MemTotal - MemAvailable`, or `MemTotal - (MemFree + Buffers + Cached)`
when the kernel gives no `MemAvailable`. A part that cannot be read is
reported on its own line and the rest of the report still appears.

## Using it from Python

```python
import io
from sysshell.shell import Shell

out = io.StringIO()
shell = Shell(out=out)
shell.run(["mkdir a", "cd a", "touch f", "tac f hi", "cat f"])
print(out.getvalue())
```

`Shell.execute(line)` runs a single line, `Shell.prompt()` returns the prompt
text, and the `exit` command raises `ExitShell`.

The tree itself is `sysshell.vfs.FileSystem`, made of `Node` objects whose
kind is a `NodeKind`. Its `make_dir`, `touch`, `resolve`, `change_dir`,
`read` and `write` raise `FileSystemError` on failure.

The monitor parts can be used on their own:

- `sysshell.cpu`: `parse_cpu_times`, `CpuTimes`, `CpuMonitor`, `format_cpu_usage`
- `sysshell.memory`: `parse_meminfo`, `read_memory`, `MemoryInfo`, `format_memory`
- `sysshell.disk`: `parse_df_output`, `read_disk_usage`, `DiskUsage`, `format_disk_usage`
- `sysshell.network`: `parse_net_dev`, `InterfaceTraffic`, `NetworkMonitor`,
  `TrafficReport`, `format_traffic`
- `sysshell.monitor`: `SystemMonitor`, whose `report()` returns one full report

The parsers take file or command output as text, so they work on saved
samples as well as on a live system.

## What it does not do

The file tree lives only in memory: it is not saved, and it is gone when the
shell ends. There are no commands to remove, rename, move or copy entries.
The monitor only reports; it keeps no history and raises no alerts.

## Tests

```
pip install .[test]
pytest
```