"""Interactive command interpreter over the in-memory file tree."""

from __future__ import annotations

import argparse
import subprocess
import sys
from typing import Iterable, Sequence, TextIO

from sysshell.vfs import FileSystem, FileSystemError

MAX_ARGS = 50
DEFAULT_SYSINFO_COMMAND = ("./sys_monitor",)

BANNER = (
    "Welcome to the shell!\n"
    "support command: ls, pwd, touch, mkdir, \n"
    "cd, cat, tac, sysinfo, exit\n"
    "command sysinfo can display system resource status\n"
    "Type 'exit' to quit.\n"
)


class ExitShell(Exception):
    """Raised by the exit command to end the session."""


class Shell:
    """Executes command lines against a file tree, writing replies to ``out``."""

    def __init__(
        self,
        out: TextIO | None = None,
        sysinfo_command: Sequence[str] = DEFAULT_SYSINFO_COMMAND,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.sysinfo_command = list(sysinfo_command)
        self.fs = FileSystem()
        self.cwd = self.fs.root
        self._commands = {
            "pwd": self._pwd,
            "mkdir": self._mkdir,
            "touch": self._touch,
            "ls": self._ls,
            "cd": self._cd,
            "cat": self._cat,
            "tac": self._tac,
            "sysinfo": self._sysinfo,
            "exit": self._exit,
        }

    def _say(self, text: str) -> None:
        self.out.write(text + "\n")

    def prompt(self) -> str:
        return f"{self.cwd.path} > "

    def execute(self, line: str) -> None:
        """Run one command line; raises ExitShell on ``exit``."""
        args = [token for token in line.split(" ") if token][:MAX_ARGS]
        if not args:
            return
        handler = self._commands.get(args[0])
        if handler is None:
            self._say(f"Error: Unknown command '{args[0]}'")
            return
        try:
            handler(args)
        except FileSystemError as exc:
            self._say(f"Error: {exc}")

    def run(self, lines: Iterable[str]) -> int:
        """Print the banner and process lines until they run out or ``exit``."""
        self.out.write(BANNER)
        self.out.write(self.prompt())
        try:
            for line in lines:
                self.execute(line.rstrip("\n"))
                self.out.write(self.prompt())
        except ExitShell:
            pass
        self.out.flush()
        return 0

    def _pwd(self, args: list[str]) -> None:
        self._say(self.cwd.path)

    def _mkdir(self, args: list[str]) -> None:
        if len(args) < 2:
            self._say("Usage: makdir <folder_name>")
            return
        self.fs.make_dir(self.cwd, args[1])

    def _touch(self, args: list[str]) -> None:
        if len(args) < 2:
            self._say("Usage: touch <file_name>")
            return
        self.fs.touch(self.cwd, args[1])

    def _ls(self, args: list[str]) -> None:
        self._say("".join(f"{child.name} " for child in self.cwd.children))

    def _cd(self, args: list[str]) -> None:
        if len(args) < 2:
            self._say("Usage: cd <path> or cd .. or cd /")
            return
        self.cwd = self.fs.change_dir(self.cwd, args[1])

    def _cat(self, args: list[str]) -> None:
        if len(args) < 2:
            self._say("Usage: cat <file_path>")
            return
        self._say(self.fs.read(args[1], self.cwd))

    def _tac(self, args: list[str]) -> None:
        if len(args) < 3:
            self._say("Usage: tac <file_path> <content>")
            return
        self.fs.write(args[1], self.cwd, " ".join(args[2:]))

    def _sysinfo(self, args: list[str]) -> None:
        self._say("Gathering system information...")
        self.out.flush()
        try:
            subprocess.run(self.sysinfo_command, check=False)
        except OSError as exc:
            self._say(f"Error executing sys_monitor: {exc}")

    def _exit(self, args: list[str]) -> None:
        self._say("Exiting file system.")
        raise ExitShell


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="In-memory file system shell.")
    parser.add_argument(
        "--sysinfo",
        nargs="+",
        default=list(DEFAULT_SYSINFO_COMMAND),
        help="command run by sysinfo",
    )
    args = parser.parse_args(argv)
    return Shell(sys.stdout, args.sysinfo).run(sys.stdin)


if __name__ == "__main__":
    raise SystemExit(main())