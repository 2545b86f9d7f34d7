# SPDX-License-Identifier: MIT
"""Execute plan commands, for real or as a dry run.

The dispatcher only sees ``Executor``; swapping the implementation is the
single place where dry-run behaves differently.
"""

from __future__ import annotations

from typing import Protocol

from gitinstall.output.console import ConsoleProtocol, Style
from gitinstall.platform.process import CommandRunner, format_argv

__all__ = ["DryRunExecutor", "ElevatedExecutor", "Executor"]


class Executor(Protocol):
    def execute(self, command: str) -> int:
        """Run a shell command string and return its exit status."""
        ...


class ElevatedExecutor:
    """Run commands through the elevation prefix (``sh -c``, ``sudo -E sh -c``, ``su -c``)."""

    def __init__(
        self,
        *,
        runner: CommandRunner,
        console: ConsoleProtocol,
        prefix: list[str],
    ) -> None:
        self._runner = runner
        self._console = console
        self._prefix = list(prefix)

    def execute(self, command: str) -> int:
        argv = [*self._prefix, command]
        self._console.print(f"+ {format_argv(argv)}", Style.DIM)
        result = self._runner.run(argv, capture=False)
        return result.returncode


class DryRunExecutor:
    """Display commands instead of running them; keeps a log of what would run."""

    def __init__(self, *, console: ConsoleProtocol) -> None:
        self._console = console
        self.commands: list[str] = []

    def execute(self, command: str) -> int:
        self.commands.append(command)
        self._console.print(command)
        return 0
