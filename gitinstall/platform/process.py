# SPDX-License-Identifier: MIT
"""Blocking subprocess execution behind a small protocol."""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence
from typing import Protocol

__all__ = ["CommandRunner", "DefaultCommandRunner", "format_argv"]


def format_argv(argv: Sequence[str]) -> str:
    return shlex.join(argv)


class CommandRunner(Protocol):
    def run(self, args: list[str], *, capture: bool = True) -> subprocess.CompletedProcess[str]: ...


class DefaultCommandRunner:
    """Run commands with ``subprocess.run``.

    With ``capture=False`` the child inherits the terminal, so package-manager
    output streams straight to the user.
    """

    def run(self, args: list[str], *, capture: bool = True) -> subprocess.CompletedProcess[str]:
        if capture:
            return subprocess.run(
                args,
                text=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        return subprocess.run(args, text=True, check=False)
