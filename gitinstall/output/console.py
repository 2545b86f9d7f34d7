# SPDX-License-Identifier: MIT
"""Console output.

Everything user-visible goes through ``ConsoleProtocol`` so services can be
tested with ``MockConsole`` and rendered with rich in the real CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from rich.console import Console
from rich.markup import escape

__all__ = ["ConsoleProtocol", "MockConsole", "RichConsole", "Style"]


class Style(Enum):
    DEFAULT = ""
    DIM = "dim"
    BOLD = "bold"
    SUCCESS = "green"
    WARNING = "yellow"
    ERROR = "bold red"


class ConsoleProtocol(Protocol):
    def print(self, msg: str = "", style: Style = Style.DEFAULT) -> None: ...

    def newline(self) -> None: ...

    def success(self, msg: str) -> None: ...

    def warning(self, msg: str) -> None: ...

    def error(self, msg: str) -> None: ...


class RichConsole:
    """Console backed by rich. Warnings and errors go to stderr."""

    def __init__(self, *, no_color: bool = False) -> None:
        self._out = Console(highlight=False, no_color=no_color)
        self._err = Console(stderr=True, highlight=False, no_color=no_color)

    def print(self, msg: str = "", style: Style = Style.DEFAULT) -> None:
        self._out.print(escape(msg), style=style.value or None, soft_wrap=True)

    def newline(self) -> None:
        self._out.print()

    def success(self, msg: str) -> None:
        self._out.print(escape(msg), style=Style.SUCCESS.value, soft_wrap=True)

    def warning(self, msg: str) -> None:
        self._err.print(escape(msg), style=Style.WARNING.value, soft_wrap=True)

    def error(self, msg: str) -> None:
        self._err.print(escape(msg), style=Style.ERROR.value, soft_wrap=True)


@dataclass
class MockConsole:
    """Records output as (kind, message) pairs."""

    messages: list[tuple[str, str]] = field(default_factory=list)

    def print(self, msg: str = "", style: Style = Style.DEFAULT) -> None:
        self.messages.append(("print", msg))

    def newline(self) -> None:
        self.messages.append(("newline", ""))

    def success(self, msg: str) -> None:
        self.messages.append(("success", msg))

    def warning(self, msg: str) -> None:
        self.messages.append(("warning", msg))

    def error(self, msg: str) -> None:
        self.messages.append(("error", msg))

    @property
    def text(self) -> str:
        return "\n".join(msg for _, msg in self.messages)

    def of_kind(self, kind: str) -> list[str]:
        return [msg for k, msg in self.messages if k == kind]
