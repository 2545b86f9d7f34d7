# SPDX-License-Identifier: MIT
"""Error values and process exit codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Literal

__all__ = ["ErrorCode", "InstallError", "ErrorKind"]


class ErrorCode(IntEnum):
    OK = 0
    ERROR = 1
    INTERRUPTED = 130


ErrorKind = Literal["unsupported_platform", "privilege_unavailable", "command_failure"]


@dataclass(frozen=True, slots=True)
class InstallError:
    """Error from detection, elevation, or a failed package-manager command."""

    kind: ErrorKind
    message: str
    hint: str | None = None
    returncode: int | None = None

    @property
    def exit_code(self) -> int:
        # A failed command propagates its own status, like `set -e` would.
        if self.kind == "command_failure" and self.returncode and self.returncode > 0:
            return self.returncode
        return int(ErrorCode.ERROR)

    @classmethod
    def unsupported(cls, message: str, hint: str | None = None) -> InstallError:
        return cls(kind="unsupported_platform", message=message, hint=hint)

    @classmethod
    def no_privilege(cls, message: str, hint: str | None = None) -> InstallError:
        return cls(kind="privilege_unavailable", message=message, hint=hint)

    @classmethod
    def command_failed(cls, command: str, returncode: int) -> InstallError:
        return cls(
            kind="command_failure",
            message=f"command failed with code {returncode}: {command}",
            returncode=returncode,
        )
