"""
Host operating system detection.

Simple, stateless functions; the Linux distribution itself is resolved by
``gitinstall.platform.distro``.
"""

from __future__ import annotations

import platform as _platform
from enum import Enum

__all__ = ["Platform", "detect_platform"]


class Platform(Enum):
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        return {
            Platform.LINUX: "Linux",
            Platform.MACOS: "macOS",
            Platform.WINDOWS: "Windows",
            Platform.UNKNOWN: "unknown",
        }[self]


def detect_platform(system: str | None = None) -> Platform:
    """
    Detect current operating system.

    Args:
        system: Value of ``uname -s``; defaults to ``platform.system()``.
    """
    name = (system if system is not None else _platform.system()).lower()
    if name.startswith("linux"):
        return Platform.LINUX
    if "darwin" in name:
        return Platform.MACOS
    if name.startswith(("windows", "cygwin", "msys")):
        return Platform.WINDOWS
    return Platform.UNKNOWN
