# SPDX-License-Identifier: MIT
"""Pick how commands get root privileges."""

from __future__ import annotations

import os
from collections.abc import Callable

from gitinstall.core.errors import InstallError
from gitinstall.core.result import Err, Ok, Result

__all__ = ["current_user_is_root", "resolve_elevation"]

_NO_ELEVATION_HINT = 'We are unable to find either "sudo" or "su" available to make this happen.'


def current_user_is_root() -> bool:
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def resolve_elevation(
    *, is_root: bool, which: Callable[[str], str | None]
) -> Result[list[str], InstallError]:
    """Return the argv prefix that runs a shell command string as root.

    root -> ``sh -c``; otherwise ``sudo -E sh -c``, falling back to ``su -c``.
    """
    if is_root:
        return Ok(["sh", "-c"])
    if which("sudo"):
        return Ok(["sudo", "-E", "sh", "-c"])
    if which("su"):
        return Ok(["su", "-c"])
    return Err(
        InstallError.no_privilege(
            "This installer needs the ability to run commands as root.",
            hint=_NO_ELEVATION_HINT,
        )
    )
