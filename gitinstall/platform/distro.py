# SPDX-License-Identifier: MIT
"""Linux distribution detection.

Resolves a normalized ``DistributionInfo(id, version)`` from:
- /etc/os-release (ID, VERSION_ID)
- lsb_release, when installed (codename, release, upstream of forks)
- /etc/lsb-release and /etc/debian_version as fallbacks

Missing sources never raise: an unidentifiable host yields an empty id and
the dispatcher reports it as unsupported.
"""

from __future__ import annotations

import re
import shlex
import shutil
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from gitinstall.core.constants import DEBIAN_CODENAMES
from gitinstall.platform.process import CommandRunner, DefaultCommandRunner

__all__ = [
    "DistributionInfo",
    "DistroDetector",
    "debian_codename",
    "parse_key_value",
]

_KEY_VALUE = re.compile(r"([A-Za-z_][A-Za-z_0-9]*)=(.*)")


@dataclass(frozen=True, slots=True)
class DistributionInfo:
    id: str
    version: str = ""

    def __post_init__(self) -> None:
        if self.id != self.id.lower():
            object.__setattr__(self, "id", self.id.lower())

    @property
    def display(self) -> str:
        return f"{self.id} {self.version}".strip()


def parse_key_value(text: str) -> dict[str, str]:
    """Parse shell-style KEY=VALUE lines (os-release, lsb-release).

    Quoted values are unquoted; comments, blank lines and malformed lines are
    skipped.
    """
    values: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        m = _KEY_VALUE.fullmatch(line)
        if not m:
            continue
        key, raw = m.groups()
        if raw[:1] in ("'", '"'):
            try:
                parts = shlex.split(raw)
            except ValueError:
                parts = [raw.strip("'\"")]
            raw = parts[0] if parts else ""
        values[key] = raw
    return values


def debian_codename(debian_version: str) -> str:
    """Map /etc/debian_version contents to a codename.

    "12.5" -> "bookworm", "bookworm/sid" -> "bookworm"; unknown majors
    pass through unchanged ("9.13" -> "9").
    """
    major = debian_version.strip().split("/", 1)[0].split(".", 1)[0]
    return DEBIAN_CODENAMES.get(major, major)


def _second_tab_field(output: str) -> str:
    # Same as `cut -f2`: a line without a tab is returned whole.
    line = output.splitlines()[0] if output else ""
    parts = line.split("\t")
    return (parts[1] if len(parts) > 1 else parts[0]).strip()


def _field_value(lines: list[str], needle: str) -> str:
    for line in lines:
        if needle in line:
            _, _, value = line.partition(":")
            return "".join(value.split())
    return ""


@dataclass
class DistroDetector:
    """Detect the running distribution.

    Attributes:
        root: Filesystem root holding etc/ (tests point this at a tmp dir).
        runner: Runs lsb_release.
        which: Resolves executables on PATH.
    """

    root: Path = Path("/")
    runner: CommandRunner = field(default_factory=DefaultCommandRunner)
    which: Callable[[str], str | None] = shutil.which

    def detect(self) -> DistributionInfo:
        os_release = self._read_key_values("etc/os-release")
        dist_id = os_release.get("ID", "").lower()
        version = self._resolve_version(dist_id, os_release)
        dist_id, version = self._check_forked(dist_id, version)
        return DistributionInfo(id=dist_id, version=version)

    # -------------------------------------------------------------------------
    # Version resolution
    # -------------------------------------------------------------------------

    def _resolve_version(self, dist_id: str, os_release: dict[str, str]) -> str:
        match dist_id:
            case "ubuntu":
                version = ""
                if self._has_lsb_release():
                    version = _second_tab_field(self._lsb_release("--codename"))
                if not version:
                    version = self._read_key_values("etc/lsb-release").get("DISTRIB_CODENAME", "")
                return version
            case "debian" | "raspbian":
                return self._debian_version()
            case "centos" | "rhel":
                return os_release.get("VERSION_ID", "")
            case _:
                version = ""
                if self._has_lsb_release():
                    version = _second_tab_field(self._lsb_release("--release"))
                return version or os_release.get("VERSION_ID", "")

    def _check_forked(self, dist_id: str, version: str) -> tuple[str, str]:
        """Re-derive id/version for forks (Mint, elementary, old Debian derivatives).

        ``lsb_release -u`` reports the upstream distribution and only succeeds
        on forks; when it fails, anything carrying /etc/debian_version that is
        not Ubuntu or Raspbian is treated as plain Debian.
        """
        if not self._has_lsb_release():
            return dist_id, version

        try:
            result = self.runner.run(["lsb_release", "-a", "-u"])
        except OSError:
            return dist_id, version

        if result.returncode == 0:
            lines = "\n".join((result.stdout, result.stderr)).lower().splitlines()
            return _field_value(lines, "id"), _field_value(lines, "codename")

        if dist_id not in ("ubuntu", "raspbian"):
            debian_version = self._read_text("etc/debian_version")
            if debian_version is not None:
                return "debian", debian_codename(debian_version)
        return dist_id, version

    # -------------------------------------------------------------------------
    # Sources
    # -------------------------------------------------------------------------

    def _has_lsb_release(self) -> bool:
        return self.which("lsb_release") is not None

    def _lsb_release(self, flag: str) -> str:
        try:
            result = self.runner.run(["lsb_release", flag])
        except OSError:
            return ""
        return result.stdout if result.returncode == 0 else ""

    def _debian_version(self) -> str:
        text = self._read_text("etc/debian_version")
        return debian_codename(text) if text is not None else ""

    def _read_text(self, relpath: str) -> str | None:
        try:
            return (self.root / relpath).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None

    def _read_key_values(self, relpath: str) -> dict[str, str]:
        text = self._read_text(relpath)
        return parse_key_value(text) if text is not None else {}
