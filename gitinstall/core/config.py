# SPDX-License-Identifier: MIT
"""Run configuration: environment defaults merged with command-line flags."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

__all__ = ["RunConfig", "strip_version_prefix"]


def strip_version_prefix(value: str | None) -> str | None:
    """Drop a single leading "v" ("v2.43.0" -> "2.43.0"). Empty becomes None."""
    if not value:
        return None
    stripped = value[1:] if value.startswith("v") else value
    return stripped or None


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Immutable per-run settings.

    Attributes:
        dry_run: Display commands instead of running them.
        repo_only: Stop after repository setup and cache refresh.
        version: Requested Git version (best effort), without "v" prefix.
    """

    dry_run: bool = False
    repo_only: bool = False
    version: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RunConfig:
        """Read DRY_RUN, REPO_ONLY and VERSION.

        DRY_RUN is enabled by any non-empty value; REPO_ONLY only by "1".
        """
        env = os.environ if environ is None else environ
        return cls(
            dry_run=bool(env.get("DRY_RUN", "")),
            repo_only=env.get("REPO_ONLY", "0") == "1",
            version=strip_version_prefix(env.get("VERSION")),
        )

    def with_flags(
        self,
        *,
        dry_run: bool = False,
        repo_only: bool = False,
        version: str | None = None,
    ) -> RunConfig:
        """Apply command-line flags on top. Flags only switch modes on."""
        return replace(
            self,
            dry_run=self.dry_run or dry_run,
            repo_only=self.repo_only or repo_only,
            version=strip_version_prefix(version) or self.version,
        )
