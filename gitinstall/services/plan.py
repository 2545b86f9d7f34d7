# SPDX-License-Identifier: MIT
"""Per-distribution install plans.

A plan is plain data: the ordered shell commands for one distribution family.
Building it never touches the host, so every branch is testable without a
package manager.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from enum import Enum, auto

from gitinstall.core.config import RunConfig
from gitinstall.core.constants import APT_HELPER_PACKAGE, APT_PACKAGE_EPOCH, GIT_PPA, PACKAGE
from gitinstall.platform.distro import DistributionInfo

__all__ = [
    "DistroFamily",
    "InstallPlan",
    "InstallStep",
    "StepKind",
    "build_plan",
    "family_for",
]


class DistroFamily(Enum):
    """Distributions sharing a package-manager dialect and repo setup."""

    APT_PPA = auto()  # Ubuntu: git-core PPA on top of apt
    APT = auto()  # Debian, Raspbian: stock repositories
    RPM = auto()  # CentOS, RHEL, Fedora: dnf or yum
    UNSUPPORTED = auto()


_FAMILIES: dict[str, DistroFamily] = {
    "ubuntu": DistroFamily.APT_PPA,
    "debian": DistroFamily.APT,
    "raspbian": DistroFamily.APT,
    "centos": DistroFamily.RPM,
    "fedora": DistroFamily.RPM,
    "rhel": DistroFamily.RPM,
}


def family_for(info: DistributionInfo) -> DistroFamily:
    # The version never changes the family; EOL releases are only warned about.
    return _FAMILIES.get(info.id, DistroFamily.UNSUPPORTED)


class StepKind(Enum):
    REPO_SETUP = auto()
    CACHE_REFRESH = auto()
    INSTALL = auto()


@dataclass(frozen=True, slots=True)
class InstallStep:
    kind: StepKind
    command: str


@dataclass(frozen=True, slots=True)
class InstallPlan:
    family: DistroFamily
    steps: tuple[InstallStep, ...]

    @property
    def setup_steps(self) -> tuple[InstallStep, ...]:
        return tuple(s for s in self.steps if s.kind is not StepKind.INSTALL)

    @property
    def install_steps(self) -> tuple[InstallStep, ...]:
        return tuple(s for s in self.steps if s.kind is StepKind.INSTALL)

    @property
    def commands(self) -> list[str]:
        return [s.command for s in self.steps]

    @property
    def is_empty(self) -> bool:
        return not self.steps


_APT_UPDATE = "apt-get -qq update >/dev/null"


def _apt_install(packages: str) -> str:
    return f"DEBIAN_FRONTEND=noninteractive apt-get -y -qq install {packages} >/dev/null"


def _apt_package_spec(version: str | None) -> str:
    if not version:
        return PACKAGE
    # Trailing "*" makes apt match any Debian revision of the upstream version.
    return shlex.quote(f"{PACKAGE}={APT_PACKAGE_EPOCH}:{version}*")


def _rpm_package_spec(version: str | None) -> str:
    if not version:
        return PACKAGE
    return shlex.quote(f"{PACKAGE}-{version}")


def build_plan(
    info: DistributionInfo,
    config: RunConfig,
    *,
    package_manager: str = "dnf",
) -> InstallPlan:
    """Build the command sequence for ``info``.

    Args:
        info: Detected distribution.
        config: Run configuration; only ``version`` affects the commands.
        package_manager: RPM-family manager to use ("dnf" or "yum").

    Returns:
        The plan; empty for unsupported distributions.
    """
    family = family_for(info)

    match family:
        case DistroFamily.APT_PPA:
            steps = (
                InstallStep(StepKind.CACHE_REFRESH, _APT_UPDATE),
                InstallStep(StepKind.REPO_SETUP, _apt_install(APT_HELPER_PACKAGE)),
                InstallStep(StepKind.REPO_SETUP, f"add-apt-repository -y {GIT_PPA}"),
                InstallStep(StepKind.CACHE_REFRESH, _APT_UPDATE),
                InstallStep(StepKind.INSTALL, _apt_install(_apt_package_spec(config.version))),
            )
        case DistroFamily.APT:
            steps = (
                InstallStep(StepKind.CACHE_REFRESH, _APT_UPDATE),
                InstallStep(StepKind.INSTALL, _apt_install(_apt_package_spec(config.version))),
            )
        case DistroFamily.RPM:
            steps = (
                InstallStep(StepKind.CACHE_REFRESH, f"{package_manager} makecache"),
                InstallStep(
                    StepKind.INSTALL,
                    f"{package_manager} -y -q install {_rpm_package_spec(config.version)}",
                ),
            )
        case DistroFamily.UNSUPPORTED:
            steps = ()

    return InstallPlan(family=family, steps=steps)
