# SPDX-License-Identifier: MIT
"""Install Git with the host's native package manager.

Flow for one run:
- banner, then advisory notice if git is already installed
- resolve privilege elevation (abort before any command if impossible)
- detect the distribution, warn about end-of-life releases
- run repository setup and cache refresh, stop here in repo-only mode
- install the package and report the installed version

The first failing command aborts the run; nothing is retried or rolled back.
"""

from __future__ import annotations

import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto

from gitinstall.core.config import RunConfig
from gitinstall.core.constants import (
    EOL_DELAY_SECONDS,
    EOL_RELEASES,
    EXISTING_INSTALL_DELAY_SECONDS,
    PACKAGE,
    SCRIPT_COMMIT_SHA,
)
from gitinstall.core.errors import InstallError
from gitinstall.core.result import Err, Ok, Result
from gitinstall.output.console import ConsoleProtocol, Style
from gitinstall.platform.detection import Platform, detect_platform
from gitinstall.platform.distro import DistributionInfo, DistroDetector
from gitinstall.platform.process import CommandRunner, DefaultCommandRunner
from gitinstall.services.executor import DryRunExecutor, ElevatedExecutor, Executor
from gitinstall.services.plan import DistroFamily, InstallPlan, InstallStep, build_plan
from gitinstall.services.privilege import current_user_is_root, resolve_elevation

__all__ = ["InstallOutcome", "InstallReport", "InstallService"]

_RULE = "=" * 80

_MACOS_HINT = "Please use Homebrew (brew install git) or the XCode command line tools."


class InstallOutcome(Enum):
    INSTALLED = auto()
    REPO_READY = auto()  # repo-only mode stopped after setup


@dataclass(frozen=True, slots=True)
class InstallReport:
    outcome: InstallOutcome
    distribution: DistributionInfo
    plan: InstallPlan
    commands: list[str] = field(default_factory=list)
    dry_run: bool = False


class InstallService:
    """Detect the distribution, then set up repositories and install Git."""

    def __init__(
        self,
        *,
        console: ConsoleProtocol,
        runner: CommandRunner | None = None,
        detector: DistroDetector | None = None,
        which: Callable[[str], str | None] = shutil.which,
        sleep: Callable[[float], None] = time.sleep,
        is_root: bool | None = None,
        platform: Platform | None = None,
    ) -> None:
        self._console = console
        self._runner = runner or DefaultCommandRunner()
        self._which = which
        self._detector = detector or DistroDetector(runner=self._runner, which=which)
        self._sleep = sleep
        self._is_root = current_user_is_root() if is_root is None else is_root
        self._platform = platform

    def run(
        self, config: RunConfig, *, info: DistributionInfo | None = None
    ) -> Result[InstallReport, InstallError]:
        """Run the installer.

        Args:
            config: Run configuration.
            info: Pre-detected distribution; detected from the host if None.
        """
        self._console.print(f"# Executing git install script, commit: {SCRIPT_COMMIT_SHA}")

        if self._which(PACKAGE):
            self._existing_install_notice()

        elevation = resolve_elevation(is_root=self._is_root, which=self._which)
        match elevation:
            case Err(e):
                return Err(e)
            case Ok(prefix):
                pass

        executor: Executor
        if config.dry_run:
            executor = DryRunExecutor(console=self._console)
        else:
            executor = ElevatedExecutor(runner=self._runner, console=self._console, prefix=prefix)

        if info is None:
            info = self._detector.detect()

        if (info.id, info.version) in EOL_RELEASES:
            self._deprecation_notice(info)

        plan = build_plan(info, config, package_manager=self._rpm_package_manager())
        if plan.family is DistroFamily.UNSUPPORTED:
            return Err(self._unsupported(info))

        commands: list[str] = []

        result = self._execute(executor, plan.setup_steps, commands)
        if isinstance(result, Err):
            return Err(result.error)

        if config.repo_only:
            return Ok(
                InstallReport(
                    outcome=InstallOutcome.REPO_READY,
                    distribution=info,
                    plan=plan,
                    commands=commands,
                    dry_run=config.dry_run,
                )
            )

        result = self._execute(executor, plan.install_steps, commands)
        if isinstance(result, Err):
            return Err(result.error)

        if not config.dry_run:
            self._success_report()

        return Ok(
            InstallReport(
                outcome=InstallOutcome.INSTALLED,
                distribution=info,
                plan=plan,
                commands=commands,
                dry_run=config.dry_run,
            )
        )

    # -------------------------------------------------------------------------
    # Execution
    # -------------------------------------------------------------------------

    def _execute(
        self, executor: Executor, steps: tuple[InstallStep, ...], commands: list[str]
    ) -> Result[None, InstallError]:
        for step in steps:
            commands.append(step.command)
            returncode = executor.execute(step.command)
            if returncode != 0:
                return Err(InstallError.command_failed(step.command, returncode))
        return Ok(None)

    def _rpm_package_manager(self) -> str:
        return "dnf" if self._which("dnf") else "yum"

    def _unsupported(self, info: DistributionInfo) -> InstallError:
        if not info.id:
            platform = self._platform or detect_platform()
            if platform is Platform.MACOS:
                return InstallError.unsupported(
                    f"Unsupported operating system '{platform.display_name}'",
                    hint=_MACOS_HINT,
                )
        return InstallError.unsupported(f"Unsupported distribution '{info.id}'")

    # -------------------------------------------------------------------------
    # Notices
    # -------------------------------------------------------------------------

    def _existing_install_notice(self) -> None:
        self._console.warning(f'Warning: "{PACKAGE}" command appears to already exist on this system.')
        self._console.warning("")
        self._console.warning(
            "If you installed the current Git package using this script and are using it"
        )
        self._console.warning("again to update Git, you can ignore this message.")
        self._console.warning("")
        self._console.warning("You may press Ctrl+C now to abort this script.")
        self._console.print(f"+ sleep {EXISTING_INSTALL_DELAY_SECONDS}", Style.DIM)
        self._sleep(EXISTING_INSTALL_DELAY_SECONDS)

    def _deprecation_notice(self, info: DistributionInfo) -> None:
        self._console.newline()
        self._console.print("DEPRECATION WARNING", Style.ERROR)
        self._console.print(
            f"    This Linux distribution ({info.display}) reached end-of-life "
            "and is no longer supported by this script."
        )
        self._console.print("    No updates or security fixes will be released for this distribution.")
        self._console.newline()
        self._console.print(
            "Press Ctrl+C now to abort this script, or wait for the installation to continue."
        )
        self._console.newline()
        self._sleep(EOL_DELAY_SECONDS)

    def _success_report(self) -> None:
        self._console.newline()
        self._console.print(_RULE)
        self._console.newline()
        self._console.success("Git has been installed successfully.")
        self._console.newline()

        if self._which(PACKAGE):
            self._console.print(f"+ {PACKAGE} --version", Style.DIM)
            try:
                result = self._runner.run([PACKAGE, "--version"])
            except OSError:
                result = None
            if result is not None and result.returncode == 0 and result.stdout.strip():
                self._console.print(result.stdout.strip())

        self._console.newline()
        self._console.print("To configure your global identity, run:")
        self._console.print('  git config --global user.name "Your Name"')
        self._console.print('  git config --global user.email "you@example.com"')
        self._console.newline()
        self._console.print(_RULE)
        self._console.newline()
