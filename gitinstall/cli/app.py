from __future__ import annotations

import typer

from gitinstall.core.config import RunConfig
from gitinstall.core.errors import ErrorCode
from gitinstall.core.result import Err, Ok
from gitinstall.output.console import ConsoleProtocol, RichConsole, Style
from gitinstall.services.install import InstallOutcome, InstallService

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)


def _report_illegal_options(args: list[str], console: ConsoleProtocol) -> None:
    for arg in args:
        if arg.startswith("--"):
            console.print(f"Illegal option {arg}")


def build_service(console: ConsoleProtocol) -> InstallService:
    return InstallService(console=console)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def install(
    ctx: typer.Context,
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the commands without running them"),
    version: str | None = typer.Option(
        None, "--version", help="Git version to install (best effort, leading 'v' ignored)"
    ),
    setup_repo: bool = typer.Option(
        False, "--setup-repo", help="Only configure repositories and refresh the package cache"
    ),
) -> None:
    """Install Git using the distribution's package manager.

    DRY_RUN, REPO_ONLY and VERSION in the environment set the defaults.
    Run with --dry-run first to review the steps.
    """
    console = RichConsole()
    _report_illegal_options(list(ctx.args), console)

    config = RunConfig.from_env().with_flags(
        dry_run=dry_run,
        repo_only=setup_repo,
        version=version,
    )

    try:
        result = build_service(console).run(config)
    except KeyboardInterrupt:
        console.newline()
        console.error("Aborted")
        raise typer.Exit(code=int(ErrorCode.INTERRUPTED))

    match result:
        case Ok(report):
            if report.outcome is InstallOutcome.REPO_READY:
                console.print("Repository setup complete", Style.DIM)
        case Err(e):
            console.newline()
            console.error(f"ERROR: {e.message}")
            if e.hint:
                console.print(e.hint)
            console.newline()
            raise typer.Exit(code=e.exit_code)


def main() -> None:
    app()
