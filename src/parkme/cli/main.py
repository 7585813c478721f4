from __future__ import annotations

import os

import typer
from result import Err, Ok

from parkme.common import create_logger, resolve_working_directory, setup_cli_logging
from parkme.scaffold import (
    STEP_MESSAGES,
    ConfigRenderError,
    DataProvisionError,
    DependencyInstallError,
    PrerequisiteStatus,
    RepositoryFetchError,
    SetupError,
    SetupPipeline,
    SetupStep,
    SetupSummary,
    collect_project,
)
from parkme.settings import Settings

logger = create_logger("cli")

app = typer.Typer(
    help="Set up a new Park.me project.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


class _TyperPrompter:
    def ask_project_name(self, default: str) -> str:
        return typer.prompt("Enter your project name", default=default)

    def confirm_overwrite(self, name: str) -> bool:
        return typer.confirm(f'Directory "{name}" already exists. Overwrite?', default=False)


class _ConsoleReporter:
    def started(self, step: SetupStep) -> None:
        typer.echo()
        typer.secho("› ", fg=typer.colors.CYAN, bold=True, nl=False)
        typer.secho(STEP_MESSAGES[step].started, fg=typer.colors.WHITE)

    def succeeded(self, step: SetupStep) -> None:
        typer.secho(f"✓ {STEP_MESSAGES[step].succeeded}", fg=typer.colors.GREEN)

    def failed(self, step: SetupStep, error: SetupError) -> None:
        typer.secho(f"✗ {STEP_MESSAGES[step].failed}", fg=typer.colors.RED)
        _handle_error(error)

    def prerequisite_checked(self, status: PrerequisiteStatus) -> None:
        if status.installed:
            typer.secho(f"✓ {STEP_MESSAGES[SetupStep.PREREQUISITE].succeeded}", fg=typer.colors.GREEN)
            return
        typer.secho(f"✗ {STEP_MESSAGES[SetupStep.PREREQUISITE].failed}", fg=typer.colors.YELLOW)
        typer.secho(f"Please install {status.name} to run the application.", fg=typer.colors.WHITE)
        typer.secho(status.install_url, fg=typer.colors.BLUE)


@app.command()
def setup(ctx: typer.Context) -> None:
    """Clone the Park.me application and prepare its data and configuration."""
    if os.getenv("NO_COLOR"):
        ctx.color = False

    settings = Settings()
    _setup_logging(settings)

    typer.secho("\nWelcome to Park.me Project Setup!\n", fg=typer.colors.GREEN, bold=True)

    layout = collect_project(
        _TyperPrompter(),
        resolve_working_directory(None),
        default_name=settings.default_project_name,
    )
    if layout is None:
        raise typer.Exit()

    pipeline = SetupPipeline(settings, _ConsoleReporter(), environment=dict(os.environ))

    match pipeline.run(layout):
        case Ok(summary):
            _print_next_steps(summary)
        case Err(_):
            raise typer.Exit(code=1)


def _setup_logging(settings: Settings) -> None:
    if settings.logging.enabled:
        setup_cli_logging(app_info=settings.app, config=settings.logging)
        logger.debug("CLI logging initialized", config=settings.logging.model_dump())


def _print_next_steps(summary: SetupSummary) -> None:
    typer.secho("\nSetup completed successfully!", fg=typer.colors.GREEN, bold=True)
    typer.secho(
        "\nNext Steps:\n"
        f"1. Navigate to the project directory:\n   cd {summary.layout.name}\n"
        "2. Open the project in your IDE.\n"
        f"3. Configure {summary.prerequisite.name} to deploy from /app.\n"
        "4. Start coding! 🤗\n",
        fg=typer.colors.CYAN,
    )


def _handle_error(error: SetupError) -> None:
    """Print the underlying error detail with a hint where one helps."""
    match error:
        case RepositoryFetchError(url=url, branch=branch, message=message):
            typer.secho(f"  {message}", err=True, fg=typer.colors.RED)
            typer.secho(
                f"hint: verify that {url} is reachable and branch '{branch}' exists",
                err=True,
                fg=typer.colors.CYAN,
            )
        case DataProvisionError(path=path, message=message) | ConfigRenderError(path=path, message=message):
            typer.secho(f"  {message}", err=True, fg=typer.colors.RED)
            typer.secho(f"  path: {path}", err=True)
        case DependencyInstallError(command=command, returncode=None, message=message):
            typer.secho(f"  {message}", err=True, fg=typer.colors.RED)
            typer.secho(f"hint: make sure '{command[0]}' is installed and on PATH", err=True, fg=typer.colors.CYAN)
        case _:
            typer.secho(f"  {error.message}", err=True, fg=typer.colors.RED)


def main() -> None:
    """Entrypoint for the parkme CLI."""
    app()
