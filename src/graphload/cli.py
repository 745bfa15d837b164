# src/graphload/cli.py
"""graphload Command Line Interface.

Entry point for the graphload bulk loader. This is the only module that
turns a LoaderError into a process exit code.
"""

import click
import typer
from typer.core import TyperCommand

from graphload import __version__
from graphload.contracts.errors import (
    ConfigError,
    LoaderError,
    StageFailedError,
    UnrecognizedOptionError,
)
from graphload.core.config import (
    DEFAULT_THREADS,
    load_runtime_settings,
    resolve_config,
)
from graphload.core.logging import configure_logging, get_logger
from graphload.core.preflight import validate_environment
from graphload.engine.launcher import BuilderLauncher
from graphload.engine.orchestrator import PipelineCoordinator
from graphload.engine.reporter import format_report
from graphload.engine.runner import SubprocessStageRunner

logger = get_logger(__name__)

app = typer.Typer(
    name="graphload",
    help="graphload: bulk loader for triple/quad store databases.",
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-help", "-h"]},
)


def _fail(error: LoaderError) -> typer.Exit:
    """Log a fatal error and build the matching exit."""
    if isinstance(error, StageFailedError):
        logger.error(
            str(error),
            stage=error.stage,
            exit_code=error.returncode,
            command=error.command_line,
        )
    else:
        logger.error(str(error))
    return typer.Exit(int(error.exit_code))


class LoaderCommand(TyperCommand):
    """Command that reports option-syntax problems as ConfigErrors.

    Click would print its own usage error and exit 2; the loader reserves 2
    for temp-directory and system-variant problems, so unknown flags and
    missing option values exit through the ConfigError path instead.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption as e:
            configure_logging()
            raise _fail(UnrecognizedOptionError(e.option_name)) from None
        except click.UsageError as e:
            configure_logging()
            raise _fail(ConfigError(e.format_message())) from None


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"graphload version {__version__}")
        raise typer.Exit()


@app.command(cls=LoaderCommand)
def load(
    data_files: list[str] | None = typer.Argument(
        None,
        help="Data files to load (after options, or after --).",
        show_default=False,
    ),
    loc: str | None = typer.Option(
        None,
        "--loc",
        "-loc",
        help="Database location. Must not already exist.",
    ),
    tmpdir: str | None = typer.Option(
        None,
        "--tmpdir",
        "-tmpdir",
        help="Directory for intermediate files (default: the database location).",
    ),
    threads: str = typer.Option(
        DEFAULT_THREADS,
        "--threads",
        "-threads",
        help="Sort parallelism passed to the builders; -1 for the sort default.",
    ),
    system: str = typer.Option(
        "tdb2",
        "--system",
        "-system",
        help="Database variant to build.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-debug",
        help="Verbose diagnostic logging.",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Bulk load data files into a new database.

    Runs the node-table, ingest and index build phases in order, stopping
    at the first failure.

    Exit codes: 0 success, 1 fatal error, 2 temp directory or unknown
    system, 3 location exists, 9 missing tools or unsupported system.
    """
    configure_logging(debug=debug)

    try:
        tools = validate_environment()
        settings = load_runtime_settings()
        config = resolve_config(
            location=loc,
            tmpdir=tmpdir,
            threads=threads,
            data_files=data_files or [],
            system=system,
            debug=debug,
        )
        launcher = BuilderLauncher(settings, java=settings.java or str(tools.java))
        coordinator = PipelineCoordinator(launcher, SubprocessStageRunner())
        report = coordinator.run(config)
    except LoaderError as e:
        raise _fail(e) from None

    typer.echo(format_report(report))


if __name__ == "__main__":
    app()
