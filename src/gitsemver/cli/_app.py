"""The command-line interface for gitsemver."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console
from rich.markup import escape

from gitsemver.config import Config, LogFormat, LogLevel
from gitsemver.context import StructlogDiagnosticsSink, build_context
from gitsemver.exceptions import ConfigError, RepositoryError
from gitsemver.repository import GitRepository
from gitsemver.utils import create_logger

from ._exit_codes import EXIT_CONFIG_ERROR, EXIT_REPOSITORY_ERROR
from ._formatters import context_to_dict, format_json, format_table

_HELP = "Resolve the versioning context of a git repository."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Create the gitsemver CLI application.

    Args:
        console: Console for regular output.
        error_console: Console for error messages.
        exit_on_error: Whether cyclopts exits on argument errors.

    Returns:
        The configured cyclopts App.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="gitsemver",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.command(name="context")
    def _context(  # noqa: PLR0913
        *,
        repo: Annotated[
            Path | None, Parameter(name="--repo", help="Path inside the repository")
        ] = None,
        branch: Annotated[
            str | None, Parameter(name="--branch", help="Branch to version")
        ] = None,
        commit: Annotated[
            str | None, Parameter(name="--commit", help="Full SHA of the commit to version")
        ] = None,
        all_branches: Annotated[
            bool,
            Parameter(
                name="--all-branches",
                help="Consider untracked branches when HEAD is detached",
            ),
        ] = False,
        as_json: Annotated[
            bool, Parameter(name="--json", help="Print the context as JSON")
        ] = False,
        log_level: Annotated[
            LogLevel, Parameter(name="--log-level", help="Diagnostics log level")
        ] = LogLevel.WARNING,
        log_format: Annotated[
            LogFormat, Parameter(name="--log-format", help="Diagnostics log format")
        ] = LogFormat.TEXT,
        log_file: Annotated[
            Path | None,
            Parameter(name="--log-file", help="Append diagnostics to this file instead of stderr"),
        ] = None,
    ) -> None:
        """Resolve and print the versioning context.

        Args:
            repo: Path inside the repository. Defaults to the current directory.
            branch: Branch to version. Defaults to HEAD.
            commit: Full SHA of the commit to version. Defaults to the branch tip.
            all_branches: Consider untracked branches when HEAD is detached.
            as_json: Print the context as JSON.
            log_level: Diagnostics log level.
            log_format: Diagnostics log format.
            log_file: File diagnostics are appended to. Defaults to stderr.
        """
        logger = create_logger(
            level=log_level.value,
            log_format=log_format.value,  # type: ignore[arg-type]
            log_file=str(log_file) if log_file is not None else "",
            command="context",
        )

        try:
            with GitRepository(repo) as repository:
                context = build_context(
                    repository,
                    Config().with_defaults(),
                    branch_name=branch,
                    commit_id=commit,
                    only_evaluate_tracked_branches=not all_branches,
                    diagnostics=StructlogDiagnosticsSink(logger),
                )
        except RepositoryError as e:
            logger.error("repository_error", message=str(e))
            error_console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise SystemExit(EXIT_REPOSITORY_ERROR) from e
        except ConfigError as e:
            logger.error("config_error", message=str(e))
            error_console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise SystemExit(EXIT_CONFIG_ERROR) from e

        if as_json:
            print(format_json(context_to_dict(context)))  # noqa: T201
        else:
            console.print(format_table(context))

    return app


def main() -> None:
    """Default entrypoint for the `gitsemver` CLI."""
    app = create_app()
    app()
