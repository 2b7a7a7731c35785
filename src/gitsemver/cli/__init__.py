"""The command-line interface for gitsemver."""

from ._app import create_app, main
from ._exit_codes import EXIT_CONFIG_ERROR, EXIT_REPOSITORY_ERROR, EXIT_SUCCESS

__all__ = [
    "EXIT_CONFIG_ERROR",
    "EXIT_REPOSITORY_ERROR",
    "EXIT_SUCCESS",
    "create_app",
    "main",
]
