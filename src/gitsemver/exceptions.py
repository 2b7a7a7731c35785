"""gitsemver exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class GitSemverError(Exception):
    """Base exception for gitsemver errors."""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(GitSemverError):
    """Base exception for configuration errors.

    Configuration errors are fatal: they abort construction of a
    versioning context.
    """


class ConfigurationMissingError(ConfigError):
    """Raised when a required configuration value is unset after merging.

    Attributes:
        field: Attribute name of the missing configuration value.
        branch: Name of the branch override being merged, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str,
        branch: str | None = None,
    ) -> None:
        """Initialize with error message and field context.

        Args:
            message: Human-readable error message.
            field: Attribute name of the value that is unset.
            branch: Name of the branch the configuration was merged for.
        """
        super().__init__(message)
        self.field: str = field
        self.branch: str | None = branch


class BranchResolutionError(ConfigError):
    """Raised when no branch can be determined to operate on.

    Attributes:
        branch_name: The requested branch name, if any.
    """

    def __init__(self, message: str, *, branch_name: str | None = None) -> None:
        """Initialize with error message and branch context.

        Args:
            message: Human-readable error message.
            branch_name: The requested branch name, if any.
        """
        super().__init__(message)
        self.branch_name: str | None = branch_name


class AmbiguousBranchError(BranchResolutionError):
    """Raised when a requested branch name matches more than one branch.

    Attributes:
        candidates: Canonical names of all matching branches.
    """

    def __init__(
        self,
        message: str,
        *,
        branch_name: str,
        candidates: tuple[str, ...],
    ) -> None:
        """Initialize with error message and the matching candidates.

        Args:
            message: Human-readable error message.
            branch_name: The requested branch name.
            candidates: Canonical names of all matching branches.
        """
        super().__init__(message, branch_name=branch_name)
        self.candidates: tuple[str, ...] = candidates


# =============================================================================
# Repository Exceptions
# =============================================================================


class RepositoryError(GitSemverError):
    """Base exception for repository access errors."""


class RepositoryNotFoundError(RepositoryError):
    """Raised when no git repository can be found.

    Attributes:
        path: The path that was searched.
    """

    def __init__(self, message: str, *, path: Path) -> None:
        """Initialize with error message and path context.

        Args:
            message: Human-readable error message.
            path: The path that was searched.
        """
        super().__init__(message)
        self.path: Path = path


# =============================================================================
# Version Exceptions
# =============================================================================


class SemanticVersionError(GitSemverError, ValueError):
    """Raised when a string cannot be parsed as a semantic version.

    Attributes:
        value: The raw string that failed to parse.
    """

    def __init__(self, message: str, *, value: str) -> None:
        """Initialize with error message and the offending value.

        Args:
            message: Human-readable error message.
            value: The raw string that failed to parse.
        """
        super().__init__(message)
        self.value: str = value
