"""Repository protocol for type-safe dependency injection.

This module defines the read-only interface the versioning context needs
from a git repository. Both the dulwich-backed GitRepository and the
in-memory FakeRepository satisfy it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from gitsemver.repository._models import Branch, Commit, Tag


@runtime_checkable
class RepositoryProtocol(Protocol):
    """Protocol for read-only repository access.

    Each call is treated as atomic. Returned snapshots are immutable.

    Example:
        >>> def latest(repo: RepositoryProtocol) -> Commit | None:
        ...     return next(iter(repo.commits()), None)
    """

    def close(self) -> None:
        """Release resources held by the repository."""
        ...

    def head(self) -> Branch | None:
        """Get the branch HEAD currently points at.

        Returns:
            The current branch, the detached pseudo-branch when HEAD refers
            directly to a commit, or None if HEAD cannot be read.
        """
        ...

    def branches(self) -> Sequence[Branch]:
        """Get all local and remote-tracking branches.

        The detached pseudo-branch is never included.
        """
        ...

    def commits(self) -> Iterable[Commit]:
        """Iterate all reachable commits, newest first."""
        ...

    def tags(self) -> Sequence[Tag]:
        """Get all tags with their peeled target commits."""
        ...

    def get_commit(self, sha: str) -> Commit | None:
        """Look up a commit by its full SHA.

        Args:
            sha: Full hex SHA of the commit.

        Returns:
            The commit, or None if no such commit exists.
        """
        ...
