"""Fake repository for testing.

This module provides a FakeRepository class that implements RepositoryProtocol
for use in tests without requiring an actual Git repository.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from types import TracebackType
from typing import Self

from gitsemver.repository._models import Branch, Commit, Tag

_EPOCH = datetime(2024, 1, 1, tzinfo=UTC)


@dataclass(slots=True)
class FakeRepository:
    """In-memory git object graph for testing.

    Implements RepositoryProtocol without requiring an actual Git repository.
    Helper methods build up a commit graph, branches and tags, and move HEAD.

    Example:
        >>> repo = FakeRepository()
        >>> root = repo.add_commit("Initial commit")
        >>> main = repo.add_branch("main", root)
        >>> repo.checkout(main)
        >>> assert repo.head() == main
    """

    _commits: list[Commit] = field(default_factory=list)
    _commits_by_sha: dict[str, Commit] = field(default_factory=dict)
    _branches: list[Branch] = field(default_factory=list)
    _tags: list[Tag] = field(default_factory=list)
    _head: Branch | None = field(default=None)
    _commit_counter: int = field(default=0)

    # =========================================================================
    # Context Manager Protocol
    # =========================================================================

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    # =========================================================================
    # RepositoryProtocol Methods
    # =========================================================================

    def close(self) -> None:
        """Close the repository (no-op for fake)."""

    def head(self) -> Branch | None:
        return self._head

    def branches(self) -> Sequence[Branch]:
        return tuple(self._branches)

    def commits(self) -> Sequence[Commit]:
        """Get all commits, newest first."""
        return tuple(self._commits)

    def tags(self) -> Sequence[Tag]:
        return tuple(self._tags)

    def get_commit(self, sha: str) -> Commit | None:
        return self._commits_by_sha.get(sha)

    # =========================================================================
    # Test Helper Methods
    # =========================================================================

    def add_commit(
        self,
        message: str = "",
        *,
        parents: Sequence[Commit] = (),
        sha: str | None = None,
    ) -> Commit:
        """Add a commit to the graph.

        Args:
            message: Commit message.
            parents: Parent commits (empty for a root commit).
            sha: Explicit SHA. Generated sequentially if None.

        Returns:
            The new commit.
        """
        self._commit_counter += 1
        if sha is None:
            sha = f"{self._commit_counter:040x}"
        commit = Commit(
            sha=sha,
            message=message,
            author_name="Fake Author",
            author_email="fake@example.com",
            timestamp=_EPOCH + timedelta(minutes=self._commit_counter),
            parent_shas=tuple(p.sha for p in parents),
        )
        self._commits.insert(0, commit)  # Newest first
        self._commits_by_sha[sha] = commit
        return commit

    def add_branch(
        self, name: str, tip: Commit | None, *, is_tracking: bool = False
    ) -> Branch:
        """Add a local branch pointing at ``tip``."""
        branch = Branch.local(name, tip, is_tracking=is_tracking)
        self._branches.append(branch)
        return branch

    def add_remote_branch(self, remote_name: str, name: str, tip: Commit) -> Branch:
        """Add a remote-tracking branch pointing at ``tip``."""
        branch = Branch.remote(remote_name, name, tip)
        self._branches.append(branch)
        return branch

    def add_tag(self, name: str, target: Commit | None) -> Tag:
        """Add a tag whose peeled target is ``target``."""
        tag = Tag.named(name, target)
        self._tags.append(tag)
        return tag

    def checkout(self, branch: Branch) -> None:
        """Point HEAD at ``branch``."""
        self._head = branch

    def detach(self, commit: Commit) -> Branch:
        """Point HEAD directly at ``commit``.

        Returns:
            The detached pseudo-branch now reported by head().
        """
        self._head = Branch.detached(commit)
        return self._head
