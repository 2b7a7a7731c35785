# ruff: noqa: TC003  # datetime needed at runtime for dataclass fields
"""Repository models.

This module defines the read-only snapshots of git objects that the
versioning context operates on. Snapshots are immutable for the duration
of one resolution.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Final, Self

DETACHED_HEAD_NAME: Final = "(no branch)"
"""Canonical name of the pseudo-branch reported for a detached HEAD."""

_LOCAL_BRANCH_PREFIX: Final = "refs/heads/"
_REMOTE_BRANCH_PREFIX: Final = "refs/remotes/"
_TAG_PREFIX: Final = "refs/tags/"


@dataclass(frozen=True, slots=True)
class Commit:
    """Information about a single commit.

    Commits compare equal by SHA only.

    Attributes:
        sha: Full 40-character commit SHA hex string (lowercase).
        message: Complete commit message (subject + body).
        author_name: Author name from commit.
        author_email: Author email from commit.
        timestamp: Commit timestamp as timezone-aware datetime.
        parent_shas: SHA hex strings of parent commits (empty tuple for initial commit).
    """

    sha: str
    message: str = field(default="", compare=False)
    author_name: str = field(default="", compare=False)
    author_email: str = field(default="", compare=False)
    timestamp: datetime | None = field(default=None, compare=False)
    parent_shas: tuple[str, ...] = field(default=(), compare=False)

    @property
    def short_sha(self) -> str:
        """First seven characters of the SHA."""
        return self.sha[:7]


@dataclass(frozen=True, slots=True)
class Branch:
    """A named branch reference.

    Attributes:
        canonical_name: Full reference name (``refs/heads/main``,
            ``refs/remotes/origin/main``) or ``(no branch)`` for a detached HEAD.
        friendly_name: Short name (``main``, ``origin/main``).
        tip: Commit the branch points at, or None for an unborn branch.
        is_remote: True for remote-tracking references.
        is_tracking: True for local branches with an upstream configured.
        remote_name: Remote of a remote-tracking reference (``origin``).
    """

    canonical_name: str
    friendly_name: str
    tip: Commit | None = None
    is_remote: bool = False
    is_tracking: bool = False
    remote_name: str | None = None

    @classmethod
    def local(
        cls, name: str, tip: Commit | None = None, *, is_tracking: bool = False
    ) -> Self:
        """Create a local branch snapshot from its short name."""
        return cls(
            canonical_name=f"{_LOCAL_BRANCH_PREFIX}{name}",
            friendly_name=name,
            tip=tip,
            is_tracking=is_tracking,
        )

    @classmethod
    def remote(cls, remote_name: str, name: str, tip: Commit | None = None) -> Self:
        """Create a remote-tracking branch snapshot."""
        friendly = f"{remote_name}/{name}"
        return cls(
            canonical_name=f"{_REMOTE_BRANCH_PREFIX}{friendly}",
            friendly_name=friendly,
            tip=tip,
            is_remote=True,
            remote_name=remote_name,
        )

    @classmethod
    def detached(cls, tip: Commit) -> Self:
        """Create the pseudo-branch reported when HEAD is detached."""
        return cls(
            canonical_name=DETACHED_HEAD_NAME,
            friendly_name=DETACHED_HEAD_NAME,
            tip=tip,
        )

    @property
    def is_detached_head(self) -> bool:
        """True if this is the detached HEAD pseudo-branch."""
        return self.canonical_name == DETACHED_HEAD_NAME

    @property
    def name_without_remote(self) -> str:
        """Friendly name with any ``<remote>/`` prefix removed."""
        if self.is_remote and self.remote_name:
            return self.friendly_name.removeprefix(f"{self.remote_name}/")
        return self.friendly_name


@dataclass(frozen=True, slots=True)
class Tag:
    """A tag reference.

    Attributes:
        canonical_name: Full reference name (``refs/tags/v1.0.0``).
        friendly_name: Short tag name (``v1.0.0``).
        peeled_target: Commit the tag ultimately refers to after resolving
            annotated-tag indirection, or None if it does not point at a commit.
    """

    canonical_name: str
    friendly_name: str
    peeled_target: Commit | None = None

    @classmethod
    def named(cls, name: str, target: Commit | None) -> Self:
        """Create a tag snapshot from its short name."""
        return cls(
            canonical_name=f"{_TAG_PREFIX}{name}",
            friendly_name=name,
            peeled_target=target,
        )
