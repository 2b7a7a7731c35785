"""Repository access.

This package provides read-only snapshots of a git repository's commits,
branches and tags, and the protocol the versioning context consumes.

Classes:
    GitRepository: dulwich-backed repository provider.
    FakeRepository: In-memory repository for tests.
    RepositoryProtocol: Runtime-checkable protocol for dependency injection.
    RepositoryMetadataProvider: Ancestry queries over the commit graph.

Models:
    Commit: A single commit snapshot.
    Branch: A branch reference (local, remote-tracking or detached HEAD).
    Tag: A tag reference with its peeled target commit.

Example:
    >>> from gitsemver.repository import GitRepository
    >>> with GitRepository() as repo:
    ...     head = repo.head()
"""

from gitsemver.repository._fake import FakeRepository
from gitsemver.repository._git import GitRepository
from gitsemver.repository._metadata import RepositoryMetadataProvider
from gitsemver.repository._models import DETACHED_HEAD_NAME, Branch, Commit, Tag
from gitsemver.repository._protocol import RepositoryProtocol

__all__ = [
    "DETACHED_HEAD_NAME",
    "Branch",
    "Commit",
    "FakeRepository",
    "GitRepository",
    "RepositoryMetadataProvider",
    "RepositoryProtocol",
    "Tag",
]
