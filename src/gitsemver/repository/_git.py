"""Dulwich-backed repository provider.

This module provides GitRepository, a read-only view over a git repository on
disk exposing the branches, tags and commits needed to resolve a versioning
context.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Final, Self, cast

from dulwich.errors import NotGitRepository
from dulwich.objects import Commit as DulwichCommit, Tag as DulwichTag
from dulwich.refs import SYMREF
from dulwich.repo import Repo

from gitsemver.exceptions import RepositoryNotFoundError
from gitsemver.repository._models import Branch, Commit, Tag
from gitsemver.utils import decode_bytes

if TYPE_CHECKING:
    from collections.abc import Iterator
    from types import TracebackType

_HEAD_REF: Final = b"HEAD"
_LOCAL_BASE: Final = b"refs/heads/"
_REMOTE_BASE: Final = b"refs/remotes/"
_TAG_BASE: Final = b"refs/tags/"
_SHA_LENGTH: Final = 40


class GitRepository:
    """Read-only access to a git repository through dulwich.

    The class implements the context manager protocol. Commit snapshots are
    cached per instance, so one instance should be used for one resolution.

    Attributes:
        root: The resolved path to the repository working tree.

    Example:
        >>> with GitRepository(Path(".")) as repo:
        ...     head = repo.head()
        ...     print(head.friendly_name if head else "no HEAD")
    """

    __slots__: Final = ("_commit_cache", "_repo", "_root")
    _root: Path
    _repo: Repo
    _commit_cache: dict[bytes, Commit]

    def __init__(self, working_dir: Path | None = None) -> None:
        """Open the repository containing ``working_dir``.

        Args:
            working_dir: Directory to start discovery from. If None, uses the
                current working directory.

        Raises:
            RepositoryNotFoundError: If no git repository contains the path.
        """
        if working_dir is None:
            working_dir = Path.cwd()
        try:
            self._repo = Repo.discover(str(working_dir))
        except NotGitRepository as e:
            resolved = working_dir.resolve()
            msg = f"Not inside a git repository: {resolved}"
            raise RepositoryNotFoundError(msg, path=resolved) from e
        self._root = Path(decode_bytes(self._repo.path)).resolve()
        self._commit_cache = {}

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

    def close(self) -> None:
        """Close the underlying dulwich Repo."""
        self._repo.close()

    @property
    def root(self) -> Path:
        """The absolute path to the repository root directory."""
        return self._root

    # =========================================================================
    # RepositoryProtocol Methods
    # =========================================================================

    def head(self) -> Branch | None:
        """Get the branch HEAD points at, or the detached pseudo-branch."""
        raw = self._repo.refs.read_ref(_HEAD_REF)
        if raw is None:
            return None
        if raw.startswith(SYMREF):
            return self._make_branch(raw[len(SYMREF) :].strip())
        commit = self._load_commit(raw.strip())
        if commit is None:
            return None
        return Branch.detached(commit)

    def branches(self) -> list[Branch]:
        """Get local branches followed by remote-tracking branches, sorted by name."""
        refnames = sorted(self._repo.refs.allkeys())
        branches: list[Branch] = []
        for base in (_LOCAL_BASE, _REMOTE_BASE):
            for refname in refnames:
                if not refname.startswith(base):
                    continue
                # refs/remotes/<remote>/HEAD is a symref, not a branch
                if base == _REMOTE_BASE and refname.endswith(b"/" + _HEAD_REF):
                    continue
                branches.append(self._make_branch(refname))
        return branches

    def commits(self) -> Iterator[Commit]:
        """Iterate all commits reachable from any reference, newest first."""
        tips = sorted(self._reachable_tips())
        if not tips:
            return
        for entry in self._repo.get_walker(include=tips):
            yield self._to_commit(cast("DulwichCommit", entry.commit))

    def tags(self) -> list[Tag]:
        """Get all tags sorted by name, with annotated tags peeled."""
        tags: list[Tag] = []
        for refname in sorted(self._repo.refs.allkeys()):
            if not refname.startswith(_TAG_BASE):
                continue
            try:
                sha = self._repo.refs[refname]
            except KeyError:
                continue
            target = self._peel(sha)
            commit = self._load_commit(target) if target is not None else None
            tags.append(Tag.named(decode_bytes(refname[len(_TAG_BASE) :]), commit))
        return tags

    def get_commit(self, sha: str) -> Commit | None:
        """Look up a commit by its full SHA (case-insensitive)."""
        if len(sha) != _SHA_LENGTH:
            return None
        try:
            _ = bytes.fromhex(sha)
        except ValueError:
            return None
        return self._load_commit(sha.lower().encode("ascii"))

    # =========================================================================
    # Private Helper Methods
    # =========================================================================

    def _make_branch(self, refname: bytes) -> Branch:
        """Build a branch snapshot for a full reference name."""
        try:
            sha: bytes | None = self._repo.refs[refname]
        except KeyError:
            # Unborn branch (e.g. HEAD of an empty repository)
            sha = None
        tip = self._load_commit(sha) if sha is not None else None

        if refname.startswith(_LOCAL_BASE):
            name = decode_bytes(refname[len(_LOCAL_BASE) :])
            return Branch.local(name, tip, is_tracking=self._is_tracking(name))
        if refname.startswith(_REMOTE_BASE):
            remote, _, name = decode_bytes(refname[len(_REMOTE_BASE) :]).partition("/")
            return Branch.remote(remote, name, tip)
        name = decode_bytes(refname)
        return Branch(canonical_name=name, friendly_name=name, tip=tip)

    def _is_tracking(self, name: str) -> bool:
        """Check whether a local branch has an upstream remote configured."""
        config = self._repo.get_config()
        try:
            _ = config.get((b"branch", name.encode()), b"remote")
        except KeyError:
            return False
        return True

    def _reachable_tips(self) -> set[bytes]:
        """Collect the peeled commit SHA of every reference."""
        tips: set[bytes] = set()
        for refname in self._repo.refs.allkeys():
            try:
                sha = self._repo.refs[refname]
            except KeyError:
                continue
            peeled = self._peel(sha)
            if peeled is not None:
                tips.add(peeled)
        return tips

    def _peel(self, sha: bytes) -> bytes | None:
        """Resolve annotated tags until a commit is reached.

        Returns:
            The commit SHA, or None if the chain does not end at a commit.
        """
        try:
            obj = self._repo[sha]
            while isinstance(obj, DulwichTag):
                _, target = cast("tuple[type, bytes]", obj.object)
                obj = self._repo[target]
        except KeyError:
            return None
        if isinstance(obj, DulwichCommit):
            return obj.id
        return None

    def _load_commit(self, sha: bytes) -> Commit | None:
        """Load a commit snapshot by hex SHA, using the per-instance cache."""
        cached = self._commit_cache.get(sha)
        if cached is not None:
            return cached
        try:
            obj = self._repo[sha]
        except KeyError:
            return None
        if not isinstance(obj, DulwichCommit):
            return None
        return self._to_commit(obj)

    def _to_commit(self, commit: DulwichCommit) -> Commit:
        """Convert a dulwich commit object to a Commit snapshot."""
        commit_id = cast("bytes", commit.id)
        cached = self._commit_cache.get(commit_id)
        if cached is not None:
            return cached

        author_str = cast("bytes", commit.author).decode("utf-8", errors="replace")
        # Parse "Name <email>" format
        if "<" in author_str and author_str.endswith(">"):
            name_part, _, email_part = author_str.rpartition("<")
            author_name = name_part.strip()
            author_email = email_part.rstrip(">")
        else:
            author_name = author_str
            author_email = ""

        # dulwich stores the offset in seconds east of UTC
        tz = timezone(timedelta(seconds=cast("int", commit.commit_timezone)))
        timestamp = datetime.fromtimestamp(cast("int", commit.commit_time), tz=tz)

        snapshot = Commit(
            sha=decode_bytes(commit_id),
            message=cast("bytes", commit.message).decode("utf-8", errors="replace"),
            author_name=author_name,
            author_email=author_email,
            timestamp=timestamp,
            parent_shas=tuple(decode_bytes(p) for p in cast("list[bytes]", commit.parents)),
        )
        self._commit_cache[commit_id] = snapshot
        return snapshot
