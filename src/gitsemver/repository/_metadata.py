"""Repository topology queries.

This module answers graph questions about the commit history that are not
simple reference lookups, such as which branches contain a given commit.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gitsemver.repository._models import Branch, Commit
    from gitsemver.repository._protocol import RepositoryProtocol


class RepositoryMetadataProvider:
    """Ancestry queries over a repository's commit graph.

    Ancestor sets are computed by walking parent links from each branch tip
    and are cached per tip for the lifetime of the provider.

    Attributes:
        repository: The repository queried.
    """

    __slots__ = ("_ancestors", "repository")

    def __init__(self, repository: RepositoryProtocol) -> None:
        self.repository: RepositoryProtocol = repository
        self._ancestors: dict[str, frozenset[str]] = {}

    def get_branches_containing_commit(
        self,
        commit: Commit,
        branches: Iterable[Branch],
        *,
        only_tracked_branches: bool,
    ) -> list[Branch]:
        """Find the branches whose history contains ``commit``.

        The detached HEAD pseudo-branch and branches without a tip are never
        candidates.

        Args:
            commit: The commit to look for.
            branches: Candidate branches.
            only_tracked_branches: If True, only branches with an upstream
                configured are considered.

        Returns:
            Matching branches in the order they were given.
        """
        matches: list[Branch] = []
        for branch in branches:
            if branch.is_detached_head or branch.tip is None:
                continue
            if only_tracked_branches and not branch.is_tracking:
                continue
            if commit.sha in self.get_ancestor_shas(branch.tip):
                matches.append(branch)
        return matches

    def get_ancestor_shas(self, tip: Commit) -> frozenset[str]:
        """Get the SHAs of ``tip`` and every commit reachable from it."""
        cached = self._ancestors.get(tip.sha)
        if cached is not None:
            return cached

        seen: set[str] = {tip.sha}
        queue: deque[Commit] = deque([tip])
        while queue:
            current = queue.popleft()
            for parent_sha in current.parent_shas:
                if parent_sha in seen:
                    continue
                seen.add(parent_sha)
                parent = self.repository.get_commit(parent_sha)
                # Missing parents (shallow clones) end the walk on that path
                if parent is not None:
                    queue.append(parent)

        ancestors = frozenset(seen)
        self._ancestors[tip.sha] = ancestors
        return ancestors
