"""Branch and commit selection.

Determines which branch and commit a versioning context operates on,
including the fallback for a detached HEAD.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitsemver.exceptions import AmbiguousBranchError, BranchResolutionError

if TYPE_CHECKING:
    from gitsemver.context._diagnostics import DiagnosticsCollector
    from gitsemver.repository import (
        Branch,
        Commit,
        RepositoryMetadataProvider,
        RepositoryProtocol,
    )


def resolve_target_branch(
    repository: RepositoryProtocol,
    branch_name: str | None,
    diagnostics: DiagnosticsCollector,
) -> Branch | None:
    """Resolve the branch to operate on from an optional name.

    HEAD is assumed to point at the desired branch. When a name is given
    that differs from HEAD's canonical name, the branch whose canonical
    name, friendly name or name without remote equals it is used instead.

    Args:
        repository: The repository to search.
        branch_name: The requested branch name, if any.
        diagnostics: Receives a notice when the name matches no branch.

    Returns:
        The resolved branch, or HEAD's branch (possibly None) as fallback.

    Raises:
        AmbiguousBranchError: If the name matches more than one branch.
    """
    head = repository.head()
    if not branch_name:
        return head
    if head is not None and head.canonical_name == branch_name:
        return head

    candidates = [
        branch
        for branch in repository.branches()
        if branch_name
        in (branch.canonical_name, branch.friendly_name, branch.name_without_remote)
    ]
    if len(candidates) > 1:
        names = tuple(branch.canonical_name for branch in candidates)
        msg = f"Branch name '{branch_name}' is ambiguous, it matches: {', '.join(names)}"
        raise AmbiguousBranchError(msg, branch_name=branch_name, candidates=names)
    if not candidates:
        diagnostics.info(
            "branch_not_found",
            f"Branch '{branch_name}' not found, using HEAD",
            branch_name=branch_name,
        )
        return head
    return candidates[0]


def select_commit(
    repository: RepositoryProtocol,
    branch: Branch,
    commit_id: str | None,
    diagnostics: DiagnosticsCollector,
) -> Commit | None:
    """Select the commit to operate on.

    An explicit commit id is matched case-insensitively against every
    commit; if it is not found, the branch tip is used.

    Args:
        repository: The repository to search.
        branch: The resolved branch.
        commit_id: Full SHA of an explicit commit, if any.
        diagnostics: Receives search and fallback notices.

    Returns:
        The selected commit, or None if the branch has no tip.
    """
    if commit_id and commit_id.strip():
        diagnostics.info(
            "commit_search",
            f"Searching for specific commit '{commit_id}'",
            commit_id=commit_id,
        )
        wanted = commit_id.casefold()
        for commit in repository.commits():
            if commit.sha.casefold() == wanted:
                return commit
        diagnostics.warning(
            "commit_not_found",
            f"Commit '{commit_id}' specified but not found",
            commit_id=commit_id,
        )

    diagnostics.info(
        "using_branch_tip",
        "Using latest commit on specified branch",
        branch=branch.friendly_name,
    )
    return branch.tip


def resolve_current_branch(
    repository: RepositoryProtocol,
    branch: Branch,
    commit: Commit,
    metadata: RepositoryMetadataProvider,
    diagnostics: DiagnosticsCollector,
    *,
    only_evaluate_tracked_branches: bool,
) -> Branch:
    """Determine the branch reported as current.

    For a detached HEAD, the single branch containing ``commit`` replaces
    the pseudo-branch. When no branch or several branches contain it, the
    pseudo-branch is kept rather than guessing.

    Args:
        repository: The repository to search.
        branch: The resolved branch.
        commit: The selected commit.
        metadata: Provider answering containment queries.
        diagnostics: Receives a notice when a detached HEAD is resolved.
        only_evaluate_tracked_branches: Only consider tracking branches.

    Returns:
        The current branch.
    """
    if not branch.is_detached_head:
        return branch

    containing = metadata.get_branches_containing_commit(
        commit,
        repository.branches(),
        only_tracked_branches=only_evaluate_tracked_branches,
    )
    if len(containing) != 1:
        return branch

    current = containing[0]
    diagnostics.info(
        "detached_head_resolved",
        f"HEAD is detached, using branch '{current.friendly_name}' containing commit {commit.short_sha}",
        branch=current.friendly_name,
        commit=commit.sha,
    )
    return current


def resolve_target(
    repository: RepositoryProtocol,
    metadata: RepositoryMetadataProvider,
    diagnostics: DiagnosticsCollector,
    *,
    branch_name: str | None = None,
    branch: Branch | None = None,
    commit_id: str | None = None,
    only_evaluate_tracked_branches: bool = True,
) -> tuple[Branch, Commit]:
    """Resolve the (branch, commit) pair a versioning context operates on.

    Args:
        repository: The repository to search.
        metadata: Provider answering containment queries.
        diagnostics: Receives lookup notices.
        branch_name: Requested branch name, used when ``branch`` is None.
        branch: An already resolved branch.
        commit_id: Full SHA of an explicit commit, if any.
        only_evaluate_tracked_branches: Only consider tracking branches when
            resolving a detached HEAD.

    Returns:
        The current branch and the selected commit.

    Raises:
        BranchResolutionError: If no branch can be determined or the branch
            has no commits.
        AmbiguousBranchError: If ``branch_name`` matches several branches.
    """
    if branch is None:
        branch = resolve_target_branch(repository, branch_name, diagnostics)
    if branch is None:
        msg = "Need a branch to operate on"
        raise BranchResolutionError(msg, branch_name=branch_name)

    commit = select_commit(repository, branch, commit_id, diagnostics)
    if commit is None:
        msg = f"Branch '{branch.friendly_name}' has no commits"
        raise BranchResolutionError(msg, branch_name=branch.friendly_name)

    current = resolve_current_branch(
        repository,
        branch,
        commit,
        metadata,
        diagnostics,
        only_evaluate_tracked_branches=only_evaluate_tracked_branches,
    )
    return current, commit
