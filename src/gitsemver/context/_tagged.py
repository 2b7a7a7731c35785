"""Detection of a version already tagged on a commit."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitsemver.semver import max_version, try_parse

if TYPE_CHECKING:
    from gitsemver.repository import Commit, RepositoryProtocol
    from gitsemver.semver import SemanticVersion


def detect_tagged_version(
    repository: RepositoryProtocol,
    commit: Commit,
    tag_prefix: str | None,
) -> SemanticVersion | None:
    """Find the highest version tagged directly on ``commit``.

    Tags whose names do not parse as versions are skipped.

    Args:
        repository: The repository holding the tags.
        commit: The commit to inspect.
        tag_prefix: Regular expression stripped from tag names before
            parsing.

    Returns:
        The maximum tagged version, or None if the commit carries none.
    """
    versions = [
        version
        for tag in repository.tags()
        if tag.peeled_target == commit
        and (version := try_parse(tag.friendly_name, tag_prefix)) is not None
    ]
    return max_version(versions)
