"""Versioning context construction.

A VersioningContext is built once per invocation. It records the branch
and commit being versioned, any version already tagged on that commit, and
the effective configuration for the branch. Construction either succeeds
completely or raises; there is no partially built context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gitsemver.config import RegexBranchConfigurationResolver
from gitsemver.context._diagnostics import DiagnosticsCollector
from gitsemver.context._effective import merge_effective_configuration
from gitsemver.context._selector import resolve_target
from gitsemver.context._tagged import detect_tagged_version
from gitsemver.repository import RepositoryMetadataProvider

if TYPE_CHECKING:
    from gitsemver.config import (
        BranchConfigurationResolver,
        Config,
        EffectiveConfiguration,
    )
    from gitsemver.context._diagnostics import Diagnostic, DiagnosticsSink
    from gitsemver.repository import Branch, Commit, RepositoryProtocol
    from gitsemver.semver import SemanticVersion


@dataclass(frozen=True, slots=True)
class VersioningContext:
    """The resolved input to version computation.

    Two contexts compare equal when they select the same branch and commit
    under the same configuration and tagged version. The repository handle,
    metadata provider and diagnostics are not compared.

    Attributes:
        repository: The repository the context was resolved against.
        full_configuration: The global configuration used.
        configuration: The effective configuration for the current branch.
        current_branch: The branch reported as current.
        current_commit: The commit being versioned.
        current_commit_tagged_version: Highest version tagged on the commit.
        only_evaluate_tracked_branches: Whether only tracking branches were
            considered when resolving a detached HEAD.
        repository_metadata_provider: Ancestry queries for downstream use.
        diagnostics: Events emitted while resolving, oldest first.
    """

    repository: RepositoryProtocol = field(compare=False)
    full_configuration: Config
    configuration: EffectiveConfiguration
    current_branch: Branch
    current_commit: Commit
    current_commit_tagged_version: SemanticVersion | None
    only_evaluate_tracked_branches: bool
    repository_metadata_provider: RepositoryMetadataProvider = field(compare=False)
    diagnostics: tuple[Diagnostic, ...] = field(default=(), compare=False)

    @property
    def is_current_commit_tagged(self) -> bool:
        """True if a version tag points directly at the current commit."""
        return self.current_commit_tagged_version is not None


def build_context(  # noqa: PLR0913
    repository: RepositoryProtocol,
    config: Config,
    *,
    branch_name: str | None = None,
    branch: Branch | None = None,
    commit_id: str | None = None,
    only_evaluate_tracked_branches: bool = True,
    resolver: BranchConfigurationResolver | None = None,
    diagnostics: DiagnosticsSink | None = None,
) -> VersioningContext:
    """Resolve the versioning context for a repository.

    The configuration is used as given. Apply ``Config.with_defaults()``
    first unless every required value is already set.

    Args:
        repository: The repository to version.
        config: The global configuration.
        branch_name: Name of the branch to version. Defaults to HEAD.
        branch: An already resolved branch. Takes precedence over
            ``branch_name``.
        commit_id: Full SHA of the commit to version. Defaults to the
            branch tip.
        only_evaluate_tracked_branches: Only consider tracking branches
            when resolving a detached HEAD.
        resolver: Branch override resolver. Defaults to
            RegexBranchConfigurationResolver.
        diagnostics: Sink receiving lookup notices as they happen.

    Returns:
        The resolved context.

    Raises:
        BranchResolutionError: If no branch or commit can be determined.
        ConfigurationMissingError: If a required configuration value is
            unset.
    """
    collector = DiagnosticsCollector(forward_to=diagnostics)
    metadata = RepositoryMetadataProvider(repository)

    current_branch, current_commit = resolve_target(
        repository,
        metadata,
        collector,
        branch_name=branch_name,
        branch=branch,
        commit_id=commit_id,
        only_evaluate_tracked_branches=only_evaluate_tracked_branches,
    )

    if resolver is None:
        resolver = RegexBranchConfigurationResolver()
    branch_config = resolver.resolve(current_branch, config)
    effective = merge_effective_configuration(config, branch_config)

    tagged_version = detect_tagged_version(
        repository, current_commit, effective.tag_prefix
    )

    return VersioningContext(
        repository=repository,
        full_configuration=config,
        configuration=effective,
        current_branch=current_branch,
        current_commit=current_commit,
        current_commit_tagged_version=tagged_version,
        only_evaluate_tracked_branches=only_evaluate_tracked_branches,
        repository_metadata_provider=metadata,
        diagnostics=tuple(collector.diagnostics),
    )
