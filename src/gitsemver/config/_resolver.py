"""Branch configuration resolution.

This module selects the branch override that applies to a branch and
completes it so that every branch-level value the effective configuration
needs is set.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from gitsemver.config._models import (
    BranchConfig,
    IncrementStrategy,
    VersioningMode,
)

if TYPE_CHECKING:
    from gitsemver.config._models import Config
    from gitsemver.repository import Branch

FALLBACK_TAG = "{BranchName}"


@lru_cache(maxsize=64)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


@runtime_checkable
class BranchConfigurationResolver(Protocol):
    """Protocol for choosing the branch override that applies to a branch.

    Implementations must return an override whose versioning mode,
    increment, prevent-increment-of-merged-branch-version,
    track-merge-target, tracks-release-branches and is-release-branch
    values are all set.
    """

    def resolve(self, branch: Branch, config: Config) -> BranchConfig:
        """Resolve the branch override for ``branch``.

        Args:
            branch: The branch being versioned.
            config: The global configuration holding the overrides.

        Returns:
            The completed branch override.
        """
        ...


class RegexBranchConfigurationResolver:
    """Resolves branch overrides by regular expression.

    The first override, in declaration order, whose ``regex`` matches the
    branch name (without remote prefix) or its friendly name wins. Branches
    no override matches get a fallback override named after the branch.
    Unset branch-level values are taken from the global configuration, or
    fall back to ``Inherit``/``ContinuousDelivery``/``False``.
    """

    def resolve(self, branch: Branch, config: Config) -> BranchConfig:
        matched = self.find_matching(branch, config)
        if matched is None:
            matched = BranchConfig(name=branch.name_without_remote, tag=FALLBACK_TAG)
        return self.complete(matched, config)

    def find_matching(self, branch: Branch, config: Config) -> BranchConfig | None:
        """Find the first branch override whose pattern matches ``branch``."""
        names = (branch.name_without_remote, branch.friendly_name)
        for branch_config in config.branches.values():
            if branch_config.regex is None:
                continue
            pattern = _compile(branch_config.regex)
            if any(pattern.search(name) for name in names):
                return branch_config
        return None

    def complete(self, branch_config: BranchConfig, config: Config) -> BranchConfig:
        """Fill unset branch-level values of ``branch_config``."""
        updates: dict[str, object] = {}
        if branch_config.versioning_mode is None:
            updates["versioning_mode"] = (
                config.versioning_mode or VersioningMode.CONTINUOUS_DELIVERY
            )
        if branch_config.increment is None:
            updates["increment"] = config.increment or IncrementStrategy.INHERIT
        for flag in (
            "prevent_increment_of_merged_branch_version",
            "track_merge_target",
            "tracks_release_branches",
            "is_release_branch",
        ):
            if getattr(branch_config, flag) is None:
                updates[flag] = False
        if not updates:
            return branch_config
        return branch_config.model_copy(update=updates)
