"""Merging global configuration with a branch override."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from gitsemver.config import EffectiveConfiguration
from gitsemver.exceptions import ConfigurationMissingError

if TYPE_CHECKING:
    from gitsemver.config import BranchConfig, Config


@dataclass(frozen=True, slots=True)
class _RequiredValue:
    attribute: str
    label: str
    from_branch: bool


# Values without which an effective configuration cannot be built. Branch
# values are filled by the branch configuration resolver, global values by
# Config.with_defaults().
REQUIRED_VALUES: Final[tuple[_RequiredValue, ...]] = (
    _RequiredValue("versioning_mode", "Versioning mode", from_branch=True),
    _RequiredValue("increment", "Increment", from_branch=True),
    _RequiredValue(
        "prevent_increment_of_merged_branch_version",
        "PreventIncrementOfMergedBranchVersion",
        from_branch=True,
    ),
    _RequiredValue("track_merge_target", "TrackMergeTarget", from_branch=True),
    _RequiredValue("tracks_release_branches", "TracksReleaseBranches", from_branch=True),
    _RequiredValue("is_release_branch", "IsReleaseBranch", from_branch=True),
    _RequiredValue("assembly_versioning_scheme", "AssemblyVersioningScheme", from_branch=False),
    _RequiredValue(
        "assembly_file_versioning_scheme",
        "AssemblyFileVersioningScheme",
        from_branch=False,
    ),
    _RequiredValue("commit_message_incrementing", "CommitMessageIncrementing", from_branch=False),
    _RequiredValue("legacy_semver_padding", "LegacySemVerPadding", from_branch=False),
    _RequiredValue("build_metadata_padding", "BuildMetaDataPadding", from_branch=False),
    _RequiredValue(
        "commits_since_version_source_padding",
        "CommitsSinceVersionSourcePadding",
        from_branch=False,
    ),
)


def check_required_values(config: Config, branch_config: BranchConfig) -> None:
    """Ensure every required value is set.

    Raises:
        ConfigurationMissingError: For the first required value that is
            unset, naming the value and the branch.
    """
    for required in REQUIRED_VALUES:
        source = branch_config if required.from_branch else config
        if getattr(source, required.attribute) is not None:
            continue
        if required.from_branch:
            msg = (
                f"Configuration value for '{required.label}' for branch "
                f"'{branch_config.name}' has no value"
            )
        else:
            msg = (
                f"Configuration value for '{required.label}' has no value "
                f"(resolving branch '{branch_config.name}')"
            )
        raise ConfigurationMissingError(
            msg, field=required.attribute, branch=branch_config.name
        )


def merge_effective_configuration(
    config: Config, branch_config: BranchConfig
) -> EffectiveConfiguration:
    """Combine global configuration and a resolved branch override.

    Branch-level values come from the override. Everything else comes from
    the global configuration, except commit message incrementing, where a
    branch value wins over the global one.

    Args:
        config: The global configuration, usually with defaults applied.
        branch_config: The override returned by the branch resolver.

    Returns:
        The fully resolved configuration.

    Raises:
        ConfigurationMissingError: If a required value is unset.
    """
    check_required_values(config, branch_config)

    return EffectiveConfiguration(
        assembly_versioning_scheme=config.assembly_versioning_scheme,  # pyright: ignore[reportArgumentType]
        assembly_file_versioning_scheme=config.assembly_file_versioning_scheme,  # pyright: ignore[reportArgumentType]
        assembly_informational_format=config.assembly_informational_format,
        assembly_versioning_format=config.assembly_versioning_format,
        assembly_file_versioning_format=config.assembly_file_versioning_format,
        versioning_mode=branch_config.versioning_mode,  # pyright: ignore[reportArgumentType]
        tag_prefix=config.tag_prefix,
        tag=branch_config.tag,
        next_version=config.next_version,
        increment=branch_config.increment,  # pyright: ignore[reportArgumentType]
        branch_prefix_to_trim=branch_config.regex,
        prevent_increment_of_merged_branch_version=branch_config.prevent_increment_of_merged_branch_version,  # pyright: ignore[reportArgumentType]
        tag_number_pattern=branch_config.tag_number_pattern,
        continuous_delivery_fallback_tag=config.continuous_delivery_fallback_tag,
        track_merge_target=branch_config.track_merge_target,  # pyright: ignore[reportArgumentType]
        major_version_bump_message=config.major_version_bump_message,
        minor_version_bump_message=config.minor_version_bump_message,
        patch_version_bump_message=config.patch_version_bump_message,
        no_bump_message=config.no_bump_message,
        commit_message_incrementing=(
            branch_config.commit_message_incrementing
            if branch_config.commit_message_incrementing is not None
            else config.commit_message_incrementing
        ),  # pyright: ignore[reportArgumentType]
        legacy_semver_padding=config.legacy_semver_padding,  # pyright: ignore[reportArgumentType]
        build_metadata_padding=config.build_metadata_padding,  # pyright: ignore[reportArgumentType]
        commits_since_version_source_padding=config.commits_since_version_source_padding,  # pyright: ignore[reportArgumentType]
        version_filters=config.ignore.to_filters(),
        tracks_release_branches=branch_config.tracks_release_branches,  # pyright: ignore[reportArgumentType]
        is_release_branch=branch_config.is_release_branch,  # pyright: ignore[reportArgumentType]
        commit_date_format=config.commit_date_format,
        pre_release_weight=(
            branch_config.pre_release_weight
            if branch_config.pre_release_weight is not None
            else 0
        ),
    )
