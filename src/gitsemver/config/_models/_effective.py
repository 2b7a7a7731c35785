"""Effective configuration model."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from gitsemver.config._filters import VersionFilter  # noqa: TC001
from gitsemver.config._models._common import (
    AssemblyFileVersioningScheme,
    AssemblyVersioningScheme,
    CommitMessageIncrementMode,
    IncrementStrategy,
    VersioningMode,
)


class EffectiveConfiguration(BaseModel):
    """Fully resolved configuration for one branch.

    Every field must be supplied at construction. Fields typed without
    ``| None`` reject None, so an instance never has an unset required value.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    assembly_versioning_scheme: AssemblyVersioningScheme
    assembly_file_versioning_scheme: AssemblyFileVersioningScheme
    assembly_informational_format: str | None
    assembly_versioning_format: str | None
    assembly_file_versioning_format: str | None
    versioning_mode: VersioningMode
    tag_prefix: str | None
    tag: str | None
    next_version: str | None
    increment: IncrementStrategy
    branch_prefix_to_trim: str | None
    prevent_increment_of_merged_branch_version: bool
    tag_number_pattern: str | None
    continuous_delivery_fallback_tag: str | None
    track_merge_target: bool
    major_version_bump_message: str | None
    minor_version_bump_message: str | None
    patch_version_bump_message: str | None
    no_bump_message: str | None
    commit_message_incrementing: CommitMessageIncrementMode
    legacy_semver_padding: int
    build_metadata_padding: int
    commits_since_version_source_padding: int
    version_filters: tuple[VersionFilter, ...]
    tracks_release_branches: bool
    is_release_branch: bool
    commit_date_format: str | None
    pre_release_weight: int
