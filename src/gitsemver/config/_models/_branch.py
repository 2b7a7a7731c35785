"""Branch override configuration model."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gitsemver.config._models._common import (
    CommitMessageIncrementMode,
    IncrementStrategy,
    VersioningMode,
    check_pattern,
    to_kebab,
)


class BranchConfig(BaseModel):
    """Versioning overrides for branches matching a pattern.

    Every versioning field is optional: None means "not decided here" and
    defers to the global configuration or the branch configuration resolver.

    Attributes:
        name: Name of the override (the key it is declared under).
        regex: Pattern matched against branch names.
        versioning_mode: Versioning mode for matching branches.
        tag: Pre-release label, ``{BranchName}`` expands to the branch name.
        increment: Version component to bump.
        prevent_increment_of_merged_branch_version: Do not bump versions
            taken from merge messages.
        tag_number_pattern: Pattern extracting a pre-release number from the
            branch name (e.g. a pull request number).
        track_merge_target: Consider tags on the merge target branch.
        commit_message_incrementing: Branch override of the global setting.
        tracks_release_branches: Branch tracks release branches (develop).
        is_release_branch: Branch is a release branch.
        is_mainline: Branch is the mainline in Mainline mode.
        pre_release_weight: Weight added to the pre-release number.
        source_branches: Names of overrides this branch may be created from.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_kebab,
    )

    name: str = ""
    regex: str | None = None
    versioning_mode: VersioningMode | None = Field(default=None, alias="mode")
    tag: str | None = None
    increment: IncrementStrategy | None = None
    prevent_increment_of_merged_branch_version: bool | None = None
    tag_number_pattern: str | None = None
    track_merge_target: bool | None = None
    commit_message_incrementing: CommitMessageIncrementMode | None = None
    tracks_release_branches: bool | None = None
    is_release_branch: bool | None = None
    is_mainline: bool | None = None
    pre_release_weight: int | None = None
    source_branches: tuple[str, ...] | None = None

    @field_validator("regex", "tag_number_pattern")
    @classmethod
    def _check_patterns(cls, value: str | None) -> str | None:
        return check_pattern(value)
