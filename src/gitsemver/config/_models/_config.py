# pyright: reportExplicitAny=false, reportAny=false
"""Global versioning configuration."""

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from gitsemver.config._defaults import DEFAULT_CONFIG
from gitsemver.config._merge import deep_merge
from gitsemver.config._models._branch import BranchConfig
from gitsemver.config._models._common import (
    AssemblyFileVersioningScheme,
    AssemblyVersioningScheme,
    CommitMessageIncrementMode,
    IncrementStrategy,
    VersioningMode,
    check_pattern,
    to_kebab,
)
from gitsemver.config._models._ignore import IgnoreConfig


class Config(BaseModel):
    """Global versioning configuration.

    Every versioning field is optional. None means "not yet decided"; call
    ``with_defaults()`` to fill unset values from the built-in defaults.
    Keys may be given in snake_case or kebab-case.

    Attributes:
        branches: Branch overrides keyed by name, in declaration order. An
            override without a name takes its key as name.
        ignore: Commits excluded as version sources.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_kebab,
    )

    assembly_versioning_scheme: AssemblyVersioningScheme | None = None
    assembly_file_versioning_scheme: AssemblyFileVersioningScheme | None = None
    assembly_informational_format: str | None = None
    assembly_versioning_format: str | None = None
    assembly_file_versioning_format: str | None = None
    versioning_mode: VersioningMode | None = Field(default=None, alias="mode")
    tag_prefix: str | None = None
    continuous_delivery_fallback_tag: str | None = None
    next_version: str | None = None
    major_version_bump_message: str | None = None
    minor_version_bump_message: str | None = None
    patch_version_bump_message: str | None = None
    no_bump_message: str | None = None
    legacy_semver_padding: int | None = None
    build_metadata_padding: int | None = None
    commits_since_version_source_padding: int | None = None
    commit_message_incrementing: CommitMessageIncrementMode | None = None
    increment: IncrementStrategy | None = None
    commit_date_format: str | None = None
    ignore: IgnoreConfig = IgnoreConfig()
    branches: dict[str, BranchConfig] = Field(default_factory=dict)

    @field_validator(
        "tag_prefix",
        "major_version_bump_message",
        "minor_version_bump_message",
        "patch_version_bump_message",
        "no_bump_message",
    )
    @classmethod
    def _check_patterns(cls, value: str | None) -> str | None:
        return check_pattern(value)

    @model_validator(mode="before")
    @classmethod
    def _name_branches(cls, data: Any) -> Any:  # pyright: ignore[reportExplicitAny]
        """Give unnamed branch overrides the name of their mapping key."""
        if not isinstance(data, dict):
            return data
        branches = data.get("branches")
        if not isinstance(branches, dict):
            return data

        named: dict[str, Any] = {}
        for key, value in branches.items():
            if isinstance(value, dict) and not value.get("name"):
                named[key] = {**value, "name": key}
            elif isinstance(value, BranchConfig) and not value.name:
                named[key] = value.model_copy(update={"name": key})
            else:
                named[key] = value
        return {**data, "branches": named}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create configuration from a dictionary without applying defaults.

        Raises:
            pydantic.ValidationError: If the data does not match the schema.
        """
        return cls.model_validate(data)

    def with_defaults(self) -> Self:
        """Return a copy with unset values filled from the built-in defaults.

        Values set on this configuration win. Branch overrides are merged
        key by key into the default overrides of the same name; new overrides
        are appended after the defaults.
        """
        merged = deep_merge(DEFAULT_CONFIG, self.model_dump(exclude_none=True))
        return self.model_validate(merged)

    def get_branch(self, name: str) -> BranchConfig | None:
        """Look up a branch override by its key."""
        return self.branches.get(name)
