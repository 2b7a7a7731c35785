"""Common configuration types.

This module defines the enums shared across configuration models. Values
match the spelling used in versioning configuration documents.
"""

import re
from enum import StrEnum


class VersioningMode(StrEnum):
    """How pre-release versions are produced for a branch."""

    CONTINUOUS_DELIVERY = "ContinuousDelivery"
    CONTINUOUS_DEPLOYMENT = "ContinuousDeployment"
    MAINLINE = "Mainline"


class IncrementStrategy(StrEnum):
    """Which version component is bumped for a branch.

    INHERIT defers to the branch the current branch was created from.
    """

    NONE = "None"
    MAJOR = "Major"
    MINOR = "Minor"
    PATCH = "Patch"
    INHERIT = "Inherit"


class CommitMessageIncrementMode(StrEnum):
    """Whether ``+semver:`` commit messages may bump the version."""

    ENABLED = "Enabled"
    DISABLED = "Disabled"
    MERGE_MESSAGE_ONLY = "MergeMessageOnly"


class AssemblyVersioningScheme(StrEnum):
    """Components included in the generated assembly version."""

    MAJOR_MINOR_PATCH_TAG = "MajorMinorPatchTag"
    MAJOR_MINOR_PATCH = "MajorMinorPatch"
    MAJOR_MINOR = "MajorMinor"
    MAJOR = "Major"
    NONE = "None"


class AssemblyFileVersioningScheme(StrEnum):
    """Components included in the generated assembly file version."""

    MAJOR_MINOR_PATCH_TAG = "MajorMinorPatchTag"
    MAJOR_MINOR_PATCH = "MajorMinorPatch"
    MAJOR_MINOR = "MajorMinor"
    MAJOR = "Major"
    NONE = "None"


class LogLevel(StrEnum):
    """Log level threshold values.

    Values are ordered from most verbose (debug) to least verbose (error).
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


def to_kebab(name: str) -> str:
    """Alias generator mapping ``snake_case`` field names to ``kebab-case`` keys."""
    return name.replace("_", "-")


def check_pattern(value: str | None) -> str | None:
    """Validate that a configured regular expression compiles.

    Raises:
        ValueError: If the pattern is not a valid regular expression.
    """
    if value is None:
        return value
    try:
        _ = re.compile(value)
    except re.error as e:
        msg = f"Invalid regular expression {value!r}: {e}"
        raise ValueError(msg) from e
    return value
