"""Versioning configuration.

This package provides the global configuration and branch override models,
the built-in defaults, ignore filters, and branch override resolution.

Example:
    >>> from gitsemver.config import Config
    >>> config = Config.from_dict({"tag-prefix": "v"}).with_defaults()
    >>> config.legacy_semver_padding
    4
"""

from gitsemver.config._defaults import DEFAULT_CONFIG
from gitsemver.config._filters import (
    MinDateVersionFilter,
    ShaVersionFilter,
    VersionFilter,
)
from gitsemver.config._merge import copy_value, deep_merge
from gitsemver.config._models import (
    AssemblyFileVersioningScheme,
    AssemblyVersioningScheme,
    BranchConfig,
    CommitMessageIncrementMode,
    Config,
    EffectiveConfiguration,
    IgnoreConfig,
    IncrementStrategy,
    LogFormat,
    LogLevel,
    VersioningMode,
)
from gitsemver.config._resolver import (
    BranchConfigurationResolver,
    RegexBranchConfigurationResolver,
)

__all__ = [
    "DEFAULT_CONFIG",
    "AssemblyFileVersioningScheme",
    "AssemblyVersioningScheme",
    "BranchConfig",
    "BranchConfigurationResolver",
    "CommitMessageIncrementMode",
    "Config",
    "EffectiveConfiguration",
    "IgnoreConfig",
    "IncrementStrategy",
    "LogFormat",
    "LogLevel",
    "MinDateVersionFilter",
    "RegexBranchConfigurationResolver",
    "ShaVersionFilter",
    "VersionFilter",
    "VersioningMode",
    "copy_value",
    "deep_merge",
]
