"""Configuration models.

This module provides Pydantic models for the global configuration, branch
overrides, ignore rules and the effective configuration.
"""

from gitsemver.config._models._branch import BranchConfig
from gitsemver.config._models._common import (
    AssemblyFileVersioningScheme,
    AssemblyVersioningScheme,
    CommitMessageIncrementMode,
    IncrementStrategy,
    LogFormat,
    LogLevel,
    VersioningMode,
)
from gitsemver.config._models._config import Config
from gitsemver.config._models._effective import EffectiveConfiguration
from gitsemver.config._models._ignore import IgnoreConfig

__all__ = [
    "AssemblyFileVersioningScheme",
    "AssemblyVersioningScheme",
    "BranchConfig",
    "CommitMessageIncrementMode",
    "Config",
    "EffectiveConfiguration",
    "IgnoreConfig",
    "IncrementStrategy",
    "LogFormat",
    "LogLevel",
    "VersioningMode",
]
