"""Versioning context resolution.

This package determines the branch and commit being versioned, detects a
version already tagged on that commit, and merges the global configuration
with the branch override into an effective configuration.

Example:
    >>> from gitsemver.config import Config
    >>> from gitsemver.context import build_context
    >>> from gitsemver.repository import GitRepository
    >>> with GitRepository() as repo:
    ...     context = build_context(repo, Config().with_defaults())
    ...     print(context.current_branch.friendly_name)
"""

from gitsemver.context._context import VersioningContext, build_context
from gitsemver.context._diagnostics import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticsCollector,
    DiagnosticsSink,
    StructlogDiagnosticsSink,
)
from gitsemver.context._effective import (
    REQUIRED_VALUES,
    check_required_values,
    merge_effective_configuration,
)
from gitsemver.context._selector import (
    resolve_current_branch,
    resolve_target,
    resolve_target_branch,
    select_commit,
)
from gitsemver.context._tagged import detect_tagged_version

__all__ = [
    "REQUIRED_VALUES",
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticsCollector",
    "DiagnosticsSink",
    "StructlogDiagnosticsSink",
    "VersioningContext",
    "build_context",
    "check_required_values",
    "detect_tagged_version",
    "merge_effective_configuration",
    "resolve_current_branch",
    "resolve_target",
    "resolve_target_branch",
    "select_commit",
]
