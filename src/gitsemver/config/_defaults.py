"""Default configuration values.

This module defines the built-in defaults applied by ``Config.with_defaults``
before a configuration is used to build a versioning context.

Note: DEFAULT_CONFIG is intentionally a plain dict for type compatibility
with deep_merge, which always returns copies.
"""

from typing import Any

DEFAULT_TAG_PREFIX = "[vV]"
DEFAULT_PADDING = 4

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "assembly_versioning_scheme": "MajorMinorPatch",
    "assembly_file_versioning_scheme": "MajorMinorPatch",
    "versioning_mode": "ContinuousDelivery",
    "tag_prefix": DEFAULT_TAG_PREFIX,
    "continuous_delivery_fallback_tag": "ci",
    "major_version_bump_message": r"\+semver:\s?(breaking|major)",
    "minor_version_bump_message": r"\+semver:\s?(feature|minor)",
    "patch_version_bump_message": r"\+semver:\s?(fix|patch)",
    "no_bump_message": r"\+semver:\s?(none|skip)",
    "legacy_semver_padding": DEFAULT_PADDING,
    "build_metadata_padding": DEFAULT_PADDING,
    "commits_since_version_source_padding": DEFAULT_PADDING,
    "commit_message_incrementing": "Enabled",
    "commit_date_format": "%Y-%m-%d",
    "branches": {
        "develop": {
            "regex": r"^dev(elop)?(ment)?$",
            "versioning_mode": "ContinuousDeployment",
            "tag": "alpha",
            "increment": "Minor",
            "prevent_increment_of_merged_branch_version": False,
            "track_merge_target": True,
            "tracks_release_branches": True,
            "is_release_branch": False,
            "is_mainline": False,
            "pre_release_weight": 0,
            "source_branches": [],
        },
        "main": {
            "regex": r"^(master|main)$",
            "tag": "",
            "increment": "Patch",
            "prevent_increment_of_merged_branch_version": True,
            "track_merge_target": False,
            "tracks_release_branches": False,
            "is_release_branch": False,
            "is_mainline": True,
            "pre_release_weight": 55000,
            "source_branches": ["develop", "release"],
        },
        "release": {
            "regex": r"^releases?[/-]",
            "tag": "beta",
            "increment": "None",
            "prevent_increment_of_merged_branch_version": True,
            "track_merge_target": False,
            "tracks_release_branches": False,
            "is_release_branch": True,
            "is_mainline": False,
            "pre_release_weight": 30000,
            "source_branches": ["develop", "main", "support", "release"],
        },
        "feature": {
            "regex": r"^features?[/-]",
            "tag": "{BranchName}",
            "increment": "Inherit",
            "prevent_increment_of_merged_branch_version": False,
            "track_merge_target": False,
            "tracks_release_branches": False,
            "is_release_branch": False,
            "is_mainline": False,
            "pre_release_weight": 30000,
            "source_branches": ["develop", "main", "release", "feature", "support", "hotfix"],
        },
        "pull-request": {
            "regex": r"^(pull|pull\-requests|pr)[/-]",
            "tag": "PullRequest",
            "increment": "Inherit",
            "prevent_increment_of_merged_branch_version": False,
            "tag_number_pattern": r"[/-](?P<number>\d+)",
            "track_merge_target": False,
            "tracks_release_branches": False,
            "is_release_branch": False,
            "is_mainline": False,
            "pre_release_weight": 30000,
            "source_branches": ["develop", "main", "release", "feature", "support", "hotfix"],
        },
        "hotfix": {
            "regex": r"^hotfix(es)?[/-]",
            "tag": "beta",
            "increment": "Patch",
            "prevent_increment_of_merged_branch_version": False,
            "track_merge_target": False,
            "tracks_release_branches": False,
            "is_release_branch": False,
            "is_mainline": False,
            "pre_release_weight": 30000,
            "source_branches": ["develop", "main", "support"],
        },
        "support": {
            "regex": r"^support[/-]",
            "tag": "",
            "increment": "Patch",
            "prevent_increment_of_merged_branch_version": True,
            "track_merge_target": False,
            "tracks_release_branches": False,
            "is_release_branch": False,
            "is_mainline": True,
            "pre_release_weight": 55000,
            "source_branches": ["main"],
        },
    },
    "ignore": {
        "sha": [],
    },
}
