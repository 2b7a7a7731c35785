"""Semantic version parsing and ordering.

This package wraps ``semantic_version.Version`` with the tag-aware parsing
rules used when detecting versions on git tags.

Functions:
    try_parse: Parse a tag name into a version, returning None on failure.
    parse_version: Parse a tag name into a version, raising on failure.
    max_version: Select the highest version under SemVer precedence.
"""

from gitsemver.semver._parse import (
    SemanticVersion,
    max_version,
    parse_version,
    try_parse,
)

__all__ = [
    "SemanticVersion",
    "max_version",
    "parse_version",
    "try_parse",
]
