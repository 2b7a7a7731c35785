# pyright: reportUnknownMemberType=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Thin typed wrapper around semantic_version for tag parsing.

Tag names are matched against a configurable prefix expression (for
example ``[vV]``) before the remainder is parsed. Parsing is strict first
and lenient second, so partial versions such as ``1.2`` and four-part
versions such as ``1.2.3.4`` are accepted the way release tags are usually
written.

The lenient grammar is ``major(.minor)?(.patch)?(.fourth)?(-tag)?(+meta)?``.
Anything after the numeric core must start a pre-release tag or build
metadata, so ``1.2.3abc`` is not a version.

Note: semantic_version has no type stubs, so Pyright unknown-type checks are
disabled at file level for this wrapper module.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import TYPE_CHECKING, Final

from semantic_version import Version  # type: ignore[import-untyped]

from gitsemver.exceptions import ConfigError, SemanticVersionError

if TYPE_CHECKING:
    from collections.abc import Iterable

# Public alias so callers never import semantic_version directly
SemanticVersion = Version

_LENIENT_PATTERN: Final = re.compile(
    r"(?P<major>\d+)(?:\.(?P<minor>\d+))?(?:\.(?P<patch>\d+))?(?:\.(?P<fourth>\d+))?"
    r"(?:-(?P<tag>[^+]*))?(?:\+(?P<meta>.*))?",
    re.ASCII | re.DOTALL,
)
_INVALID_IDENTIFIER_CHARS: Final = re.compile(r"[^0-9A-Za-z-]")


@lru_cache(maxsize=32)
def _compile_prefix(tag_prefix: str) -> re.Pattern[str]:
    try:
        return re.compile(tag_prefix)
    except re.error as e:
        msg = f"Invalid tag prefix pattern {tag_prefix!r}: {e}"
        raise ConfigError(msg) from e


def _strip_prefix(raw: str, tag_prefix: str | None) -> str:
    """Remove a leading match of the tag prefix expression, if present.

    The prefix is optional: a tag without it is parsed as-is.
    """
    if not tag_prefix:
        return raw
    match = _compile_prefix(tag_prefix).match(raw)
    if match is None:
        return raw
    return raw[match.end() :]


def _identifiers(text: str | None, *, strip_zeroes: bool) -> tuple[str, ...]:
    """Split dotted identifiers into the form semantic_version accepts.

    Empty identifiers are dropped and characters outside ``[0-9A-Za-z-]``
    become ``-``. With ``strip_zeroes``, numeric identifiers lose their
    leading zeroes (``01`` becomes ``1``).
    """
    if not text:
        return ()
    parts: list[str] = []
    for part in text.split("."):
        if not part:
            continue
        cleaned = _INVALID_IDENTIFIER_CHARS.sub("-", part)
        if strip_zeroes and cleaned.isdigit():
            cleaned = str(int(cleaned))
        parts.append(cleaned)
    return tuple(parts)


def _parse_lenient(text: str) -> Version | None:
    match = _LENIENT_PATTERN.fullmatch(text)
    if match is None:
        return None
    build = _identifiers(match["meta"], strip_zeroes=False)
    if not build and match["fourth"] is not None:
        build = (str(int(match["fourth"])),)
    return Version(
        major=int(match["major"]),
        minor=int(match["minor"] or 0),
        patch=int(match["patch"] or 0),
        prerelease=_identifiers(match["tag"], strip_zeroes=True),
        build=build,
    )


def try_parse(raw: str, tag_prefix: str | None = None) -> Version | None:
    """Parse a tag name into a semantic version.

    Args:
        raw: The raw tag name (e.g. ``v1.2.3-beta.1``).
        tag_prefix: Regular expression matched at the start of ``raw`` and
            stripped before parsing. None or empty disables stripping.

    Returns:
        The parsed Version, or None if the name is not a version.

    Raises:
        ConfigError: If ``tag_prefix`` is not a valid regular expression.
    """
    text = _strip_prefix(raw.strip(), tag_prefix)
    if not text:
        return None
    try:
        return Version(text)
    except ValueError:
        pass
    return _parse_lenient(text)


def parse_version(raw: str, tag_prefix: str | None = None) -> Version:
    """Parse a tag name into a semantic version.

    Args:
        raw: The raw tag name.
        tag_prefix: Regular expression stripped from the start of ``raw``.

    Returns:
        The parsed Version.

    Raises:
        SemanticVersionError: If the name is not a valid version.
    """
    version = try_parse(raw, tag_prefix)
    if version is None:
        msg = f"Invalid semantic version: {raw!r}"
        raise SemanticVersionError(msg, value=raw)
    return version


def max_version(versions: Iterable[Version]) -> Version | None:
    """Select the highest version under SemVer precedence.

    Args:
        versions: Candidate versions.

    Returns:
        The maximum version, or None if there are no candidates.
    """
    return max(versions, default=None)
