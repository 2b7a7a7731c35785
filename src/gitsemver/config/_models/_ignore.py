# ruff: noqa: TC003  # datetime needed at runtime for pydantic fields
"""Ignore rules configuration model."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, ConfigDict

from gitsemver.config._filters import MinDateVersionFilter, ShaVersionFilter
from gitsemver.config._models._common import to_kebab

if TYPE_CHECKING:
    from gitsemver.config._filters import VersionFilter


class IgnoreConfig(BaseModel):
    """Commits excluded as version sources.

    Attributes:
        sha: Commit SHAs to ignore.
        commits_before: Ignore commits made before this moment. Naive values
            are interpreted as UTC.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_kebab,
    )

    sha: tuple[str, ...] = ()
    commits_before: datetime | None = None

    @property
    def is_empty(self) -> bool:
        """True if no ignore rule is configured."""
        return not self.sha and self.commits_before is None

    def to_filters(self) -> tuple[VersionFilter, ...]:
        """Convert the raw ignore rules into version filters.

        Returns:
            A SHA filter when SHAs are listed, followed by a minimum date
            filter when a date is set.
        """
        filters: list[VersionFilter] = []
        if self.sha:
            filters.append(ShaVersionFilter(frozenset(s.lower() for s in self.sha)))
        if self.commits_before is not None:
            min_date = self.commits_before
            if min_date.tzinfo is None:
                min_date = min_date.replace(tzinfo=UTC)
            filters.append(MinDateVersionFilter(min_date))
        return tuple(filters)
