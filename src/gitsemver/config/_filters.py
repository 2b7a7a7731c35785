# ruff: noqa: TC003  # datetime needed at runtime for dataclass fields
"""Version source filters.

Filters decide whether a commit may act as the source of a version. They
are built from the ``ignore`` section of the configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gitsemver.repository import Commit


@runtime_checkable
class VersionFilter(Protocol):
    """Protocol for commit exclusion rules."""

    def exclude(self, commit: Commit) -> str | None:
        """Check whether ``commit`` is excluded.

        Args:
            commit: The candidate version source.

        Returns:
            The reason the commit is excluded, or None if it is allowed.
        """
        ...


@dataclass(frozen=True, slots=True)
class ShaVersionFilter:
    """Excludes commits by SHA.

    Attributes:
        shas: Lowercase SHAs to exclude.
    """

    shas: frozenset[str]

    def exclude(self, commit: Commit) -> str | None:
        if commit.sha.lower() in self.shas:
            return f"Sha {commit.sha} was ignored due to commit having been excluded by configuration"
        return None


@dataclass(frozen=True, slots=True)
class MinDateVersionFilter:
    """Excludes commits made before a given moment.

    Attributes:
        min_date: Timezone-aware lower bound.
    """

    min_date: datetime

    def exclude(self, commit: Commit) -> str | None:
        if commit.timestamp is not None and commit.timestamp < self.min_date:
            return f"Source was ignored due to commit {commit.sha} having been made before {self.min_date.isoformat()}"
        return None
