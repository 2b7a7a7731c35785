# pyright: reportExplicitAny=false
"""Output formatters for the context command."""

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from gitsemver.context import VersioningContext

# Type alias for serialized context data - uses Any to match library signatures
ContextData = dict[str, Any]


def context_to_dict(context: "VersioningContext") -> ContextData:
    """Convert a versioning context to JSON-compatible data."""
    version = context.current_commit_tagged_version
    return {
        "branch": {
            "canonical_name": context.current_branch.canonical_name,
            "friendly_name": context.current_branch.friendly_name,
            "is_detached_head": context.current_branch.is_detached_head,
        },
        "commit": {
            "sha": context.current_commit.sha,
            "message": context.current_commit.message.strip(),
        },
        "tagged_version": str(version) if version is not None else None,
        "is_current_commit_tagged": context.is_current_commit_tagged,
        "only_evaluate_tracked_branches": context.only_evaluate_tracked_branches,
        "configuration": context.configuration.model_dump(
            mode="json", exclude={"version_filters"}
        ),
        "version_filters": [
            type(f).__name__ for f in context.configuration.version_filters
        ],
        "diagnostics": [
            {"level": d.level.value, "event": d.event, "message": d.message}
            for d in context.diagnostics
        ],
    }


def format_json(data: ContextData, *, indent: bool = True) -> str:
    """Format data as JSON.

    Args:
        data: Dictionary to format as JSON.
        indent: Whether to pretty-print with indentation.

    Returns:
        JSON-formatted string representation.
    """
    import orjson

    options = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, option=options).decode("utf-8")


def format_table(context: "VersioningContext") -> Table:
    """Render a versioning context as a two-column rich table."""
    table = Table(title="Versioning context", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    version = context.current_commit_tagged_version
    effective = context.configuration
    rows = [
        ("Branch", context.current_branch.friendly_name),
        ("Commit", context.current_commit.sha),
        ("Tagged version", str(version) if version is not None else "-"),
        ("Mode", effective.versioning_mode.value),
        ("Increment", effective.increment.value),
        ("Tag", effective.tag if effective.tag is not None else "-"),
        ("Tag prefix", effective.tag_prefix or "-"),
        ("Release branch", "yes" if effective.is_release_branch else "no"),
        ("Pre-release weight", str(effective.pre_release_weight)),
    ]
    for key, value in rows:
        # Values are literal text, never markup (tag prefixes look like "[vV]")
        table.add_row(key, Text(value))
    return table
