"""Diagnostics channel for context resolution.

Resolution reports lookups that fell back to a default as structured
Diagnostic records emitted to an injected sink instead of a process-wide
logger. The caller decides where they end up.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


class DiagnosticLevel(StrEnum):
    """Severity of a diagnostic. Values match structlog method names."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A structured event produced while resolving a context.

    Attributes:
        level: Severity of the event.
        event: Machine-readable event name (e.g. ``commit_not_found``).
        message: Human-readable description.
        fields: Additional structured context.
    """

    level: DiagnosticLevel
    event: str
    message: str
    fields: dict[str, Any] = field(default_factory=dict)  # pyright: ignore[reportExplicitAny]


@runtime_checkable
class DiagnosticsSink(Protocol):
    """Protocol for receivers of diagnostics."""

    def emit(self, diagnostic: Diagnostic) -> None:
        """Receive one diagnostic."""
        ...


@dataclass(slots=True)
class DiagnosticsCollector:
    """Sink that records diagnostics in order.

    Attributes:
        diagnostics: Recorded diagnostics, oldest first.
        forward_to: Optional sink every diagnostic is also passed to.
    """

    diagnostics: list[Diagnostic] = field(default_factory=list)
    forward_to: DiagnosticsSink | None = None

    def emit(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        if self.forward_to is not None:
            self.forward_to.emit(diagnostic)

    def info(self, event: str, message: str, **fields: Any) -> None:  # pyright: ignore[reportExplicitAny,reportAny]
        self.emit(Diagnostic(DiagnosticLevel.INFO, event, message, fields))

    def warning(self, event: str, message: str, **fields: Any) -> None:  # pyright: ignore[reportExplicitAny,reportAny]
        self.emit(Diagnostic(DiagnosticLevel.WARNING, event, message, fields))

    def events(self) -> list[str]:
        """Names of the recorded events, oldest first."""
        return [d.event for d in self.diagnostics]


class StructlogDiagnosticsSink:
    """Sink that writes diagnostics to a structlog logger."""

    __slots__ = ("_logger",)

    def __init__(self, logger: FilteringBoundLogger) -> None:
        self._logger: FilteringBoundLogger = logger

    def emit(self, diagnostic: Diagnostic) -> None:
        log = getattr(self._logger, diagnostic.level.value)
        log(diagnostic.event, message=diagnostic.message, **diagnostic.fields)
