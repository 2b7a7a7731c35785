"""Tests for the diagnostics channel."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitsemver.context import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticsCollector,
    DiagnosticsSink,
    StructlogDiagnosticsSink,
)

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


class TestDiagnosticsCollector:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(DiagnosticsCollector(), DiagnosticsSink)

    def test_records_in_order(self) -> None:
        collector = DiagnosticsCollector()

        collector.info("first", "First event")
        collector.warning("second", "Second event", sha="abc")

        assert collector.events() == ["first", "second"]
        assert collector.diagnostics[1] == Diagnostic(
            DiagnosticLevel.WARNING, "second", "Second event", {"sha": "abc"}
        )

    def test_forwards_to_sink(self) -> None:
        downstream = DiagnosticsCollector()
        collector = DiagnosticsCollector(forward_to=downstream)

        collector.info("event", "Message")

        assert downstream.diagnostics == collector.diagnostics


class TestStructlogDiagnosticsSink:
    def test_satisfies_protocol(self, mocker: MockerFixture) -> None:
        assert isinstance(StructlogDiagnosticsSink(mocker.Mock()), DiagnosticsSink)

    def test_logs_at_diagnostic_level(self, mocker: MockerFixture) -> None:
        logger = mocker.Mock()
        sink = StructlogDiagnosticsSink(logger)

        sink.emit(
            Diagnostic(DiagnosticLevel.WARNING, "commit_not_found", "Not found", {"commit_id": "abc"})
        )

        logger.warning.assert_called_once_with(
            "commit_not_found", message="Not found", commit_id="abc"
        )
        logger.info.assert_not_called()

    def test_info_level(self, mocker: MockerFixture) -> None:
        logger = mocker.Mock()

        StructlogDiagnosticsSink(logger).emit(
            Diagnostic(DiagnosticLevel.INFO, "using_branch_tip", "Using tip")
        )

        logger.info.assert_called_once_with("using_branch_tip", message="Using tip")
