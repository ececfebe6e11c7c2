"""Tests for the run summary display."""

from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console

from staticdeploy.features.deploy.domain.errors import ToolchainError
from staticdeploy.features.deploy.domain.models import (
    DeployJob,
    DeployOutcome,
    DeployResult,
    RunSummary,
    StatsSnapshot,
)
from staticdeploy.features.themes.domain.models import Area, LocaleIdentity, ThemeIdentity
from staticdeploy.ui.cli.display.summary import SummaryDisplay, format_bytes


def _job(name: str) -> DeployJob:
    return DeployJob(ThemeIdentity("Acme", name), Area.FRONTEND, LocaleIdentity("en_US"))


def _summary() -> RunSummary:
    return RunSummary(
        results=(
            DeployResult(
                _job("child"),
                DeployOutcome.SUCCESS,
                files_copied=12,
                bytes_copied=2048,
                elapsed_seconds=0.5,
                destination=Path("/shop/pub/static/frontend/Acme/child/en_US"),
            ),
            DeployResult(_job("legacy"), DeployOutcome.FAILED, error=ToolchainError(1, "boom")),
        ),
        stats=StatsSnapshot(files_copied=12, bytes_copied=2048, errors=1),
        elapsed_seconds=2.0,
    )


@pytest.mark.parametrize(
    ("size", "expected"),
    [(0, "0 B"), (1023, "1023 B"), (2048, "2.0 KiB"), (5 * 1024 * 1024, "5.0 MiB"), (3 * 1024**3, "3.0 GiB")],
)
def test_format_bytes(size: int, expected: str) -> None:
    assert format_bytes(size) == expected


def test_show_summary_lists_jobs_and_totals() -> None:
    console = Console(record=True, width=200)

    SummaryDisplay(console).show_summary(_summary())

    output = console.export_text()
    assert "Acme/child" in output
    assert "Acme/legacy" in output
    assert "partial" in output
    assert "Failed: 1" in output
    assert "Files: 12 (2.0 KiB)" in output
    assert "6 files/s" in output


def test_quiet_summary_only_reports_failures() -> None:
    console = Console(record=True, width=200)

    SummaryDisplay(console).show_summary(_summary(), quiet=True)

    output = console.export_text()
    assert "Acme/legacy [frontend/en_US]" in output
    assert "boom" in output
    assert "Acme/child" not in output
