"""
Summary: Tests for counters, cancellation and run disposition.
Why: Exit codes and totals are what automation reacts to.
"""

from __future__ import annotations

import threading

import pytest

from staticdeploy.features.deploy.domain.errors import CancelledError, ToolchainError
from staticdeploy.features.deploy.domain.models import (
    CancellationToken,
    DeployJob,
    DeployOutcome,
    DeployResult,
    DeployStats,
    RunDisposition,
    RunSummary,
    StatsSnapshot,
    determine_disposition,
)
from staticdeploy.features.themes.domain.models import Area, LocaleIdentity, ThemeIdentity

JOB = DeployJob(ThemeIdentity("Acme", "shop"), Area.FRONTEND, LocaleIdentity("en_US"))


def _result(outcome: DeployOutcome) -> DeployResult:
    return DeployResult(JOB, outcome)


def test_concurrent_increments_are_not_lost() -> None:
    stats = DeployStats()

    def _work() -> None:
        for _ in range(1000):
            stats.add_file(3)
        stats.record_error()

    threads = [threading.Thread(target=_work) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert stats.snapshot() == StatsSnapshot(files_copied=8000, bytes_copied=24000, errors=8)


def test_cancellation_token_is_sticky() -> None:
    token = CancellationToken()
    token.raise_if_cancelled()
    token.cancel()
    token.cancel()

    assert token.is_cancelled
    with pytest.raises(CancelledError):
        token.raise_if_cancelled()


@pytest.mark.parametrize(
    ("outcomes", "cancelled", "expected"),
    [
        ([], False, RunDisposition.SUCCESS),
        ([DeployOutcome.SUCCESS, DeployOutcome.DELEGATED], False, RunDisposition.SUCCESS),
        ([DeployOutcome.SUCCESS, DeployOutcome.FAILED], False, RunDisposition.PARTIAL),
        ([DeployOutcome.DELEGATED, DeployOutcome.FAILED], False, RunDisposition.PARTIAL),
        ([DeployOutcome.FAILED, DeployOutcome.FAILED], False, RunDisposition.FAILED),
        ([DeployOutcome.FAILED, DeployOutcome.CANCELLED], False, RunDisposition.FAILED),
        ([DeployOutcome.SUCCESS, DeployOutcome.CANCELLED], True, RunDisposition.CANCELLED),
    ],
)
def test_disposition(outcomes: list[DeployOutcome], cancelled: bool, expected: RunDisposition) -> None:
    assert determine_disposition([_result(o) for o in outcomes], cancelled) is expected


def test_exit_codes() -> None:
    assert [d.exit_code for d in RunDisposition] == [0, 1, 2, 130]


def test_summary_counts_and_throughput() -> None:
    summary = RunSummary(
        results=(_result(DeployOutcome.SUCCESS), _result(DeployOutcome.CANCELLED)),
        stats=StatsSnapshot(files_copied=50, bytes_copied=100, errors=0),
        elapsed_seconds=2.0,
    )

    assert summary.total_jobs == 2
    assert summary.outcome_counts[DeployOutcome.CANCELLED] == 1
    assert summary.outcome_counts[DeployOutcome.FAILED] == 0
    assert summary.files_per_second == 25.0
    assert summary.disposition is RunDisposition.SUCCESS


def test_error_message_rendering() -> None:
    failed = DeployResult(JOB, DeployOutcome.FAILED, error=ToolchainError(3, "boom\n"))

    assert failed.error_message == "Fallback toolchain exited with status 3: boom"
    assert _result(DeployOutcome.SUCCESS).error_message is None
    assert JOB.label == "Acme/shop [frontend/en_US]"
