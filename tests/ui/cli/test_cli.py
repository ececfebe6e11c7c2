"""Tests for CLI functionality."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from magento_tree import MagentoTree
from pytest_mock import MockerFixture

from staticdeploy.features.deploy.domain.errors import NothingToDeployError
from staticdeploy.features.deploy.domain.models import (
    DeployJob,
    DeployOutcome,
    DeployResult,
    RunSummary,
    StatsSnapshot,
)
from staticdeploy.features.themes.domain.models import Area, LocaleIdentity, ThemeIdentity
from staticdeploy.ui.cli.cli import CommandProcessor, main

JOB = DeployJob(ThemeIdentity("Acme", "child"), Area.FRONTEND, LocaleIdentity("en_US"))


@pytest.fixture
def mock_deploy_command(mocker: MockerFixture) -> MagicMock:
    """Replace the deploy command so no files are touched."""

    return mocker.patch("staticdeploy.ui.cli.cli.DeployCommand")


def _summary(*outcomes: DeployOutcome, cancelled: bool = False) -> RunSummary:
    return RunSummary(
        results=tuple(DeployResult(JOB, outcome) for outcome in outcomes),
        stats=StatsSnapshot(),
        elapsed_seconds=1.0,
        cancelled=cancelled,
    )


def test_successful_run_returns_normally(magento: MagentoTree, mock_deploy_command: MagicMock) -> None:
    mock_deploy_command.return_value.execute.return_value = _summary(DeployOutcome.SUCCESS)

    CommandProcessor.process_command(["deploy", str(magento.root)])

    mock_deploy_command.assert_called_once()


@pytest.mark.parametrize(
    ("summary", "exit_code"),
    [
        (_summary(DeployOutcome.SUCCESS, DeployOutcome.FAILED), 1),
        (_summary(DeployOutcome.FAILED), 2),
        (_summary(DeployOutcome.CANCELLED, cancelled=True), 130),
    ],
)
def test_disposition_maps_to_exit_code(
    magento: MagentoTree,
    mock_deploy_command: MagicMock,
    summary: RunSummary,
    exit_code: int,
) -> None:
    mock_deploy_command.return_value.execute.return_value = summary

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["deploy", str(magento.root)])

    assert exc_info.value.code == exit_code


@pytest.mark.parametrize(
    ("error", "exit_code"),
    [
        (NothingToDeployError("No themes found"), 2),
        (KeyboardInterrupt(), 130),
        (RuntimeError("unexpected"), 2),
    ],
)
def test_errors_map_to_exit_code(
    magento: MagentoTree,
    mock_deploy_command: MagicMock,
    mocker: MockerFixture,
    error: BaseException,
    exit_code: int,
) -> None:
    mock_logger = mocker.patch("staticdeploy.ui.cli.cli.logger")
    mock_deploy_command.return_value.execute.side_effect = error

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["deploy", str(magento.root)])

    assert exc_info.value.code == exit_code
    assert mock_logger.error.called or mock_logger.info.called


def test_init_config_existing_file_exits(tmp_path: Path) -> None:
    target = tmp_path / "config.toml"
    _ = target.write_text("workers = 2\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["init-config", "--path", str(target)])

    assert exc_info.value.code == 2


def test_main_returns_zero(mocker: MockerFixture) -> None:
    process = mocker.patch.object(CommandProcessor, "process_command")

    assert main() == 0
    process.assert_called_once_with()
