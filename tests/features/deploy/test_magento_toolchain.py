"""Tests for the subprocess-backed fallback toolchain adapter."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from staticdeploy.features.deploy.adapters.magento_toolchain import MagentoToolchain
from staticdeploy.features.deploy.domain.errors import ToolchainError
from staticdeploy.features.deploy.domain.models import DeployJob
from staticdeploy.features.deploy.usecases.ports import FallbackToolchainPort
from staticdeploy.features.themes.domain.models import Area, LocaleIdentity, ThemeIdentity

JOB = DeployJob(ThemeIdentity("Magento", "luma"), Area.FRONTEND, LocaleIdentity("nl_NL"))


def test_adapter_satisfies_port() -> None:
    assert isinstance(MagentoToolchain(), FallbackToolchainPort)


def test_relative_binary_resolves_against_root(tmp_path: Path) -> None:
    command = MagentoToolchain("bin/magento").command(JOB, tmp_path)

    assert command == [
        str(tmp_path / "bin/magento"),
        "setup:static-content:deploy",
        "--area",
        "frontend",
        "--theme",
        "Magento/luma",
        "nl_NL",
    ]


def test_absolute_binary_is_kept(tmp_path: Path) -> None:
    command = MagentoToolchain("/usr/local/bin/magento").command(JOB, tmp_path)

    assert command[0] == "/usr/local/bin/magento"


def test_deploy_runs_in_installation_root(tmp_path: Path, mocker: MockerFixture) -> None:
    run = mocker.patch(
        "staticdeploy.features.deploy.adapters.magento_toolchain.subprocess.run",
        return_value=subprocess.CompletedProcess(args=[], returncode=3, stdout="out", stderr="err"),
    )

    result = MagentoToolchain("bin/magento").deploy(JOB, tmp_path)

    assert (result.returncode, result.stdout, result.stderr) == (3, "out", "err")
    assert not result.ok
    _, kwargs = run.call_args
    assert kwargs["cwd"] == tmp_path
    assert kwargs["check"] is False
    assert kwargs["capture_output"] is True


def test_missing_binary_raises_toolchain_error(tmp_path: Path) -> None:
    with pytest.raises(ToolchainError) as exc_info:
        _ = MagentoToolchain("bin/magento").deploy(JOB, tmp_path)

    assert exc_info.value.returncode is None
    assert "could not be started" in str(exc_info.value)
