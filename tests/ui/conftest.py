"""Shared fixtures for CLI tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture


@pytest.fixture(autouse=True)
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    """Keep argument processing from reconfiguring handlers or opening log files."""

    return mocker.patch("staticdeploy.ui.cli.args.parser.setup_logger")
