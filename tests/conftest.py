"""Shared fixtures that build installation trees on ``tmp_path``."""

from __future__ import annotations

from pathlib import Path

import pytest
from magento_tree import MagentoTree


@pytest.fixture
def magento(tmp_path: Path) -> MagentoTree:
    """Provide an installation root with ``app/etc/env.php`` in place."""

    return MagentoTree(tmp_path / "shop").install()
