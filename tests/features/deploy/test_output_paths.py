"""Tests for destination layout and the version marker."""

from __future__ import annotations

from magento_tree import MagentoTree

from staticdeploy.features.deploy.domain.models import DeployJob
from staticdeploy.features.deploy.usecases.output_paths import destination_root, read_deployed_version
from staticdeploy.features.themes.domain.models import Area, LocaleIdentity, ThemeIdentity

JOB = DeployJob(ThemeIdentity("Hyva", "default"), Area.FRONTEND, LocaleIdentity("en_US"))


def test_missing_marker_means_no_version(magento: MagentoTree) -> None:
    assert read_deployed_version(magento.root) is None


def test_blank_marker_means_no_version(magento: MagentoTree) -> None:
    _ = magento.write("pub/static/deployed_version.txt", "  \n")
    assert read_deployed_version(magento.root) is None


def test_marker_is_trimmed_and_used_verbatim(magento: MagentoTree) -> None:
    _ = magento.write("pub/static/deployed_version.txt", "1700000000\n")
    version = read_deployed_version(magento.root)

    assert version == "1700000000"
    assert destination_root(magento.root, JOB, version) == (
        magento.root / "pub/static/1700000000/frontend/Hyva/default/en_US"
    )


def test_destination_without_version(magento: MagentoTree) -> None:
    assert destination_root(magento.root, JOB) == magento.root / "pub/static/frontend/Hyva/default/en_US"
