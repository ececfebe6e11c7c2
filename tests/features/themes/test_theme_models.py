"""
Summary: Tests for theme, area and locale value types.
Why: Lock down identity parsing and the lenient locale policy.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from staticdeploy.features.themes.domain.models import (
    Area,
    ChainBreak,
    DeployStrategy,
    LocaleIdentity,
    ThemeChain,
    ThemeIdentity,
    ThemeNode,
)


def test_theme_identity_parse_and_text_form() -> None:
    identity = ThemeIdentity.parse(" Magento/luma ")
    assert identity == ThemeIdentity("Magento", "luma")
    assert str(identity) == "Magento/luma"
    assert hash(identity) == hash(ThemeIdentity("Magento", "luma"))


@pytest.mark.parametrize("raw", ["", "Magento", "Magento/", "/luma", "a/b/c", "  /  "])
def test_theme_identity_parse_rejects_malformed(raw: str) -> None:
    assert ThemeIdentity.parse(raw) is None


def test_theme_identity_requires_non_empty_parts() -> None:
    with pytest.raises(ValueError):
        _ = ThemeIdentity("", "luma")
    with pytest.raises(ValueError):
        _ = ThemeIdentity("Magento", "lu/ma")


def test_area_from_user_input() -> None:
    assert Area.from_user_input(" Frontend ") is Area.FRONTEND
    assert Area.from_user_input("adminhtml") is Area.ADMINHTML
    with pytest.raises(ValueError, match="Valid options"):
        _ = Area.from_user_input("base")


def test_standard_locale_has_no_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="staticdeploy"):
        locale = LocaleIdentity.from_user_input("de_DE")
    assert locale.is_standard
    assert caplog.records == []


def test_non_standard_locale_is_accepted_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="staticdeploy"):
        locale = LocaleIdentity.from_user_input("dutch")

    assert locale.code == "dutch"
    assert str(locale) == "dutch"
    assert not locale.is_standard
    assert any(
        getattr(record, "deploy_event", None) == "locale.warning" for record in caplog.records
    )


@pytest.mark.parametrize("raw", ["", " en_US", "en/US", "..", "a\\b"])
def test_locale_rejects_unusable_directory_names(raw: str) -> None:
    with pytest.raises(ValueError):
        _ = LocaleIdentity(raw)


def test_theme_chain_exposes_identities(tmp_path: Path) -> None:
    child = ThemeNode(
        ThemeIdentity("B", "y"), Area.FRONTEND, tmp_path / "B/y", ThemeIdentity("A", "x"), DeployStrategy.FAST_PATH
    )
    parent = ThemeNode(ThemeIdentity("A", "x"), Area.FRONTEND, tmp_path / "A/x", None, DeployStrategy.FALLBACK)
    chain = ThemeChain((child, parent))

    assert chain.head is child
    assert chain.identities == (ThemeIdentity("B", "y"), ThemeIdentity("A", "x"))
    assert len(chain) == 2
    assert not chain.truncated
    assert child.fast_path_eligible and not parent.fast_path_eligible
    assert ThemeChain((child,), ChainBreak.MISSING_PARENT, ThemeIdentity("A", "x")).truncated
