"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from staticdeploy.features.themes.domain.models import Area, LocaleIdentity, ThemeIdentity


@final
@dataclass(slots=True)
class DeployArgs:
    """Command line arguments for the ``deploy`` subcommand."""

    command: Literal["deploy"]
    root: Path
    areas: tuple[Area, ...]
    themes: tuple[ThemeIdentity, ...] | None
    locales: tuple[LocaleIdentity, ...]
    jobs: int
    include_dev: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Command line arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    path: Path | None
    force: bool


CLIArgs = DeployArgs | InitConfigArgs

__all__ = ["CLIArgs", "DeployArgs", "InitConfigArgs"]
