"""Subprocess adapter for the ``setup:static-content:deploy`` command."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import final

from staticdeploy.config.settings import TOOLCHAIN_BINARY
from staticdeploy.platform.logging import logger

from ..domain.errors import ToolchainError
from ..domain.models import DeployJob
from ..usecases.ports import ToolchainResult


@final
class MagentoToolchain:
    """Deploy one theme/locale through the installation's own CLI."""

    def __init__(self, binary: str = TOOLCHAIN_BINARY) -> None:
        self.binary = binary

    def command(self, job: DeployJob, root: Path) -> list[str]:
        executable = Path(self.binary)
        if not executable.is_absolute():
            executable = root / executable
        return [
            str(executable),
            "setup:static-content:deploy",
            "--area",
            job.area.value,
            "--theme",
            str(job.theme),
            job.locale.code,
        ]

    def deploy(self, job: DeployJob, root: Path) -> ToolchainResult:
        """Run the command with ``root`` as working directory.

        Raises:
            ToolchainError: If the process cannot be started.
        """
        command = self.command(job, root)
        logger.debug("Running %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                cwd=root,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise ToolchainError(None, str(exc)) from exc
        return ToolchainResult(completed.returncode, completed.stdout, completed.stderr)


__all__ = ["MagentoToolchain"]
