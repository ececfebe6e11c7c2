"""Summary: Ports for collaborators the deploy use cases call out to.
Why: Keep subprocess handling swappable so executor tests never spawn processes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..domain.models import DeployJob


@dataclass(frozen=True, slots=True)
class ToolchainResult:
    """Exit status and captured output of one toolchain run."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@runtime_checkable
class FallbackToolchainPort(Protocol):
    """Port for deploying themes that need the external build toolchain."""

    def deploy(self, job: DeployJob, root: Path) -> ToolchainResult:
        """Run the toolchain for ``job``.

        Raises ``ToolchainError`` when the process cannot be started.
        """
        ...


__all__ = ["FallbackToolchainPort", "ToolchainResult"]
