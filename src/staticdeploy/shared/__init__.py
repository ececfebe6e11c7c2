"""Shared primitives used across feature packages."""

from .events import DeployEvent

__all__ = ["DeployEvent"]
