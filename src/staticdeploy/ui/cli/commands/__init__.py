"""Command execution package for CLI."""

from staticdeploy.ui.cli.commands.deploy import DeployCommand
from staticdeploy.ui.cli.commands.init_config import InitConfigCommand

__all__ = ["DeployCommand", "InitConfigCommand"]
