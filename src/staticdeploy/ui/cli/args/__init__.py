"""Command line argument handling package."""

from staticdeploy.ui.cli.args.parser import ArgumentParser
from staticdeploy.ui.cli.args.options import CLIArgs, DeployArgs, InitConfigArgs

__all__ = ["ArgumentParser", "CLIArgs", "DeployArgs", "InitConfigArgs"]
