"""Display management for CLI interface."""

from staticdeploy.ui.cli.display.progress import ProgressDisplay
from staticdeploy.ui.cli.display.summary import SummaryDisplay

__all__ = ["ProgressDisplay", "SummaryDisplay"]
