"""src/staticdeploy/ui/cli/commands/init_config.py
What: Write the default configuration template.
Why: Give users a commented starting point instead of an empty file.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from staticdeploy.config.config import Config
from staticdeploy.config.paths import default_config_path
from staticdeploy.ui.cli.args.options import InitConfigArgs


@final
class InitConfigCommand:
    """Command for the ``init-config`` subcommand."""

    def __init__(self, args: InitConfigArgs) -> None:
        self.args = args

    def execute(self) -> Path:
        """Write the template and return its path.

        Raises:
            FileExistsError: If the target exists and ``--force`` was not given.
        """
        target = self.args.path or default_config_path()
        if target.exists() and not self.args.force:
            raise FileExistsError(f"Configuration file already exists: {target} (use --force)")
        return Config().save(target)


__all__ = ["InitConfigCommand"]
