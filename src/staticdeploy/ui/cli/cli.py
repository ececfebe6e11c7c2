"""Command line interface for staticdeploy."""

import sys
from typing import final

from staticdeploy.features.deploy.domain.errors import DeployError
from staticdeploy.platform.logging import logger
from staticdeploy.ui.cli.args import ArgumentParser
from staticdeploy.ui.cli.args.options import CLIArgs, DeployArgs, InitConfigArgs
from staticdeploy.ui.cli.commands import DeployCommand, InitConfigCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, DeployArgs):
                summary = DeployCommand(args).execute()
                exit_code = summary.disposition.exit_code
                if exit_code != 0:
                    sys.exit(exit_code)
                return

            assert isinstance(args, InitConfigArgs)
            _ = InitConfigCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except (DeployError, FileExistsError) as e:
            logger.error("%s", e)
            sys.exit(2)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(2)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Note that underlying
        command processing may call ``sys.exit(...)`` on errors, so this
        return is only reached when processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
