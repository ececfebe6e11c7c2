"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from staticdeploy.application.services.deploy_service import check_installation
from staticdeploy.config.config import Config
from staticdeploy.config.settings import DEFAULT_WORKERS, INCLUDE_DEV
from staticdeploy.features.deploy.domain.errors import InstallationError
from staticdeploy.features.themes.domain.models import Area, LocaleIdentity, ThemeIdentity
from staticdeploy.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from staticdeploy.ui.cli.args.options import CLIArgs, DeployArgs, InitConfigArgs

DEFAULT_AREAS = "frontend,adminhtml"
DEFAULT_LOCALES = "en_US"


def _split_list(value: str) -> list[str]:
    items = [item.strip() for item in value.split(",") if item.strip()]
    if not items:
        raise argparse.ArgumentTypeError("expected a comma-separated list")
    return items


def area_list(value: str) -> tuple[Area, ...]:
    """``argparse`` type for ``frontend,adminhtml``."""

    try:
        return tuple(dict.fromkeys(Area.from_user_input(item) for item in _split_list(value)))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def theme_list(value: str) -> tuple[ThemeIdentity, ...]:
    """``argparse`` type for ``Vendor/name,Vendor/other``."""

    themes: list[ThemeIdentity] = []
    for item in _split_list(value):
        identity = ThemeIdentity.parse(item)
        if identity is None:
            raise argparse.ArgumentTypeError(f"Invalid theme '{item}'. Expected Vendor/name")
        themes.append(identity)
    return tuple(dict.fromkeys(themes))


def locale_list(value: str) -> tuple[str, ...]:
    """``argparse`` type for ``en_US,de_DE``; validation happens after logging is set up."""

    return tuple(dict.fromkeys(_split_list(value)))


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer") from exc
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="staticdeploy",
            description="staticdeploy - deploy theme static assets in parallel.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        deploy_parser = subparsers.add_parser(
            "deploy",
            help="Deploy static assets for the selected themes, areas and locales",
        )
        _ = deploy_parser.add_argument(
            "root",
            nargs="?",
            default=".",
            type=str,
            help="Installation root (default: current directory)",
            metavar="ROOT",
        )
        _ = deploy_parser.add_argument(
            "-a",
            "--area",
            dest="areas",
            type=area_list,
            default=area_list(DEFAULT_AREAS),
            help=f"Comma-separated areas (default: {DEFAULT_AREAS})",
        )
        _ = deploy_parser.add_argument(
            "-t",
            "--theme",
            dest="themes",
            type=theme_list,
            default=None,
            help="Comma-separated Vendor/name themes (default: all discovered)",
        )
        _ = deploy_parser.add_argument(
            "-l",
            "--locale",
            dest="locales",
            type=locale_list,
            default=locale_list(DEFAULT_LOCALES),
            help=f"Comma-separated locales (default: {DEFAULT_LOCALES})",
        )
        _ = deploy_parser.add_argument(
            "-j",
            "--jobs",
            type=positive_int,
            default=DEFAULT_WORKERS,
            help=f"Number of parallel workers (default: {DEFAULT_WORKERS})",
        )
        _ = deploy_parser.add_argument(
            "-d",
            "--include-dev",
            action="store_true",
            default=INCLUDE_DEV,
            help="Also copy development files (.ts, .less, .md, node_modules, ...)",
        )
        verbosity = deploy_parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show per-job progress and debug details",
        )
        _ = verbosity.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write a commented configuration file with default values",
        )
        _ = init_parser.add_argument(
            "--path",
            type=str,
            default=None,
            help="Destination file (default: config/config.toml or $STATICDEPLOY_CONFIG)",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the installation root is unusable or parsing fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "deploy":
            return ArgumentParser._process_deploy(parsed_args)

        if command == "init-config":
            return InitConfigArgs(
                command="init-config",
                path=Path(parsed_args.path).expanduser() if parsed_args.path else None,
                force=bool(parsed_args.force),
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_deploy(parsed_args: argparse.Namespace) -> DeployArgs:
        root = Path(parsed_args.root).expanduser().resolve()
        try:
            check_installation(root)
        except InstallationError as e:
            logger.error("Invalid installation root: %s", e)
            sys.exit(2)

        try:
            locales = tuple(LocaleIdentity.from_user_input(code) for code in parsed_args.locales)
        except ValueError as e:
            logger.error("Invalid locale: %s", e)
            sys.exit(2)

        return DeployArgs(
            command="deploy",
            root=root,
            areas=parsed_args.areas,
            themes=parsed_args.themes,
            locales=locales,
            jobs=parsed_args.jobs,
            include_dev=bool(parsed_args.include_dev),
            verbose=bool(parsed_args.verbose),
            quiet=bool(parsed_args.quiet),
        )


__all__ = ["ArgumentParser", "area_list", "locale_list", "positive_int", "theme_list"]
