"""src/staticdeploy/ui/cli/commands/deploy.py
What: Execute deploy runs via the CLI.
Why: Bridge parsed arguments, interrupt handling and displays with the service.
"""

from __future__ import annotations

import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType
from typing import final

from staticdeploy.application.services.deploy_service import DeployRequest, DeployService
from staticdeploy.features.deploy.domain.models import CancellationToken, RunSummary
from staticdeploy.platform.logging import logger
from staticdeploy.ui.cli.args.options import DeployArgs
from staticdeploy.ui.cli.display.progress import ProgressDisplay, find_console
from staticdeploy.ui.cli.display.summary import SummaryDisplay


@contextmanager
def cancel_on_interrupt(token: CancellationToken) -> Iterator[CancellationToken]:
    """Translate the first SIGINT into ``token.cancel()``.

    A second interrupt falls through to the default handler. Outside the
    main thread the handler cannot be installed and the token is yielded as is.
    """
    if threading.current_thread() is not threading.main_thread():
        yield token
        return

    def _handle(signum: int, frame: FrameType | None) -> None:
        _ = (signum, frame)
        if token.is_cancelled:
            raise KeyboardInterrupt
        logger.warning("Cancellation requested; waiting for running jobs to stop (Ctrl+C again to abort)")
        token.cancel()

    previous = signal.signal(signal.SIGINT, _handle)
    try:
        yield token
    finally:
        _ = signal.signal(signal.SIGINT, previous)


@final
class DeployCommand:
    """Command for deploying static assets."""

    args: DeployArgs
    app: DeployService
    request: DeployRequest
    progress_display: ProgressDisplay
    summary_display: SummaryDisplay

    def __init__(self, args: DeployArgs, app: DeployService | None = None) -> None:
        """Initialize deploy command.

        Args:
            args: Command line arguments.
            app: Service override for tests.
        """
        self.args = args
        self.app = app or DeployService()
        self.request = DeployRequest(
            root=args.root,
            areas=args.areas,
            locales=args.locales,
            themes=args.themes,
            workers=args.jobs,
            include_dev=args.include_dev,
        )
        self.progress_display = ProgressDisplay()
        self.summary_display = SummaryDisplay(find_console())

    def execute(self) -> RunSummary:
        """Execute the deployment.

        Returns:
            RunSummary: Outcome of the run.
        """
        prepared = self.app.prepare(self.request)
        with cancel_on_interrupt(CancellationToken()) as token:
            summary = self.progress_display.run_with_service(
                self.app,
                self.request,
                prepared,
                token,
                quiet=self.args.quiet,
            )
        self.summary_display.show_summary(summary, quiet=self.args.quiet)
        return summary


__all__ = ["DeployCommand", "cancel_on_interrupt"]
