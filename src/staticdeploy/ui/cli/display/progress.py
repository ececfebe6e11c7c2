"""Progress display functionality for CLI."""

from typing import Any, Protocol, final, runtime_checkable

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn, TimeElapsedColumn

from staticdeploy.application.services.deploy_service import DeployRequest, PreparedDeployment
from staticdeploy.features.deploy.domain.models import CancellationToken, DeployResult, RunSummary
from staticdeploy.features.deploy.usecases.executor import ProgressCallback
from staticdeploy.platform.logging import DeployRichHandler, logger


@runtime_checkable
class DeployServiceLike(Protocol):
    """Protocol for application services that can execute a prepared deployment."""

    def execute(
        self,
        request: DeployRequest,
        prepared: PreparedDeployment,
        *,
        cancel_token: CancellationToken | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> RunSummary:
        ...


def find_console() -> Console | None:
    """Return the console used by the logger's Rich handler, if any."""

    for handler in logger.handlers:
        if isinstance(handler, DeployRichHandler):
            return handler.console
    return None


@final
class ProgressDisplay:
    """Handles progress display in CLI."""

    def run_with_service(
        self,
        app: DeployServiceLike,
        request: DeployRequest,
        prepared: PreparedDeployment,
        cancel_token: CancellationToken,
        *,
        quiet: bool = False,
    ) -> RunSummary:
        """Run the prepared jobs via the application service with a progress bar.

        Args:
            app: Application service instance used to orchestrate the run.
            request: Deployment parameters.
            prepared: Discovery snapshot and planned jobs.
            cancel_token: Flag observed by every worker.
            quiet: Skip the progress bar entirely.

        Returns:
            RunSummary: Outcome of the run.
        """
        if quiet:
            return app.execute(request, prepared, cancel_token=cancel_token)

        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        progress_console = find_console()
        if progress_console is not None:
            progress_kwargs["console"] = progress_console

        with Progress(
            TextColumn("{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            **progress_kwargs,
        ) as progress:
            task_id: TaskID = progress.add_task("[cyan]Deploying...", total=len(prepared.jobs))
            last_count = 0

            def _cb(finished: int, total: int, result: DeployResult) -> None:
                nonlocal last_count
                advance = max(finished - last_count, 0)
                _ = progress.update(
                    task_id,
                    advance=advance,
                    total=total,
                    description=f"[cyan]Deploying... {result.job.theme}",
                )
                last_count = finished

            return app.execute(
                request,
                prepared,
                cancel_token=cancel_token,
                progress_callback=_cb,
            )


__all__ = ["DeployServiceLike", "ProgressDisplay", "find_console"]
