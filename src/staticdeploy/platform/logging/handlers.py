"""Rich console handler that renders structured deploy events."""

import logging
import sys
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class DeployRichHandler(RichHandler):
    """Rich handler with dedicated rendering for ``deploy_event`` records."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "deploy.run.start": ("🚀", "cyan"),
        "deploy.run.complete": ("✅", "green"),
        "deploy.job.start": ("📦", "blue"),
        "deploy.job.success": ("🎉", "green"),
        "deploy.job.delegated": ("↪️", "magenta"),
        "deploy.job.failed": ("⛔", "red"),
        "deploy.job.cancelled": ("⏹️", "yellow"),
        "discovery.warning": ("⚠️", "yellow"),
        "chain.warning": ("⚠️", "yellow"),
        "locale.warning": ("⚠️", "yellow"),
    }
    _JOB_PREFIXES: ClassVar[dict[str, str]] = {
        "deploy.job.start": "Deploying ",
        "deploy.job.success": "Deployed ",
        "deploy.job.delegated": "Delegated ",
        "deploy.job.failed": "Failed ",
        "deploy.job.cancelled": "Cancelled ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with coloured separators, relative to ``base`` when possible.

        Paths deeper than ``_PATH_SEGMENT_LIMIT`` keep only their trailing
        segments behind an ellipsis.
        """
        pure_path = self._to_pure_path(path)
        display_path: PurePath = pure_path
        if base:
            base_path = self._to_pure_path(base)
            try:
                relative_path = pure_path.relative_to(base_path)
            except ValueError:
                relative_path = None
            if relative_path is not None and str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            display_string = "…" + separator + separator.join(body_parts)
        else:
            display_string = anchor.rstrip("\\/") + (separator if anchor else "")
            display_string += separator.join(body_parts)

        text = Text()
        for char in display_string or ".":
            if char in {separator, "/", "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_deploy_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured deploy events with dedicated styling."""

        event = getattr(record, "deploy_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event.startswith("deploy.job."):
            sequence = getattr(record, "sequence", None)
            total_jobs = getattr(record, "total_jobs", None)
            if isinstance(sequence, int) and sequence > 0:
                if isinstance(total_jobs, int) and total_jobs > 0:
                    _ = body.append(f"[{sequence}/{total_jobs}] ")
                else:
                    _ = body.append(f"[{sequence}] ")

            _ = body.append(self._JOB_PREFIXES.get(event, ""))
            job_label = getattr(record, "job", None)
            if job_label:
                _ = body.append(str(job_label))

            destination = getattr(record, "destination", None)
            if destination and event == "deploy.job.success":
                _ = body.append(" → ")
                _ = body.append_text(
                    self._format_path(str(destination), base=getattr(record, "root", None))
                )

            metrics: list[str] = []
            files_copied = getattr(record, "files_copied", None)
            if isinstance(files_copied, int) and event != "deploy.job.start":
                metrics.append(f"{files_copied} files")
            elapsed = getattr(record, "elapsed_seconds", None)
            if isinstance(elapsed, (int, float)) and event != "deploy.job.start":
                metrics.append(f"{elapsed:.2f}s")
            error_message = getattr(record, "error_message", None)
            if error_message:
                metrics.append(str(error_message))
            if metrics:
                _ = body.append(" (" + ", ".join(metrics) + ")")
        elif event == "deploy.run.start":
            _ = body.append("Deployment started")
            total_jobs = getattr(record, "total_jobs", None)
            workers = getattr(record, "workers", None)
            details: list[str] = []
            if isinstance(total_jobs, int):
                details.append(f"jobs={total_jobs}")
            if isinstance(workers, int):
                details.append(f"workers={workers}")
            if details:
                _ = body.append(" [" + ", ".join(details) + "]")
        elif event == "deploy.run.complete":
            _ = body.append("Deployment finished")
            disposition = getattr(record, "disposition", None)
            if disposition:
                _ = body.append(f" [{disposition}]")
        else:
            _ = body.append(message)

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        deploy_text = self._render_deploy_message(record, message)
        if deploy_text is not None:
            return deploy_text
        return super().render_message(record, message)


__all__ = ["DeployRichHandler"]
