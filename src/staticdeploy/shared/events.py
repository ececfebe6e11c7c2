"""
Summary: Structured event identifiers attached to log records as ``deploy_event``.
Why: Let the console handler style deploy progress without parsing messages.
"""

from __future__ import annotations

from enum import StrEnum


class DeployEvent(StrEnum):
    """Structured event identifiers for deployment logs."""

    RUN_START = "deploy.run.start"
    RUN_COMPLETE = "deploy.run.complete"
    JOB_START = "deploy.job.start"
    JOB_SUCCESS = "deploy.job.success"
    JOB_DELEGATED = "deploy.job.delegated"
    JOB_FAILED = "deploy.job.failed"
    JOB_CANCELLED = "deploy.job.cancelled"
    DISCOVERY_WARNING = "discovery.warning"
    CHAIN_WARNING = "chain.warning"
    LOCALE_WARNING = "locale.warning"


__all__ = ["DeployEvent"]
