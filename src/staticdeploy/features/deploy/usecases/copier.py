"""
Summary: Materialise a resolution plan into one destination directory.
Why: Enforce first-writer-wins priority while staying responsive to cancellation.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path, PurePath

from staticdeploy.features.sources.domain.models import ResolutionPlan, SourceOrigin
from staticdeploy.platform.logging import logger

from ..domain.errors import CancelledError, CopyError, CreateDirectoryError
from ..domain.models import CancellationToken
from .dev_files import is_dev_directory, is_dev_file


FileCopiedCallback = Callable[[int], None]


@dataclass(frozen=True, slots=True)
class CopyReport:
    """Totals for one ``copy_plan`` call."""

    files_copied: int = 0
    bytes_copied: int = 0
    cancelled: bool = False


def copy_file(source: Path, destination: Path) -> int:
    """Copy contents and attributes of ``source`` to ``destination``.

    An existing destination file is replaced, so earlier runs never block a
    re-copy. Symlinked sources are dereferenced.

    Returns:
        int: Bytes written.

    Raises:
        CopyError: On any I/O failure (``DiskFullError`` when out of space).
    """
    try:
        if destination.is_symlink() or destination.is_file():
            destination.unlink()
        _ = shutil.copyfile(source, destination)
        shutil.copystat(source, destination)
        return destination.stat().st_size
    except OSError as exc:
        raise CopyError.from_os_error(source, destination, exc) from exc


def ensure_destination_directory(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CreateDirectoryError(directory, exc) from exc


class _PlanCopier:
    """Per-call state for ``copy_plan``."""

    def __init__(
        self,
        destination_root: Path,
        cancel_token: CancellationToken,
        include_dev: bool,
        on_file_copied: FileCopiedCallback | None,
    ) -> None:
        self.destination_root = destination_root
        self.cancel_token = cancel_token
        self.include_dev = include_dev
        self.on_file_copied = on_file_copied
        self.written: set[PurePath] = set()
        self.written_dirs: set[PurePath] = set()
        self.created: set[Path] = set()
        self.files_copied = 0
        self.bytes_copied = 0

    def copy_origin(self, origin: SourceOrigin) -> None:
        """Copy one origin subtree, skipping paths already written."""

        # Directory identities on the path from the origin root down to each walked directory.
        ancestors: dict[str, frozenset[tuple[int, int]]] = {}
        destination_dir = self.destination_root / origin.destination_prefix

        def _walk_error(exc: OSError) -> None:
            source = Path(exc.filename) if exc.filename else origin.path
            raise CopyError.from_os_error(source, destination_dir, exc)

        for dirpath, dirnames, filenames in os.walk(origin.path, followlinks=True, onerror=_walk_error):
            self.cancel_token.raise_if_cancelled()
            current = Path(dirpath)
            try:
                stat = current.stat()
            except OSError as exc:
                raise CopyError.from_os_error(current, destination_dir, exc) from exc
            key = (stat.st_dev, stat.st_ino)
            chain = ancestors.pop(dirpath, frozenset())
            if key in chain:
                logger.warning("Skipping %s: symbolic link loops back onto an ancestor", current)
                dirnames[:] = []
                continue

            relative_dir = origin.destination_prefix / current.relative_to(origin.path)
            blocker = self._written_ancestor(relative_dir)
            if blocker is not None:
                logger.warning(
                    "Skipping %s: %s was already deployed as a file by a higher-priority origin",
                    current,
                    blocker,
                )
                dirnames[:] = []
                continue

            dirnames[:] = sorted(
                name for name in dirnames if self.include_dev or not is_dev_directory(name)
            )
            chain = chain | {key}
            for name in dirnames:
                ancestors[os.path.join(dirpath, name)] = chain

            for name in sorted(filenames):
                self.cancel_token.raise_if_cancelled()
                relative = relative_dir / name
                if relative in self.written:
                    continue
                if not self.include_dev and is_dev_file(name):
                    continue
                self._copy_one(current / name, relative)

    def _written_ancestor(self, relative_dir: PurePath) -> PurePath | None:
        """Return the deployed file occupying ``relative_dir`` or one of its parents."""

        for candidate in (relative_dir, *relative_dir.parents):
            if candidate in self.written:
                return candidate
        return None

    def _copy_one(self, source: Path, relative: PurePath) -> None:
        if not source.is_file():
            logger.warning("Skipping %s: not a regular file or a dangling link", source)
            return
        if relative in self.written_dirs:
            logger.warning(
                "Skipping %s: %s was already deployed as a directory by a higher-priority origin",
                source,
                relative,
            )
            return
        target = self.destination_root / relative
        if target.parent not in self.created:
            ensure_destination_directory(target.parent)
            self.created.add(target.parent)

        size = copy_file(source, target)
        self.written.add(relative)
        self.written_dirs.update(relative.parents)
        self.files_copied += 1
        self.bytes_copied += size
        if self.on_file_copied is not None:
            self.on_file_copied(size)

    def report(self, cancelled: bool = False) -> CopyReport:
        return CopyReport(self.files_copied, self.bytes_copied, cancelled)


def copy_plan(
    plan: ResolutionPlan,
    destination_root: Path,
    cancel_token: CancellationToken,
    *,
    include_dev: bool = False,
    on_file_copied: FileCopiedCallback | None = None,
) -> CopyReport:
    """Copy every origin of ``plan`` into ``destination_root`` in plan order.

    A relative path is written at most once per call; the first origin that
    provides it wins. The cancellation token is checked before each directory
    and each file; when set, copying stops and the report is marked cancelled.

    Args:
        plan: Ordered origins, highest priority first.
        destination_root: Directory receiving the flattened tree.
        cancel_token: Run-wide cancellation flag.
        include_dev: Copy development artefacts as well.
        on_file_copied: Called with the byte size after each copied file.

    Raises:
        CopyError: When a file cannot be read or written.
        CreateDirectoryError: When a destination directory cannot be created.
    """
    copier = _PlanCopier(destination_root, cancel_token, include_dev, on_file_copied)
    try:
        for origin in plan:
            cancel_token.raise_if_cancelled()
            copier.copy_origin(origin)
    except CancelledError:
        return copier.report(cancelled=True)
    return copier.report()


__all__ = ["CopyReport", "copy_file", "copy_plan", "ensure_destination_directory"]
