"""Rich-based progress reporter for rank-file downloads."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeRemainingColumn,
    TransferSpeedColumn,
)


if TYPE_CHECKING:
    from types import TracebackType

    from rich.console import Console

    from rankcache.core.ports import ProgressCallback


def _short_name(name: str) -> str:
    """Last path segment of a URL or path, for compact bar labels."""
    path = urlsplit(name).path if "://" in name else name
    return path.rstrip("/").rsplit("/", 1)[-1] or name


class RichProgressReporter:
    """Progress reporter using Rich for terminal display.

    Shows one bar per download with size, speed and ETA. Servers that omit
    Content-Length get an indeterminate bar. When used outside a ``with``
    block the display starts on the first task and stops once every task
    has finished.

    Example:
        with RichProgressReporter() as reporter:
            ranks = RankLoader.from_env(progress=reporter).load(url)
    """

    def __init__(self, console: Console | None = None, transient: bool = False) -> None:
        """Initialize the progress display.

        Args:
            console: Optional Rich console to render on.
            transient: Remove the bars from the terminal once stopped.
        """
        self._progress = Progress(
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            DownloadColumn(),
            TransferSpeedColumn(),
            TimeRemainingColumn(),
            console=console,
            transient=transient,
        )
        # Several downloads may share a name; each gets its own bar.
        self._tasks: dict[str, list[TaskID]] = {}
        self._lock = threading.Lock()
        self._started = False
        self._managed = False

    def __enter__(self) -> RichProgressReporter:
        """Start the progress display."""
        self._progress.start()
        self._started = True
        self._managed = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Stop the progress display."""
        self._progress.stop()
        self._started = False
        self._managed = False

    def start_task(self, name: str, total: int) -> ProgressCallback:
        """Start tracking a download.

        Args:
            name: Task name, usually the URL being downloaded.
            total: Total bytes, or 0 if the server did not say.

        Returns:
            A callback to update progress.
        """
        with self._lock:
            if not self._started:
                self._progress.start()
                self._started = True

            task_id = self._progress.add_task(_short_name(name), total=total or None)
            self._tasks.setdefault(name, []).append(task_id)

        def callback(downloaded: int, _total: int) -> None:
            self._progress.update(task_id, completed=downloaded)

        return callback

    def finish_task(self, name: str) -> None:
        """Mark a download as complete.

        When several tasks share the name, the oldest one is finished.

        Args:
            name: The task name passed to start_task().
        """
        with self._lock:
            pending = self._tasks.get(name)
            if not pending:
                return
            task_id = pending.pop(0)
            if not pending:
                del self._tasks[name]

            task = self._progress.tasks[task_id]
            # Indeterminate bars get pinned to what was actually received
            total = task.total if task.total is not None else task.completed
            self._progress.update(task_id, total=total, completed=total)

            if not self._managed and not self._tasks:
                self._progress.stop()
                self._started = False
