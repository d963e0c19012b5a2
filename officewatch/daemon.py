"""
ⒸAngelaMos | 2026
daemon.py
"""
from __future__ import annotations

import asyncio
import contextlib
from typing import TYPE_CHECKING

from officewatch.core import get_logger
from officewatch.scheduler import create_scheduler
from officewatch.watch import WorkspaceWatcher

if TYPE_CHECKING:
    from officewatch.activity import ActivityEngine
    from officewatch.core import OfficeWatchSettings


class OfficeWatchDaemon:
    """
    Background side of the watcher
    Feeds workspace changes into the engine and keeps both timers running
    for as long as the web app is up
    """
    def __init__(
        self,
        settings: OfficeWatchSettings,
        engine: ActivityEngine,
        watch: bool = True,
    ) -> None:
        self.settings = settings
        self.engine = engine
        self.watch = watch
        self.logger = get_logger("daemon")
        self.running = False

        self.scheduler = create_scheduler(engine, settings)
        self.watcher = WorkspaceWatcher(
            root = engine.workspace,
            ignore_patterns = list(settings.ignore_patterns),
        )
        self._stop_event: asyncio.Event | None = None
        self._watch_task: asyncio.Task | None = None

    async def start(self) -> None:
        if self.running:
            return
        self.running = True

        self.logger.info(
            "daemon_starting",
            workspace = str(self.engine.workspace),
            subdirectories = list(self.settings.subdirectories),
            idle_threshold = self.settings.idle_threshold_seconds,
            watch = self.watch,
        )

        self.scheduler.start()

        if self.watch:
            self._stop_event = asyncio.Event()
            self._watch_task = asyncio.create_task(self._watch_loop())

    async def stop(self) -> None:
        if not self.running:
            return
        self.running = False

        self.scheduler.stop(wait = False)

        if self._stop_event is not None:
            self._stop_event.set()
        if self._watch_task and not self._watch_task.done():
            self._watch_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._watch_task
        self._watch_task = None
        self._stop_event = None

        self.logger.info(
            "daemon_stopped",
            **self.engine.snapshot().stats.model_dump(),
        )

    async def _watch_loop(self) -> None:
        try:
            async for kind, path in self.watcher.events(self._stop_event):
                try:
                    await self.engine.handle_event(kind, path)
                except Exception as e:
                    self.logger.exception(
                        "file_event_failed",
                        path = str(path),
                        error = str(e),
                    )
        except OSError as e:
            # timers keep running, only live file tracking is lost
            self.logger.error(
                "watcher_failed",
                root = str(self.watcher.root),
                error = str(e),
            )
