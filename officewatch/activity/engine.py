"""
ⒸAngelaMos | 2026
activity/engine.py
"""
from __future__ import annotations

import asyncio
import time
from collections.abc import Callable, Sequence
from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from officewatch.activity.classifier import (
    classify_activity,
    classify_room,
    describe_task,
)
from officewatch.activity.progress import count_commits_today, estimate_progress
from officewatch.core import get_logger
from officewatch.models import (
    IDLE_ROOM,
    IDLE_TASK,
    RECENT_FILES_LIMIT,
    Activity,
    Commit,
    FileEvent,
    RecentFile,
    StatusSnapshot,
)

if TYPE_CHECKING:
    from officewatch.core import OfficeWatchSettings, RoomRule, StateStore
    from officewatch.git import GitHistoryReader


class SnapshotPublisher(Protocol):
    """
    Anything that wants to hear about every new snapshot
    """
    async def publish(self, snapshot: StatusSnapshot) -> None:
        ...


class ActivityEngine:
    """
    The single writer of the status snapshot
    File events, the commit poll and the idle check all run under one lock,
    so a snapshot is only ever replaced as a whole
    """
    def __init__(
        self,
        store: StateStore,
        history: GitHistoryReader,
        rooms: Sequence[RoomRule],
        workspace: Path,
        idle_threshold: float = 300.0,
        git_timeout: float = 10.0,
        publish_timeout: float = 5.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.store = store
        self.history = history
        self.rooms = list(rooms)
        self.workspace = workspace
        self.idle_threshold = idle_threshold
        self.git_timeout = git_timeout
        self.publish_timeout = publish_timeout
        self.logger = get_logger("engine")
        self._clock = clock
        self._lock = asyncio.Lock()
        self._publishers: list[SnapshotPublisher] = []

    @classmethod
    def from_settings(
        cls,
        settings: OfficeWatchSettings,
        store: StateStore | None = None,
    ) -> ActivityEngine:
        from officewatch.core import StateStore
        from officewatch.git import GitHistoryReader

        workspace = settings.workspace.resolve()
        return cls(
            store = store or StateStore(),
            history = GitHistoryReader(
                workspace = workspace,
                subdirectories = list(settings.subdirectories),
            ),
            rooms = settings.rooms,
            workspace = workspace,
            idle_threshold = settings.idle_threshold_seconds,
            git_timeout = settings.git_timeout_seconds,
            publish_timeout = settings.publish_timeout_seconds,
        )

    def snapshot(self) -> StatusSnapshot:
        return self.store.get()

    def subscribe(self, publisher: SnapshotPublisher) -> Callable[[], None]:
        """
        Register a publisher, returns a callable that removes it again
        """
        self._publishers.append(publisher)

        def unsubscribe() -> None:
            if publisher in self._publishers:
                self._publishers.remove(publisher)

        return unsubscribe

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def _today(self) -> date:
        return datetime.fromtimestamp(self._clock()).date()

    def _relative(self, path: Path) -> str:
        try:
            return path.relative_to(self.workspace).as_posix()
        except ValueError:
            return path.as_posix()

    async def _fetch_commits(self) -> list[Commit] | None:
        """
        Read git history off the event loop
        None when the read overran git_timeout
        """
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self.history.fetch_recent_commits),
                timeout = self.git_timeout,
            )
        except asyncio.TimeoutError:
            self.logger.warning("git_read_timeout", timeout = self.git_timeout)
            return None
        except Exception as e:
            self.logger.exception("git_read_error", error = str(e))
            return []

    async def _notify(self, snapshot: StatusSnapshot) -> None:
        """
        Hand the snapshot to every publisher in order
        Each one gets at most publish_timeout seconds while the lock is held
        """
        for publisher in list(self._publishers):
            try:
                await asyncio.wait_for(
                    publisher.publish(snapshot),
                    timeout = self.publish_timeout,
                )
            except asyncio.TimeoutError:
                self.logger.warning(
                    "publish_timeout",
                    publisher = type(publisher).__name__,
                    timeout = self.publish_timeout,
                )
            except Exception as e:
                self.logger.exception("publish_failed", error = str(e))

    async def handle_event(self, kind: FileEvent, path: Path | str) -> StatusSnapshot | None:
        """
        Dispatch one watcher event
        Only modifications move the status, new files are just logged
        """
        path = Path(path)
        if kind is FileEvent.MODIFIED:
            return await self.handle_file_change(path)
        if kind is FileEvent.ADDED:
            self.logger.info("file_added", path = self._relative(path))
        return None

    async def handle_file_change(self, path: Path | str) -> StatusSnapshot:
        path = Path(path)
        relative = self._relative(path)
        room = classify_room(relative, self.rooms)
        activity = classify_activity(path.name)

        async with self._lock:
            current = self.store.get()
            now_ms = self._now_ms()

            recent_files = (
                RecentFile(path = relative, time = now_ms, room = room),
                *current.recent_files,
            )[:RECENT_FILES_LIMIT]

            commits = await self._fetch_commits()
            recent_commits = current.recent_commits if commits is None else tuple(commits)

            snapshot = self.store.update(
                room = room,
                activity = activity,
                last_active = now_ms,
                task = describe_task(room, path.name, self.rooms) or current.task,
                recent_files = recent_files,
                recent_commits = recent_commits,
                progress = estimate_progress(recent_files, recent_commits, self._today()),
                stats = current.stats.model_copy(
                    update = {"files_modified": current.stats.files_modified + 1}
                ),
            )

            self.logger.info(
                "file_changed",
                room = room,
                activity = activity.value,
                path = relative,
                progress = snapshot.progress,
            )
            await self._notify(snapshot)
            return snapshot

    async def poll_commits(self) -> bool:
        """
        Refresh recent commits, flag a commit when today's count grows
        Returns True when a new commit was detected
        """
        async with self._lock:
            commits = await self._fetch_commits()
            if commits is None:
                return False

            current = self.store.get()
            today_count = count_commits_today(commits, self._today())

            if today_count <= current.stats.commits_today:
                self.store.update(recent_commits = tuple(commits))
                return False

            snapshot = self.store.update(
                recent_commits = tuple(commits),
                activity = Activity.COMMIT,
                last_active = self._now_ms(),
                stats = current.stats.model_copy(
                    update = {"commits_today": today_count}
                ),
            )
            self.logger.info("new_commit_detected", commits_today = today_count)
            await self._notify(snapshot)
            return True

    async def check_idle(self) -> bool:
        """
        Reset to IDLE after idle_threshold seconds without activity
        Does nothing while already idle, so it never repeats a notification
        """
        async with self._lock:
            current = self.store.get()
            idle_for = self._clock() - current.last_active / 1000

            if idle_for <= self.idle_threshold or current.room == IDLE_ROOM:
                return False

            snapshot = self.store.update(
                room = IDLE_ROOM,
                activity = Activity.IDLE,
                task = IDLE_TASK,
                progress = 0,
            )
            self.logger.info(
                "workspace_idle",
                previous_room = current.room,
                idle_seconds = round(idle_for),
            )
            await self._notify(snapshot)
            return True
