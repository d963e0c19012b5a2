"""
ⒸAngelaMos | 2026
scheduler/scheduler.py
"""
from __future__ import annotations

import asyncio
from datetime import datetime
from typing import TYPE_CHECKING

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from officewatch.core import get_logger

if TYPE_CHECKING:
    from officewatch.activity import ActivityEngine
    from officewatch.core import OfficeWatchSettings

logger = get_logger("scheduler")


COMMIT_POLL_JOB = "commit_poll"
IDLE_CHECK_JOB = "idle_check"


class ActivityScheduler:
    """
    Runs the commit poll and idle check on fixed intervals
    Both jobs go through the engine lock, so they never interleave with
    a file event
    """

    def __init__(
        self,
        engine: ActivityEngine,
        commit_poll_seconds: float = 5.0,
        idle_check_seconds: float = 30.0,
    ) -> None:
        self.engine = engine
        self.commit_poll_seconds = commit_poll_seconds
        self.idle_check_seconds = idle_check_seconds
        self._scheduler: AsyncIOScheduler | None = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def start(self) -> None:
        """
        Start the scheduler, must be called with a running event loop
        """
        self._scheduler = AsyncIOScheduler(event_loop=asyncio.get_running_loop())
        self._scheduler.add_job(
            self._poll_commits,
            trigger=IntervalTrigger(seconds=self.commit_poll_seconds),
            id=COMMIT_POLL_JOB,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        self._scheduler.add_job(
            self._check_idle,
            trigger=IntervalTrigger(seconds=self.idle_check_seconds),
            id=IDLE_CHECK_JOB,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )

        self._scheduler.start()
        logger.info(
            "scheduler_started",
            commit_poll_seconds=self.commit_poll_seconds,
            idle_check_seconds=self.idle_check_seconds,
        )

    def stop(self, wait: bool = False) -> None:
        if self.running:
            self._scheduler.shutdown(wait=wait)
            logger.info("scheduler_stopped")

    async def _poll_commits(self) -> None:
        try:
            await self.engine.poll_commits()
        except Exception as e:
            logger.exception("commit_poll_failed", error=str(e))

    async def _check_idle(self) -> None:
        try:
            await self.engine.check_idle()
        except Exception as e:
            logger.exception("idle_check_failed", error=str(e))

    def get_next_run_time(self, job_id: str) -> datetime | None:
        if self._scheduler is None:
            return None
        job = self._scheduler.get_job(job_id)
        if job:
            return job.next_run_time
        return None


def create_scheduler(engine: ActivityEngine, settings: OfficeWatchSettings) -> ActivityScheduler:
    """
    Create a scheduler using the configured polling intervals
    """
    return ActivityScheduler(
        engine,
        commit_poll_seconds=settings.commit_poll_seconds,
        idle_check_seconds=settings.idle_check_seconds,
    )
