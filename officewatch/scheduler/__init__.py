"""
ⒸAngelaMos | 2026
scheduler/__init__.py
"""
from officewatch.scheduler.scheduler import (
    COMMIT_POLL_JOB,
    IDLE_CHECK_JOB,
    ActivityScheduler,
    create_scheduler,
)

__all__ = [
    "ActivityScheduler",
    "COMMIT_POLL_JOB",
    "IDLE_CHECK_JOB",
    "create_scheduler",
]
