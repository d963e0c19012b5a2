"""
ⒸAngelaMos | 2026
activity/__init__.py
"""
from officewatch.activity.classifier import (
    classify_activity,
    classify_room,
    describe_task,
)
from officewatch.activity.commands import read_recent_commands
from officewatch.activity.engine import ActivityEngine, SnapshotPublisher
from officewatch.activity.progress import count_commits_today, estimate_progress

__all__ = [
    "ActivityEngine",
    "SnapshotPublisher",
    "classify_activity",
    "classify_room",
    "count_commits_today",
    "describe_task",
    "estimate_progress",
    "read_recent_commands",
]
