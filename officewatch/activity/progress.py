"""
ⒸAngelaMos | 2026
activity/progress.py
"""
from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from officewatch.models import Commit, RecentFile


FILE_POINTS = 5
FILE_CAP = 40
COMMIT_POINTS = 20
COMMIT_CAP = 60


def count_commits_today(commits: Sequence[Commit], today: date | None = None) -> int:
    """
    Count commits dated on the given local calendar day
    """
    if today is None:
        today = date.today()
    return sum(1 for c in commits if c.date.astimezone().date() == today)


def estimate_progress(
    recent_files: Sequence[RecentFile],
    commits: Sequence[Commit],
    today: date | None = None,
) -> int:
    """
    Synthetic 0-100 activity score from recent file touches and today's commits
    """
    file_score = min(len(recent_files) * FILE_POINTS, FILE_CAP)
    commit_score = min(count_commits_today(commits, today) * COMMIT_POINTS, COMMIT_CAP)
    return min(file_score + commit_score, 100)
