"""
ⒸAngelaMos | 2026
git/history.py
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from git import Repo
from git.exc import GitError

from officewatch.core import get_logger
from officewatch.models import RECENT_COMMITS_LIMIT, Commit

logger = get_logger("git")


@dataclass
class CommitSource:
    """
    One repository the reader pulls history from
    """
    path: Path
    max_count: int
    tag: str | None = None

    def format_message(self, message: str) -> str:
        if self.tag:
            return f"[{self.tag}] {message}"
        return message


def read_commits(source: CommitSource) -> list[Commit]:
    """
    Read up to max_count commits from a single repository
    Raises GitError / ValueError / OSError on a missing, invalid or empty repo
    """
    commits = []
    with Repo(source.path) as repo:
        for commit in repo.iter_commits(max_count = source.max_count):
            commits.append(
                Commit(
                    message = source.format_message(commit.summary),
                    date = commit.authored_datetime,
                    author = commit.author.name or "",
                )
            )
    return commits


@dataclass
class GitHistoryReader:
    """
    Gathers recent commits from the workspace root and its sub-repositories

    Every call opens its own Repo handles, so concurrent calls from worker
    threads do not share state.
    """
    workspace: Path
    subdirectories: list[str] = field(default_factory = list)
    root_limit: int = 5
    subdir_limit: int = 3
    limit: int = RECENT_COMMITS_LIMIT

    def sources(self) -> list[CommitSource]:
        sources = [CommitSource(path = self.workspace, max_count = self.root_limit)]
        for name in self.subdirectories:
            sources.append(
                CommitSource(
                    path = self.workspace / name,
                    max_count = self.subdir_limit,
                    tag = name,
                )
            )
        return sources

    def fetch_recent_commits(self) -> list[Commit]:
        """
        Merge commits from every source, newest first, truncated to limit
        A source that cannot be read contributes nothing
        """
        gathered: list[Commit] = []
        for source in self.sources():
            try:
                gathered.extend(read_commits(source))
            except (GitError, ValueError, OSError) as e:
                logger.debug(
                    "git_read_failed",
                    path = str(source.path),
                    error = str(e),
                )

        gathered.sort(key = lambda c: c.date, reverse = True)
        return gathered[:self.limit]
