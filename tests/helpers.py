"""Shared test helpers."""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from pathlib import Path

from git import Actor, Repo

from officewatch.models import Commit, StatusSnapshot


def local_ts(*args: int) -> float:
    """Epoch seconds for a naive local datetime."""
    return datetime(*args).timestamp()


class FakeClock:
    def __init__(self, now: float) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeHistory:
    """Stands in for GitHistoryReader; optionally blocks until released."""

    def __init__(self, commits: list[Commit] | None = None, error: Exception | None = None) -> None:
        self.commits = list(commits or [])
        self.error = error
        self.calls = 0
        self.gate: threading.Event | None = None
        self.entered = threading.Event()

    def block(self) -> threading.Event:
        self.gate = threading.Event()
        return self.gate

    def fetch_recent_commits(self) -> list[Commit]:
        self.calls += 1
        self.entered.set()
        if self.gate is not None:
            self.gate.wait(5)
        if self.error is not None:
            raise self.error
        return list(self.commits)


class RecordingPublisher:
    def __init__(self) -> None:
        self.snapshots: list[StatusSnapshot] = []

    async def publish(self, snapshot: StatusSnapshot) -> None:
        self.snapshots.append(snapshot)


class BrokenPublisher:
    async def publish(self, snapshot: StatusSnapshot) -> None:
        raise ConnectionError("socket gone")


def make_commit(message: str, ts: float, author: str = "Dev") -> Commit:
    return Commit(
        message=message,
        date=datetime.fromtimestamp(ts, tz=timezone.utc),
        author=author,
    )


def init_repo(path: Path) -> Repo:
    path.mkdir(parents=True, exist_ok=True)
    return Repo.init(path)


def add_commit(repo: Repo, message: str, ts: float, author: str = "Dev") -> None:
    log_file = Path(repo.working_tree_dir) / "log.txt"
    with log_file.open("a", encoding="utf-8") as f:
        f.write(message + "\n")
    repo.index.add(["log.txt"])
    actor = Actor(author, f"{author.lower()}@example.com")
    stamp = f"{int(ts)} +0000"
    repo.index.commit(
        message,
        author=actor,
        committer=actor,
        author_date=stamp,
        commit_date=stamp,
    )


def idle_snapshot(clock: FakeClock) -> StatusSnapshot:
    return StatusSnapshot(last_active=int(clock() * 1000))
