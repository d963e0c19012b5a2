from __future__ import annotations

from pathlib import Path

import pytest

from officewatch.activity import ActivityEngine
from officewatch.core import StateStore, default_rooms
from tests.helpers import FakeClock, FakeHistory, RecordingPublisher, idle_snapshot, local_ts


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(local_ts(2026, 3, 10, 12, 0))


@pytest.fixture
def history() -> FakeHistory:
    return FakeHistory()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "ws"
    root.mkdir()
    return root


@pytest.fixture
def engine(workspace: Path, history: FakeHistory, clock: FakeClock) -> ActivityEngine:
    return ActivityEngine(
        store=StateStore(idle_snapshot(clock)),
        history=history,
        rooms=default_rooms(),
        workspace=workspace,
        idle_threshold=300.0,
        git_timeout=2.0,
        clock=clock,
    )


@pytest.fixture
def publisher(engine: ActivityEngine) -> RecordingPublisher:
    recorder = RecordingPublisher()
    engine.subscribe(recorder)
    return recorder
