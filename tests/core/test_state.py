from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from officewatch.core import StateStore
from officewatch.models import IDLE_ROOM, INITIAL_TASK, Activity, Commit, RecentFile, StatusSnapshot


def test_store_starts_idle() -> None:
    snapshot = StateStore().get()

    assert snapshot.room == IDLE_ROOM
    assert snapshot.activity is Activity.IDLE
    assert snapshot.task == INITIAL_TASK
    assert snapshot.progress == 0
    assert snapshot.recent_files == ()
    assert snapshot.recent_commits == ()
    assert snapshot.last_active > 0
    assert snapshot.is_idle


def test_update_swaps_in_a_new_snapshot() -> None:
    store = StateStore(StatusSnapshot(last_active=1))
    before = store.get()

    after = store.update(room="TEXTEVIDENCE", activity=Activity.CODING)

    assert store.get() is after
    assert before.room == IDLE_ROOM
    assert after.room == "TEXTEVIDENCE"
    assert after.last_active == 1


def test_snapshots_are_frozen() -> None:
    snapshot = StatusSnapshot()

    with pytest.raises(ValidationError):
        snapshot.room = "TEXTEVIDENCE"


def test_wire_format_uses_dashboard_field_names() -> None:
    snapshot = StatusSnapshot(
        room="STORMBREAKER",
        activity=Activity.WRITING,
        progress=45,
        recent_files=(RecentFile(path="vincit/plan.md", time=1700000000000, room="STORMBREAKER"),),
        recent_commits=(
            Commit(
                message="[textevidence] fix export",
                date=datetime(2026, 3, 10, 9, 30, tzinfo=timezone.utc),
                author="Claudia",
            ),
        ),
        last_active=1700000000000,
    )

    wire = snapshot.to_wire()

    assert set(wire) == {
        "room",
        "activity",
        "task",
        "progress",
        "recentFiles",
        "recentCommits",
        "lastActive",
        "stats",
    }
    assert wire["activity"] == "writing"
    assert wire["recentFiles"] == [{"path": "vincit/plan.md", "time": 1700000000000, "room": "STORMBREAKER"}]
    assert wire["recentCommits"][0]["date"].startswith("2026-03-10T09:30:00")
    assert wire["recentCommits"][0]["author"] == "Claudia"
    assert wire["stats"] == {"filesModified": 0, "commitsToday": 0, "commandsRun": 0}


def test_progress_is_bounded() -> None:
    with pytest.raises(ValidationError):
        StatusSnapshot(progress=101)
