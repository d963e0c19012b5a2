"""
ⒸAngelaMos | 2026
models.py
"""
from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


IDLE_ROOM = "IDLE"

INITIAL_TASK = "Waiting for work..."
IDLE_TASK = "Waiting for next task..."

RECENT_FILES_LIMIT = 5
RECENT_COMMITS_LIMIT = 5


class Activity(str, Enum):
    """
    Kind of action inferred from a touched file or a command
    """
    IDLE = "idle"
    CODING = "coding"
    WRITING = "writing"
    DATA = "data"
    BUILD = "build"
    COMMIT = "commit"
    API = "api"
    EMAIL = "email"
    WORKING = "working"


class FileEvent(str, Enum):
    """
    File-system change kinds delivered by the workspace watcher
    """
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"


class WireModel(BaseModel):
    """
    Immutable model serialized with camelCase keys for the dashboard
    """
    model_config = ConfigDict(
        frozen = True,
        alias_generator = to_camel,
        populate_by_name = True,
    )


class Commit(WireModel):
    message: str
    date: datetime
    author: str


class RecentFile(WireModel):
    path: str
    time: int
    room: str


class Stats(WireModel):
    files_modified: int = 0
    commits_today: int = 0
    commands_run: int = 0


class StatusSnapshot(WireModel):
    """
    The single current status record consumed by viewers
    Never mutated; the state store swaps in a new instance on every change
    """
    room: str = IDLE_ROOM
    activity: Activity = Activity.IDLE
    task: str = INITIAL_TASK
    progress: Annotated[int, Field(ge = 0, le = 100)] = 0
    recent_files: tuple[RecentFile, ...] = ()
    recent_commits: tuple[Commit, ...] = ()
    last_active: int = 0
    stats: Stats = Field(default_factory = Stats)

    @property
    def is_idle(self) -> bool:
        return self.room == IDLE_ROOM

    def to_wire(self) -> dict:
        """
        JSON-ready dict with the dashboard's field names
        """
        return self.model_dump(mode = "json", by_alias = True)
