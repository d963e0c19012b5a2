"""
ⒸAngelaMos | 2026
__init__.py
"""
from officewatch.core import (
    OfficeWatchSettings,
    RoomRule,
    StateStore,
    configure_logging,
    get_logger,
    get_settings,
    load_settings,
)
from officewatch.models import (
    IDLE_ROOM,
    Activity,
    Commit,
    FileEvent,
    RecentFile,
    Stats,
    StatusSnapshot,
)

__version__ = "0.1.0"
__all__ = [
    "Activity",
    "Commit",
    "FileEvent",
    "IDLE_ROOM",
    "OfficeWatchSettings",
    "RecentFile",
    "RoomRule",
    "StateStore",
    "Stats",
    "StatusSnapshot",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_settings",
    "load_settings",
]
