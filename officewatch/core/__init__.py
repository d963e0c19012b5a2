"""
ⒸAngelaMos | 2026
core/__init__.py
"""
from officewatch.core.config import (
    OfficeWatchSettings,
    RoomRule,
    default_rooms,
    get_settings,
    load_settings,
)
from officewatch.core.logging import configure_logging, get_logger
from officewatch.core.state import StateStore


__all__ = [
    "OfficeWatchSettings",
    "RoomRule",
    "StateStore",
    "configure_logging",
    "default_rooms",
    "get_logger",
    "get_settings",
    "load_settings",
]
