"""
ⒸAngelaMos | 2026
watch/__init__.py
"""
from officewatch.watch.watcher import IgnoreFilter, WorkspaceWatcher

__all__ = [
    "IgnoreFilter",
    "WorkspaceWatcher",
]
