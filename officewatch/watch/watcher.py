"""
ⒸAngelaMos | 2026
watch/watcher.py
"""
from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import TYPE_CHECKING

import pathspec
from watchfiles import Change, awatch

from officewatch.core import get_logger
from officewatch.models import FileEvent

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = get_logger("watch")


class IgnoreFilter:
    """
    Drops changes under build output, dependency and VCS directories
    """
    def __init__(self, root: Path, patterns: list[str]) -> None:
        self.root = root
        self.spec = pathspec.PathSpec.from_lines("gitwildmatch", patterns)

    def is_ignored(self, path: Path) -> bool:
        try:
            rel_path = path.relative_to(self.root)
        except ValueError:
            return False
        return self.spec.match_file(rel_path.as_posix())

    def is_ignored_dir(self, path: Path) -> bool:
        try:
            rel_path = path.relative_to(self.root)
        except ValueError:
            return False
        return self.spec.match_file(rel_path.as_posix() + "/")

    def __call__(self, change: Change, path: str) -> bool:
        return not self.is_ignored(Path(path))


class WorkspaceWatcher:
    """
    Streams (FileEvent, absolute path) pairs for a workspace directory

    Keeps the set of files it has seen so that a file replaced through a
    rename, which the OS reports as added, still comes out as modified
    """
    def __init__(self, root: Path, ignore_patterns: list[str]) -> None:
        self.root = root.resolve()
        self.filter = IgnoreFilter(self.root, ignore_patterns)
        self.known: set[Path] = set()

    def scan(self) -> set[Path]:
        """
        Collect every file under the root that is not ignored
        """
        found: set[Path] = set()
        for root, dirs, files in os.walk(self.root):
            root_path = Path(root)
            dirs[:] = [
                d for d in dirs
                if not self.filter.is_ignored_dir(root_path / d)
            ]
            for name in files:
                file_path = root_path / name
                if not self.filter.is_ignored(file_path):
                    found.add(file_path)
        return found

    def translate(self, change: Change, path: Path) -> FileEvent:
        """
        Map a raw change to a FileEvent and update the known files
        """
        if change is Change.deleted:
            self.known.discard(path)
            return FileEvent.DELETED
        if change is Change.added and path not in self.known:
            self.known.add(path)
            return FileEvent.ADDED
        self.known.add(path)
        return FileEvent.MODIFIED

    async def events(
        self,
        stop_event: asyncio.Event | None = None,
    ) -> AsyncIterator[tuple[FileEvent, Path]]:
        self.known = await asyncio.to_thread(self.scan)
        logger.info("watching", root = str(self.root), files = len(self.known))
        async for changes in awatch(
                self.root,
                watch_filter = self.filter,
                stop_event = stop_event,
        ):
            for change, raw_path in sorted(changes, key = lambda c: (c[1], c[0])):
                path = Path(raw_path)
                yield self.translate(change, path), path
