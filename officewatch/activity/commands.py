"""
ⒸAngelaMos | 2026
activity/commands.py
"""
from __future__ import annotations

import re
from pathlib import Path

from officewatch.core import get_logger

logger = get_logger("commands")

# zsh EXTENDED_HISTORY lines look like ": 1700000000:0;git status"
ZSH_PREFIX = re.compile(r"^: \d+:\d+;")


def read_recent_commands(history_file: Path, limit: int = 10) -> list[str]:
    """
    Last non-blank commands from a shell history file, oldest first
    """
    try:
        text = history_file.read_text(encoding = "utf-8", errors = "replace")
    except OSError as e:
        logger.debug("history_unreadable", path = str(history_file), error = str(e))
        return []

    lines = [ZSH_PREFIX.sub("", line).strip() for line in text.splitlines()]
    commands = [line for line in lines if line]
    if limit <= 0:
        return []
    return commands[-limit:]
