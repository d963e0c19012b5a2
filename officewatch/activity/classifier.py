"""
ⒸAngelaMos | 2026
activity/classifier.py
"""
from __future__ import annotations

import os
from collections.abc import Sequence

from officewatch.core.config import RoomRule
from officewatch.models import IDLE_ROOM, Activity


CODE_EXTENSIONS = frozenset({".py", ".ts", ".tsx", ".js", ".jsx", ".go", ".rs"})
TEXT_EXTENSIONS = frozenset({".md", ".txt"})
DATA_EXTENSIONS = frozenset({".json", ".csv"})

PACKAGE_MANAGER_TOKENS = ("npm", "yarn", "pnpm")
HTTP_TOKENS = ("curl", "api")
EMAIL_TOKENS = ("gog", "email")


def classify_room(
    path: str,
    rules: Sequence[RoomRule],
    git_status: str | None = None,
) -> str:
    """
    Map a path to the first room whose keywords appear in it
    Falls back to IDLE when nothing matches
    """
    normalized = path.lower()
    status = git_status.lower() if git_status else ""

    for rule in rules:
        if any(keyword in normalized for keyword in rule.keywords):
            return rule.name
        if status and any(hint in status for hint in rule.status_hints):
            return rule.name

    return IDLE_ROOM


def _contains(command: str | None, tokens: Sequence[str]) -> bool:
    return bool(command) and any(token in command for token in tokens)


def classify_activity(path: str, command: str | None = None) -> Activity:
    """
    Infer what kind of work a touched path or shell command represents

    Priority is fixed: commit and build commands beat the file extension,
    the extension beats the api and email command checks.
    """
    ext = os.path.splitext(path)[1].lower()

    if _contains(command, ("git commit",)):
        return Activity.COMMIT
    if _contains(command, PACKAGE_MANAGER_TOKENS):
        return Activity.BUILD
    if ext in CODE_EXTENSIONS:
        return Activity.CODING
    if ext in TEXT_EXTENSIONS:
        return Activity.WRITING
    if ext in DATA_EXTENSIONS:
        return Activity.DATA
    if _contains(command, HTTP_TOKENS):
        return Activity.API
    if _contains(command, EMAIL_TOKENS):
        return Activity.EMAIL

    return Activity.WORKING


def describe_task(
    room: str,
    filename: str,
    rules: Sequence[RoomRule],
) -> str | None:
    """
    Human-readable task label for a file touched in a room
    None for rooms without a label, including IDLE
    """
    for rule in rules:
        if rule.name == room:
            return f"Working on {rule.label}: {filename}"
    return None
