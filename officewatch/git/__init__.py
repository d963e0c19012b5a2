"""
ⒸAngelaMos | 2026
git/__init__.py
"""
from officewatch.git.history import (
    CommitSource,
    GitHistoryReader,
    read_commits,
)

__all__ = [
    "CommitSource",
    "GitHistoryReader",
    "read_commits",
]
