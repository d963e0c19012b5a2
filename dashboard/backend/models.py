"""
ⒸAngelaMos | 2026
dashboard/backend/models.py
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel


STATE_UPDATE = "state-update"


class HealthResponse(BaseModel):
    status: str = "healthy"
    subscribers: int = 0


class PushMessage(BaseModel):
    """
    Envelope for everything sent down the push channel
    """
    event: str = STATE_UPDATE
    data: dict[str, Any]
