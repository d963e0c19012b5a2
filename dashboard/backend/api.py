"""
ⒸAngelaMos | 2026
dashboard/backend/api.py
"""
from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from dashboard.backend.models import HealthResponse
from dashboard.backend.ws import get_manager


router = APIRouter()


@router.get("/api/status")
async def get_status(request: Request) -> JSONResponse:
    snapshot = request.app.state.engine.snapshot()
    return JSONResponse(snapshot.to_wire())


@router.get("/health", response_model = HealthResponse)
async def health(request: Request) -> HealthResponse:
    return HealthResponse(subscribers = len(get_manager(request).active))
