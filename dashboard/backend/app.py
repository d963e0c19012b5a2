"""
ⒸAngelaMos | 2026
dashboard/backend/app.py
"""
from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from dashboard.backend.api import router as api_router
from dashboard.backend.ws import ConnectionManager, router as ws_router

if TYPE_CHECKING:
    from officewatch.activity import ActivityEngine
    from officewatch.daemon import OfficeWatchDaemon


DEFAULT_STATIC_DIR = Path(__file__).parent.parent / "frontend" / "dist"


def create_app(
    engine: ActivityEngine,
    daemon: OfficeWatchDaemon | None = None,
    static_dir: Path | None = None,
) -> FastAPI:
    """
    Build the dashboard app around an engine
    The daemon, when given, runs for the lifetime of the app
    """
    manager = ConnectionManager()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        unsubscribe = engine.subscribe(manager)
        if daemon is not None:
            await daemon.start()
        try:
            yield
        finally:
            if daemon is not None:
                await daemon.stop()
            unsubscribe()

    app = FastAPI(
        title="OfficeWatch",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.manager = manager

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    app.include_router(api_router, prefix="")
    app.include_router(ws_router, prefix="")

    static_dir = static_dir or DEFAULT_STATIC_DIR
    if static_dir.exists():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")

    return app
