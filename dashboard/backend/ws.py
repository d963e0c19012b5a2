"""
ⒸAngelaMos | 2026
dashboard/backend/ws.py
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import orjson
from fastapi import APIRouter, Request, WebSocket, WebSocketDisconnect

from dashboard.backend.models import PushMessage
from officewatch.core import get_logger

if TYPE_CHECKING:
    from officewatch.activity import ActivityEngine
    from officewatch.models import StatusSnapshot


router = APIRouter()
logger = get_logger("ws")


def encode_snapshot(snapshot: StatusSnapshot) -> str:
    message = PushMessage(data = snapshot.to_wire())
    return orjson.dumps(message.model_dump()).decode("utf-8")


class ConnectionManager:
    """
    Push side of the transport
    Subscribed to the engine, fans every snapshot out to open sockets
    """
    def __init__(self) -> None:
        self.active: list[WebSocket] = []

    async def connect(self, websocket: WebSocket, engine: ActivityEngine) -> None:
        """
        Accept a socket and send it the snapshot current once it is registered
        """
        await websocket.accept()
        self.active.append(websocket)
        logger.info("client_connected", clients = len(self.active))
        await websocket.send_text(encode_snapshot(engine.snapshot()))

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self.active:
            self.active.remove(websocket)
            logger.info("client_disconnected", clients = len(self.active))

    async def publish(self, snapshot: StatusSnapshot) -> None:
        payload = encode_snapshot(snapshot)
        disconnected: list[WebSocket] = []
        for ws in list(self.active):
            try:
                await ws.send_text(payload)
            except Exception as e:
                logger.debug("send_failed", error = str(e))
                disconnected.append(ws)
        for ws in disconnected:
            self.disconnect(ws)


def get_manager(request: Request) -> ConnectionManager:
    return request.app.state.manager


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    manager: ConnectionManager = websocket.app.state.manager
    engine = websocket.app.state.engine

    await manager.connect(websocket, engine)
    try:
        while True:
            data = await websocket.receive_text()
            if data == "ping":
                await websocket.send_text(
                    orjson.dumps({
                        "type": "pong"
                    }).decode("utf-8")
                )
    except (WebSocketDisconnect, RuntimeError):
        manager.disconnect(websocket)
