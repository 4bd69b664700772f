"""WebSocket handler for real-time play."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from snekhaus.errors import SnekHausError
from snekhaus.game import Intent
from snekhaus.server.session import GameSession

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_session(ws: WebSocket) -> GameSession:
    return ws.app.state.session


def _parse_intent(raw: str) -> Intent | None:
    try:
        msg = json.loads(raw)
    except json.JSONDecodeError:
        return None
    if not isinstance(msg, dict):
        return None
    name = msg.get("intent")
    if not isinstance(name, str):
        return None
    try:
        return Intent(name.lower())
    except ValueError:
        return None


@ws_router.websocket("/game/play")
async def play(websocket: WebSocket) -> None:
    """Send intents, receive the game view after every change."""
    session = _get_session(websocket)
    await websocket.accept()
    session.clients.append(websocket)
    logger.info("Client connected (%d total).", len(session.clients))

    # Initial snapshot so the client can draw immediately.
    async with session.lock:
        payload = session.snapshot_json()
    await websocket.send_text(payload)

    try:
        while True:
            raw = await websocket.receive_text()
            intent = _parse_intent(raw)
            if intent is None:
                continue
            try:
                await session.apply(intent)
            except (SnekHausError, ValueError) as exc:
                logger.warning("Rejected %s from client: %s", intent.value, exc)
    except WebSocketDisconnect:
        logger.info("Client disconnected.")
    finally:
        if websocket in session.clients:
            session.clients.remove(websocket)
