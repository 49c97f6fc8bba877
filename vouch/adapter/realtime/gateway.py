"""Realtime gateway implementations.

Each authenticated user joins a room keyed by their user id. Events are sent
only to the recipient's room.
"""

from dataclasses import dataclass
from typing import Any

import logfire
from fastapi import WebSocket

from vouch.domain.service.notification_service import RealtimeGateway
from vouch.domain.value import UserId


class WebSocketGateway(RealtimeGateway):
    """Pushes events over FastAPI WebSocket connections."""

    def __init__(self) -> None:
        # A user may be connected from several tabs or devices
        self.rooms: dict[UserId, set[WebSocket]] = {}

    async def connect(self, websocket: WebSocket, user_id: UserId) -> None:
        await websocket.accept()
        self.rooms.setdefault(user_id, set()).add(websocket)
        logfire.info(
            "Realtime client connected",
            user_id=str(user_id),
            connections=len(self.rooms[user_id]),
        )

    def disconnect(self, websocket: WebSocket, user_id: UserId) -> None:
        room = self.rooms.get(user_id)
        if room is None:
            return
        room.discard(websocket)
        if not room:
            del self.rooms[user_id]
        logfire.info("Realtime client disconnected", user_id=str(user_id))

    async def emit(self, event: str, payload: dict[str, Any], user_id: UserId) -> None:
        room = self.rooms.get(user_id)
        if not room:
            logfire.debug("No realtime connections for user", user_id=str(user_id))
            return

        for websocket in list(room):
            try:
                await websocket.send_json({"event": event, "data": payload})
            except Exception as e:
                # Closed sockets are dropped; the other connections still get the event
                logfire.warn(
                    "Realtime send failed", user_id=str(user_id), error=str(e)
                )
                self.disconnect(websocket, user_id)


@dataclass
class EmittedEvent:
    event: str
    payload: dict[str, Any]
    user_id: UserId


class RecordingRealtimeGateway(RealtimeGateway):
    """Realtime gateway for testing that records emitted events."""

    def __init__(self, fail: bool = False) -> None:
        self.events: list[EmittedEvent] = []
        self.fail = fail

    async def emit(self, event: str, payload: dict[str, Any], user_id: UserId) -> None:
        if self.fail:
            raise ConnectionError("Mock realtime failure")
        self.events.append(EmittedEvent(event=event, payload=payload, user_id=user_id))

    def for_user(self, user_id: UserId) -> list[EmittedEvent]:
        return [e for e in self.events if e.user_id == user_id]
