"""Realtime notification socket."""

from uuid import UUID

import logfire
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from vouch.adapter.realtime import WebSocketGateway
from vouch.config import Settings
from vouch.domain.value import UserId
from vouch.util.jwt import JWTError, verify_token

router = APIRouter(tags=["realtime"])


@router.websocket("/ws/notifications")
async def notifications_socket(websocket: WebSocket) -> None:
    """Join the caller's room and receive ``notify-{userId}`` events.

    The socket is authenticated with the ``auth_token`` cookie. Messages from
    the client are read and ignored; they only keep the connection alive.
    """
    container = websocket.app.state.dishka_container
    settings = await container.get(Settings)
    gateway = await container.get(WebSocketGateway)

    token = websocket.cookies.get("auth_token")
    try:
        payload = verify_token(token or "", settings.auth)
        user_id = UserId(UUID(payload.user_id))
    except (JWTError, ValueError) as e:
        logfire.info("Realtime connection rejected", error=str(e))
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await gateway.connect(websocket, user_id)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logfire.debug("Realtime connection closed", user_id=str(user_id))
    finally:
        gateway.disconnect(websocket, user_id)
