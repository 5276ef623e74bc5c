"""WebSocket endpoint shared by the overlay and admin pages."""

from __future__ import annotations

from fastapi import APIRouter, Depends, WebSocket

from api.dependencies import get_relay
from relay.broadcast import BroadcastRelay
from relay.channel import WebSocketChannel

router = APIRouter(tags=["relay"])


@router.websocket("/")
async def relay_socket(
    websocket: WebSocket,
    relay: BroadcastRelay = Depends(get_relay),
) -> None:
    await websocket.accept()
    channel = WebSocketChannel(websocket, on_closed=relay.disconnect)
    channel.start()
    relay.connect(channel)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            payload = message.get("text")
            if payload is None:
                payload = message.get("bytes")
            if payload is None:
                continue
            relay.broadcast(channel, payload)
    finally:
        relay.disconnect(channel)
        channel.close()
