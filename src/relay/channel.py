from __future__ import annotations

import asyncio
import enum
import logging
from typing import TYPE_CHECKING, Callable

from relay.broadcast import Message

if TYPE_CHECKING:  # pragma: no cover
    from fastapi import WebSocket

LOGGER = logging.getLogger(__name__)


class ChannelState(enum.Enum):
    OPEN = "open"
    CLOSED = "closed"


class ChannelClosedError(RuntimeError):
    pass


class WebSocketChannel:
    """One browser connection with its own ordered outbox.

    ``submit`` only enqueues; a writer task drains the outbox onto the socket, so
    messages reach each client in the order they were broadcast. Text frames are
    sent as text and binary frames as binary.

    ``on_closed`` runs once, the first time the channel leaves the open state,
    whether through ``close()`` or a failed send.
    """

    def __init__(
        self,
        websocket: WebSocket,
        *,
        on_closed: Callable[[WebSocketChannel], None] | None = None,
    ) -> None:
        self._websocket = websocket
        self._on_closed = on_closed
        self._outbox: asyncio.Queue[Message] = asyncio.Queue()
        self._writer: asyncio.Task | None = None
        self.state = ChannelState.OPEN

    def __repr__(self) -> str:
        client = getattr(self._websocket, "client", None)
        return f"<WebSocketChannel {client} {self.state.value}>"

    @property
    def is_open(self) -> bool:
        return self.state is ChannelState.OPEN

    def start(self) -> None:
        if self._writer is None:
            self._writer = asyncio.create_task(self._drain())

    def submit(self, message: Message) -> None:
        if not self.is_open:
            raise ChannelClosedError("channel is closed")
        self._outbox.put_nowait(message)

    def close(self) -> None:
        """Stop delivering to this client. Safe to call more than once."""

        self._mark_closed()
        if self._writer is not None and not self._writer.done():
            self._writer.cancel()

    def _mark_closed(self) -> None:
        if self.state is ChannelState.CLOSED:
            return
        self.state = ChannelState.CLOSED
        if self._on_closed is not None:
            self._on_closed(self)

    async def _drain(self) -> None:
        while True:
            message = await self._outbox.get()
            try:
                if isinstance(message, bytes):
                    await self._websocket.send_bytes(message)
                else:
                    await self._websocket.send_text(message)
            except Exception as exc:
                LOGGER.warning("Send to %r failed, closing channel: %s", self, exc)
                self._mark_closed()
                await self._close_socket()
                return

    async def _close_socket(self) -> None:
        # Ends the reader loop for a client that can no longer be written to.
        try:
            await self._websocket.close(code=1011)
        except Exception as exc:
            LOGGER.debug("Closing socket for %r failed: %s", self, exc)
