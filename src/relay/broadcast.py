from __future__ import annotations

import logging
from typing import Protocol, Union

LOGGER = logging.getLogger(__name__)

Message = Union[str, bytes]


class Channel(Protocol):
    def submit(self, message: Message) -> None:
        """Queue one message for delivery without waiting for it to be sent."""


class BroadcastRelay:
    """Owns the set of open channels and fans every message out to all of them.

    Every operation is synchronous and never awaits, so membership changes and a
    broadcast cannot interleave on a single event loop. Delivery itself happens on
    each channel's own writer, so a slow or dead client cannot hold up the others.
    """

    def __init__(self) -> None:
        self._channels: set[Channel] = set()

    def __len__(self) -> int:
        return len(self._channels)

    def __contains__(self, channel: object) -> bool:
        return channel in self._channels

    def connect(self, channel: Channel) -> None:
        self._channels.add(channel)
        LOGGER.info("Channel connected (%d open)", len(self._channels))

    def disconnect(self, channel: Channel) -> None:
        if channel not in self._channels:
            return
        self._channels.discard(channel)
        LOGGER.info("Channel disconnected (%d open)", len(self._channels))

    def broadcast(self, source: Channel, message: Message) -> int:
        """Submit ``message`` unchanged to every open channel, ``source`` included.

        Returns how many channels accepted the message.
        """

        delivered = 0
        for channel in list(self._channels):
            try:
                channel.submit(message)
            except Exception as exc:
                LOGGER.warning("Dropping broadcast for channel %r: %s", channel, exc)
                continue
            delivered += 1
        return delivered
