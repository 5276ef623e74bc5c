"""Real-time fan-out of control messages between the overlay and admin pages."""

from relay.broadcast import BroadcastRelay, Channel
from relay.channel import ChannelClosedError, ChannelState, WebSocketChannel

__all__ = [
    "BroadcastRelay",
    "Channel",
    "ChannelClosedError",
    "ChannelState",
    "WebSocketChannel",
]
