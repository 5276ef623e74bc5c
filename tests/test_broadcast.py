from __future__ import annotations

from relay.broadcast import BroadcastRelay


class RecordingChannel:
    def __init__(self) -> None:
        self.received: list = []

    def submit(self, message) -> None:
        self.received.append(message)


class BrokenChannel:
    def submit(self, message) -> None:
        raise ConnectionError("socket already gone")


def test_broadcast_reaches_every_channel_including_sender():
    relay = BroadcastRelay()
    channels = [RecordingChannel() for _ in range(4)]
    for channel in channels:
        relay.connect(channel)

    delivered = relay.broadcast(channels[2], "call")

    assert delivered == 4
    assert all(channel.received == ["call"] for channel in channels)


def test_broadcast_with_no_channels_is_a_noop():
    relay = BroadcastRelay()
    assert relay.broadcast(RecordingChannel(), "call") == 0


def test_payload_is_relayed_unmodified():
    relay = BroadcastRelay()
    channel = RecordingChannel()
    relay.connect(channel)

    relay.broadcast(channel, b"\x00\xffraw")
    relay.broadcast(channel, '{"not": "parsed"')

    assert channel.received == [b"\x00\xffraw", '{"not": "parsed"']


def test_disconnected_channel_receives_nothing_further():
    relay = BroadcastRelay()
    stays, leaves = RecordingChannel(), RecordingChannel()
    relay.connect(stays)
    relay.connect(leaves)

    relay.disconnect(leaves)
    relay.broadcast(stays, "hangup")

    assert leaves not in relay
    assert leaves.received == []
    assert stays.received == ["hangup"]


def test_disconnect_is_idempotent():
    relay = BroadcastRelay()
    channel = RecordingChannel()
    relay.connect(channel)

    relay.disconnect(channel)
    relay.disconnect(channel)
    relay.disconnect(RecordingChannel())

    assert len(relay) == 0


def test_failing_channel_does_not_block_others():
    relay = BroadcastRelay()
    first, second = RecordingChannel(), RecordingChannel()
    relay.connect(first)
    relay.connect(BrokenChannel())
    relay.connect(second)

    delivered = relay.broadcast(first, "call")

    assert delivered == 2
    assert first.received == ["call"]
    assert second.received == ["call"]


def test_same_client_twice_gets_two_independent_channels():
    relay = BroadcastRelay()
    tab_one, tab_two = RecordingChannel(), RecordingChannel()
    relay.connect(tab_one)
    relay.connect(tab_two)

    relay.broadcast(tab_one, "a")
    relay.disconnect(tab_one)
    relay.broadcast(tab_two, "b")

    assert tab_one.received == ["a"]
    assert tab_two.received == ["a", "b"]
