"""Unit tests for channel supplier and consumer helpers."""

from __future__ import annotations

import threading

from channels.channel import Channel
from channels.endpoints import receive_all, send_all


def test_send_all_closes_channel_for_receive_all() -> None:
    """send_all should deliver every value then close so receive_all returns."""
    channel: Channel[str] = Channel("endpoints")
    sent_counts: list[int] = []
    supplier = threading.Thread(
        target=lambda: sent_counts.append(send_all(channel, "abc")),
        daemon=True,
    )
    supplier.start()

    received = receive_all(channel)
    supplier.join(5.0)

    assert received == ["a", "b", "c"]
    assert sent_counts == [3]
    assert channel.closed


def test_send_all_can_leave_channel_open() -> None:
    """send_all with close=False should leave closing to the caller."""
    channel: Channel[str] = Channel("open")
    supplier = threading.Thread(target=lambda: send_all(channel, "xy", close=False), daemon=True)
    supplier.start()

    first = channel.receive()
    second = channel.receive()
    supplier.join(5.0)

    assert (first, second) == ("x", "y")
    assert not channel.closed
