"""Supplier and consumer helpers for channels.

These helpers stand in for the external collaborators that feed a
pipeline head and drain its tail.
"""

from __future__ import annotations

from typing import Iterable, TypeVar

from channels.channel import Channel

T = TypeVar("T")


def send_all(channel: Channel[T], values: Iterable[T], close: bool = True) -> int:
    """Send every value in order, optionally closing the channel afterwards.

    Args:
        channel: Destination channel owned by the caller.
        values: Values to send.
        close: Whether to close the channel once values are exhausted.

    Returns:
        Number of values sent.
    """
    sent_count = 0
    for value in values:
        channel.send(value)
        sent_count += 1
    if close:
        channel.close()
    return sent_count


def receive_all(channel: Channel[T]) -> list[T]:
    """Receive values until the channel closes.

    Args:
        channel: Source channel.

    Returns:
        All received values in delivery order.
    """
    return list(channel)
