"""Unbuffered rendezvous channel.

This module implements the one-directional, unbuffered conduit that
connects two stages. A send completes only once a receiver has taken
the value, and closing the channel signals end-of-stream downstream.
"""

from __future__ import annotations

import threading
from typing import Generic, Iterator, TypeVar, Union

from core.errors import ChannelAbortedError, ChannelProtocolError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)

T = TypeVar("T")


class _Closed:
    """Sentinel type returned by receive once a channel is drained and closed."""

    _instance: "_Closed | None" = None

    def __new__(cls) -> "_Closed":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CLOSED"

    def __bool__(self) -> bool:
        return False


CLOSED = _Closed()


class Channel(Generic[T]):
    """Unbuffered channel between one producer and its consumers.

    The producer owns the channel and alone may close it, at most once.
    Any thread may abort it, which wakes every blocked sender and receiver.
    """

    def __init__(self, name: str = "channel") -> None:
        self.name = name
        self._condition = threading.Condition()
        self._slot: T | None = None
        self._slot_full = False
        self._offered = 0
        self._taken = 0
        self._closed = False
        self._aborted = False
        self._abort_reason: BaseException | None = None

    @property
    def closed(self) -> bool:
        """Whether the producer has closed this channel."""
        with self._condition:
            return self._closed

    @property
    def aborted(self) -> bool:
        """Whether this channel was aborted."""
        with self._condition:
            return self._aborted

    def send(self, value: T) -> None:
        """Hand one value to a receiver, blocking until it is taken.

        Sending on a closed channel is a no-op.

        Args:
            value: Element to deliver.

        Raises:
            ChannelAbortedError: If the channel is or becomes aborted.
        """
        with self._condition:
            self._condition.wait_for(
                lambda: self._aborted or self._closed or not self._slot_full
            )
            self._raise_if_aborted()
            if self._closed:
                _LOGGER.debug("send_on_closed_channel", channel=self.name)
                return
            self._slot = value
            self._slot_full = True
            self._offered += 1
            ticket = self._offered
            self._condition.notify_all()
            self._condition.wait_for(lambda: self._aborted or self._taken >= ticket)
            if self._taken < ticket:
                self._raise_if_aborted()

    def receive(self) -> Union[T, _Closed]:
        """Take the next value, blocking until one is offered or the channel closes.

        Returns:
            The received value, or CLOSED once the channel is closed and drained.

        Raises:
            ChannelAbortedError: If the channel is or becomes aborted.
        """
        with self._condition:
            self._condition.wait_for(
                lambda: self._aborted or self._slot_full or self._closed
            )
            self._raise_if_aborted()
            if not self._slot_full:
                return CLOSED
            value = self._slot
            self._slot = None
            self._slot_full = False
            self._taken += 1
            self._condition.notify_all()
            return value  # type: ignore[return-value]

    def close(self) -> None:
        """Signal end-of-stream to receivers.

        Raises:
            ChannelProtocolError: If the channel was already closed.
            ChannelAbortedError: If the channel was aborted.
        """
        with self._condition:
            self._raise_if_aborted()
            if self._closed:
                raise ChannelProtocolError(
                    f"Channel '{self.name}' closed twice: "
                    "only its producer may close it, exactly once."
                )
            self._closed = True
            self._condition.notify_all()

    def abort(self, reason: BaseException | None = None) -> None:
        """Abort the channel and wake every blocked party.

        Aborting is idempotent; the first reason is kept.

        Args:
            reason: Optional error that caused the abort.
        """
        with self._condition:
            if self._aborted:
                return
            self._aborted = True
            self._abort_reason = reason
            self._slot = None
            self._slot_full = False
            self._condition.notify_all()
        _LOGGER.debug(
            "channel_aborted",
            channel=self.name,
            reason=None if reason is None else repr(reason),
        )

    def __iter__(self) -> Iterator[T]:
        while True:
            value = self.receive()
            if value is CLOSED:
                return
            yield value  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"Channel(name={self.name!r})"

    def _raise_if_aborted(self) -> None:
        if not self._aborted:
            return
        error = ChannelAbortedError(f"Channel '{self.name}' was aborted.")
        if self._abort_reason is not None:
            raise error from self._abort_reason
        raise error
