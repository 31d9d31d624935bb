"""Bounded point-to-point channel standing in for an inter-process pipe."""

from __future__ import annotations

import threading
from collections import deque

import msgpack

from ._errors import ChannelError


def _decode(payload: bytes) -> tuple[int, int]:
    try:
        message = msgpack.unpackb(payload, raw=False)
    except (msgpack.UnpackException, ValueError) as exc:
        raise ChannelError(f"undecodable message: {exc}") from exc
    if (
        not isinstance(message, list)
        or len(message) != 2
        or not all(isinstance(v, int) and not isinstance(v, bool) and v >= 0 for v in message)
    ):
        raise ChannelError(f"malformed message: {message!r}")
    return message[0], message[1]


class Channel:
    """Carries ``(sequence, key_count)`` messages from a producer to a consumer.

    Messages cross as msgpack-encoded bytes, so only the aggregate value is
    shared between sides. ``send`` blocks while the channel is full and
    ``recv`` blocks until a message arrives; neither times out.

    ``close`` never blocks. Once closed, ``send`` raises and ``recv`` drains
    any message already buffered, then raises on every further call. A sender
    waiting on a full channel is woken by ``close`` and raises as well, so no
    message is accepted and then dropped.
    """

    __slots__ = ("_capacity", "_buffer", "_cond", "_closed")

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 1:
            raise ValueError(f"channel capacity must be >= 1, got {capacity}")
        self._capacity = capacity
        self._buffer: deque[bytes] = deque()
        self._cond = threading.Condition()
        self._closed = False

    def send(self, sequence: int, key_count: int) -> None:
        try:
            payload = msgpack.packb([sequence, key_count])
        except (TypeError, OverflowError) as exc:
            raise ChannelError(f"cannot encode message ({sequence}, {key_count}): {exc}") from exc
        with self._cond:
            while not self._closed and len(self._buffer) >= self._capacity:
                self._cond.wait()
            if self._closed:
                raise ChannelError("send on closed channel")
            self._buffer.append(payload)
            self._cond.notify_all()

    def recv(self) -> tuple[int, int]:
        with self._cond:
            while not self._buffer and not self._closed:
                self._cond.wait()
            if not self._buffer:
                raise ChannelError("receive on closed channel")
            payload = self._buffer.popleft()
            self._cond.notify_all()
        return _decode(payload)

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    @property
    def closed(self) -> bool:
        return self._closed
