"""Host frame clock protocol and a deterministic manual clock."""
from __future__ import annotations

from typing import Protocol

from ribbon.types import FrameCallback


class FrameClock(Protocol):
    """Schedules one future invocation of a callback per request."""

    def request_frame(self, callback: FrameCallback) -> int: ...

    def cancel_frame(self, handle: int) -> None: ...


class ManualFrameClock:
    """Frame clock driven explicitly by ``fire(timestamp)``.

    Callbacks requested while a frame is firing wait for the next one.
    """

    def __init__(self) -> None:
        self._pending: dict[int, FrameCallback] = {}
        self._firing: dict[int, FrameCallback] = {}
        self._next_handle = 1
        self._now: float | None = None

    @property
    def now(self) -> float | None:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)
        self._firing.pop(handle, None)

    def fire(self, timestamp: float) -> int:
        """Run every callback pending now. Returns how many ran.

        A callback cancelled by an earlier one in the same frame is skipped.
        If a callback raises, the ones it preempted stay pending.
        """
        if self._now is not None and timestamp < self._now:
            raise ValueError(
                f"timestamp {timestamp} is earlier than previous frame {self._now}"
            )
        self._now = timestamp
        self._firing = self._pending
        self._pending = {}
        ran = 0
        try:
            while self._firing:
                handle = next(iter(self._firing))
                callback = self._firing.pop(handle)
                callback(timestamp)
                ran += 1
        finally:
            self._pending = {**self._firing, **self._pending}
            self._firing = {}
        return ran
