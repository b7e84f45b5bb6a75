"""AnimationDriver - per-frame state and the self-rescheduling render loop."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

from ribbon import bezier
from ribbon.clock import FrameClock
from ribbon.color import gradient
from ribbon.config import AnimationConfig
from ribbon.surface import Surface
from ribbon.types import ColorRGB, DriverState, Point

logger = logging.getLogger(__name__)


@dataclass
class FrameState:
    """Timing state for one run of the animation.

    ``start_frame`` stays None until the first tick, whose timestamp becomes
    the reference for all later ticks.
    """

    start_frame: float | None = None
    last_timestamp: float | None = None
    elapsed: float = 0.0
    frame_count: int = 0

    def advance(self, timestamp: float) -> float:
        if self.start_frame is None:
            self.start_frame = timestamp
        elif self.last_timestamp is not None and timestamp < self.last_timestamp:
            logger.warning(
                "frame timestamp %s went backwards (last %s); clamping",
                timestamp, self.last_timestamp,
            )
            timestamp = self.last_timestamp
        self.last_timestamp = timestamp
        self.elapsed = timestamp - self.start_frame
        self.frame_count += 1
        return self.elapsed


def displacement(progress: float, amplitude: float) -> float:
    """Shared sway offset ``sin(progress * 2pi) * amplitude``."""
    return math.sin(progress * math.pi * 2) * amplitude


def waypoints(config: AnimationConfig, index: int, k: float) -> list[Point]:
    return [anchor.place(index, k) for anchor in config.anchors]


class AnimationDriver:
    def __init__(
        self,
        surface: Surface,
        clock: FrameClock,
        config: AnimationConfig | None = None,
    ) -> None:
        self._surface = surface
        self._clock = clock
        self._config = config if config is not None else AnimationConfig()
        self._colors = gradient(
            self._config.start_color, self._config.end_color, self._config.curve_count
        )
        self._state = DriverState.STOPPED
        self._frame = FrameState()
        self._handle: int | None = None
        self._start_hooks: list[Callable[[AnimationDriver], None]] = []
        self._stop_hooks: list[Callable[[AnimationDriver], None]] = []

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def frame(self) -> FrameState:
        return self._frame

    @property
    def config(self) -> AnimationConfig:
        return self._config

    @property
    def colors(self) -> list[ColorRGB]:
        return list(self._colors)

    @property
    def progress(self) -> float:
        return self._frame.elapsed / self._config.period

    def on_start(self, hook: Callable[[AnimationDriver], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[AnimationDriver], None]) -> None:
        self._stop_hooks.append(hook)

    def start(self, timestamp: float | None = None) -> None:
        """Enter RUNNING with fresh frame state.

        With a timestamp the first frame renders immediately; otherwise it
        waits for the clock's next frame.
        """
        if self._state is DriverState.RUNNING:
            return
        self._state = DriverState.RUNNING
        self._frame = FrameState()
        logger.debug("animation started")
        for hook in self._start_hooks:
            hook(self)
        # A start hook may have stopped the driver already.
        if self._state is not DriverState.RUNNING:
            return
        if timestamp is not None:
            self.tick(timestamp)
        else:
            self._handle = self._clock.request_frame(self.tick)

    def stop(self) -> None:
        """Enter STOPPED and cancel the pending frame request."""
        if self._state is not DriverState.RUNNING:
            return
        self._state = DriverState.STOPPED
        if self._handle is not None:
            self._clock.cancel_frame(self._handle)
            self._handle = None
        logger.debug("animation stopped after %d frames", self._frame.frame_count)
        for hook in self._stop_hooks:
            hook(self)

    def tick(self, timestamp: float) -> None:
        if self._state is not DriverState.RUNNING:
            logger.debug("ignoring frame at %s while stopped", timestamp)
            return
        self._handle = None
        cfg = self._config
        surface = self._surface

        self._frame.advance(timestamp)
        k = displacement(self.progress, cfg.amplitude)

        surface.clear()
        surface.line_width = cfg.line_width
        for i in range(cfg.curve_count):
            surface.stroke_style = self._colors[i]
            bezier.render(surface, waypoints(cfg, i, k), cfg.tension)

        self._handle = self._clock.request_frame(self.tick)
