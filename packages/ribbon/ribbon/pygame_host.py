"""pygame-backed drawing surface and frame clock."""
from __future__ import annotations

import logging
from typing import Callable

import pygame

from ribbon.bezier import flatten
from ribbon.clock import ManualFrameClock
from ribbon.types import ColorRGB, CubicSegment, Point

logger = logging.getLogger(__name__)


class PygameSurface:
    """Canvas-style path API on top of a pygame.Surface.

    Paths are buffered as polylines, with cubic segments flattened into
    ``curve_steps`` straight pieces, and drawn on ``stroke``.
    """

    def __init__(
        self,
        target: pygame.Surface,
        background: ColorRGB = (255, 255, 255),
        curve_steps: int = 24,
        antialias: bool = True,
    ) -> None:
        self._target = target
        self._background = background
        self._curve_steps = curve_steps
        self._antialias = antialias
        self.width, self.height = target.get_size()
        self.stroke_style: ColorRGB = (0, 0, 0)
        self.line_width = 1
        self._subpaths: list[list[Point]] = []

    @property
    def target(self) -> pygame.Surface:
        return self._target

    def clear(self) -> None:
        self._target.fill(self._background)

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([(x, y)])

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1].append((x, y))

    def bezier_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float,
    ) -> None:
        if not self._subpaths:
            self.move_to(c1x, c1y)
        pen = self._subpaths[-1][-1]
        seg = CubicSegment(pen, (c1x, c1y), (c2x, c2y), (x, y))
        self._subpaths[-1].extend(flatten(seg, self._curve_steps)[1:])

    def stroke(self) -> None:
        for points in self._subpaths:
            if len(points) < 2:
                continue
            if self._antialias and self.line_width == 1:
                pygame.draw.aalines(self._target, self.stroke_style, False, points)
            else:
                pygame.draw.lines(
                    self._target, self.stroke_style, False, points, self.line_width
                )


class PygameFrameClock(ManualFrameClock):
    """Fires pending frame callbacks once per display refresh.

    Timestamps are ``pygame.time.get_ticks()`` milliseconds. Closing the
    window or pressing Esc ends ``run`` and invokes the teardown hooks.
    """

    def __init__(self, fps: int = 60) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        super().__init__()
        self._fps = fps
        self._clock = pygame.time.Clock()
        self._teardown_hooks: list[Callable[[], None]] = []

    @property
    def fps(self) -> int:
        return self._fps

    def on_teardown(self, hook: Callable[[], None]) -> None:
        self._teardown_hooks.append(hook)

    def run_frame(self) -> bool:
        """Pace to fps, pump events, fire callbacks and flip the display.

        Returns False when the host asked to close instead of drawing.
        """
        self._clock.tick(self._fps)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
        self.fire(float(pygame.time.get_ticks()))
        pygame.display.flip()
        return True

    def run(self) -> None:
        while self.pending:
            if not self.run_frame():
                logger.info("window closed, tearing down")
                break
        for hook in self._teardown_hooks:
            hook()
