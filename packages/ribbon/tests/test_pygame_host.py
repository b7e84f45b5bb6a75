"""Tests for the pygame surface and frame clock adapters."""
from __future__ import annotations

import pygame
import pytest

from ribbon import bezier
from ribbon.config import AnimationConfig
from ribbon.driver import AnimationDriver
from ribbon.pygame_host import PygameFrameClock, PygameSurface
from ribbon.types import DriverState

RED = (255, 0, 0)
WHITE = (255, 255, 255)


def make_surface(**kwargs) -> PygameSurface:
    surface = PygameSurface(pygame.Surface((40, 40)), antialias=False, **kwargs)
    surface.clear()
    surface.stroke_style = RED
    surface.line_width = 3
    return surface


def pixel(surface: PygameSurface, x: int, y: int) -> tuple[int, int, int]:
    return tuple(surface.target.get_at((x, y)))[:3]


class TestPygameSurface:
    def test_size_from_target(self):
        surface = PygameSurface(pygame.Surface((64, 48)))
        assert (surface.width, surface.height) == (64, 48)

    def test_clear_fills_background(self):
        surface = make_surface(background=(10, 20, 30))
        assert pixel(surface, 5, 5) == (10, 20, 30)

    def test_straight_line(self):
        surface = make_surface()
        bezier.render(surface, [(0, 20), (39, 20)])
        assert pixel(surface, 20, 20) == RED
        assert pixel(surface, 20, 5) == WHITE

    def test_collinear_curve_stays_on_line(self):
        surface = make_surface()
        bezier.render(surface, [(0, 10), (15, 10), (39, 10)])
        assert pixel(surface, 8, 10) == RED
        assert pixel(surface, 30, 10) == RED
        assert pixel(surface, 20, 30) == WHITE

    def test_stroke_does_not_clear(self):
        surface = make_surface()
        bezier.render(surface, [(0, 5), (39, 5)])
        surface.stroke_style = (0, 0, 255)
        bezier.render(surface, [(0, 30), (39, 30)])
        assert pixel(surface, 20, 5) == RED
        assert pixel(surface, 20, 30) == (0, 0, 255)

    def test_nothing_drawn_without_path(self):
        surface = make_surface()
        surface.begin_path()
        surface.stroke()
        assert pixel(surface, 20, 20) == WHITE

    def test_antialiased_thin_line_draws(self):
        surface = PygameSurface(pygame.Surface((40, 40)))
        surface.clear()
        surface.stroke_style = (0, 0, 0)
        bezier.render(surface, [(0, 20), (20, 25), (39, 20)])
        column = [pixel(surface, 20, y) for y in range(40)]
        assert any(c != WHITE for c in column)


class TestPygameFrameClock:
    def test_fps_must_be_positive(self):
        with pytest.raises(ValueError, match="fps must be positive"):
            PygameFrameClock(fps=0)

    def test_request_and_cancel(self):
        clock = PygameFrameClock(fps=30)
        handle = clock.request_frame(lambda ts: None)
        assert clock.pending == 1
        clock.cancel_frame(handle)
        assert clock.pending == 0

    def test_run_without_pending_calls_teardown(self):
        clock = PygameFrameClock()
        torn_down = []
        clock.on_teardown(lambda: torn_down.append(True))
        clock.run()
        assert torn_down == [True]


@pytest.fixture
def screen(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    surface = pygame.display.set_mode((80, 60))
    pygame.event.clear()
    yield surface
    pygame.display.quit()


def make_running_driver(screen):
    clock = PygameFrameClock(fps=1000)
    driver = AnimationDriver(
        PygameSurface(screen),
        clock,
        AnimationConfig(curve_count=2, width=80, height=60),
    )
    clock.on_teardown(driver.stop)
    driver.start()
    return driver, clock


class TestPygameFrameClockLoop:
    def test_run_frame_fires_with_tick_timestamp(self, screen):
        clock = PygameFrameClock(fps=1000)
        stamps = []
        clock.request_frame(stamps.append)
        assert clock.run_frame() is True
        assert len(stamps) == 1
        assert isinstance(stamps[0], float)
        assert clock.pending == 0

    def test_quit_event_stops_driver(self, screen):
        driver, clock = make_running_driver(screen)
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        clock.run()
        assert driver.state is DriverState.STOPPED
        assert driver.frame.frame_count == 0
        assert clock.pending == 0

    def test_escape_key_stops_driver(self, screen):
        driver, clock = make_running_driver(screen)
        assert clock.run_frame() is True
        assert driver.frame.frame_count == 1
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        clock.run()
        assert driver.state is DriverState.STOPPED
        assert driver.frame.frame_count == 1
        assert clock.pending == 0
