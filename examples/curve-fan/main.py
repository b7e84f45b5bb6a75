"""Curve Fan: a swaying gradient fan of smooth Bezier curves.

Each frame redraws a fan of curves through four waypoints. The two
middle waypoints sway together on a sine wave.

Controls:
  Esc     Quit (closing the window works too)
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

import pygame

from ribbon import AnimationConfig, AnimationDriver
from ribbon.pygame_host import PygameFrameClock, PygameSurface

logger = logging.getLogger("curve_fan")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Curve Fan — ribbon visual demo")
    p.add_argument("--curves", type=int, default=70, help="Curve count (default: 70)")
    p.add_argument("--amplitude", type=float, default=40.0,
                   help="Sway amplitude in pixels (default: 40)")
    p.add_argument("--period", type=float, default=5000.0,
                   help="Sway period in milliseconds (default: 5000)")
    p.add_argument("--tension", type=float, default=0.25,
                   help="Curve tension (default: 0.25)")
    p.add_argument("--line-width", type=int, default=1, help="Stroke width (default: 1)")
    p.add_argument("--fps", type=int, default=60, help="Frames per second (default: 60)")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args()


def build_config(args: argparse.Namespace) -> AnimationConfig:
    return replace(
        AnimationConfig(),
        curve_count=args.curves,
        amplitude=args.amplitude,
        period=args.period,
        tension=args.tension,
        line_width=args.line_width,
    )


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        config = build_config(args)
    except ValueError as exc:
        logger.error("invalid configuration: %s", exc)
        sys.exit(2)

    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption("Curve Fan — ribbon demo")

    surface = PygameSurface(screen, background=config.background)
    clock = PygameFrameClock(fps=args.fps)
    driver = AnimationDriver(surface, clock, config)
    clock.on_teardown(driver.stop)

    logger.info(
        "drawing %d curves at %d fps (period %.0f ms)",
        config.curve_count, clock.fps, config.period,
    )
    driver.start()
    clock.run()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
