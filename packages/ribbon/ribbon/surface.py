"""Drawing surface protocol and a headless recording implementation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from ribbon.color import rgb_string
from ribbon.types import ColorRGB


class Surface(Protocol):
    """What the curve renderer and animation driver need from a canvas."""

    width: int
    height: int
    stroke_style: ColorRGB
    line_width: int

    def clear(self) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def bezier_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float,
    ) -> None: ...

    def stroke(self) -> None: ...


@dataclass(frozen=True, slots=True)
class DrawCommand:
    op: str
    args: tuple[Any, ...] = ()

    def __str__(self) -> str:
        if self.op == "stroke":
            color, width = self.args
            return f"stroke {rgb_string(color)} {width}"
        return " ".join([self.op, *(f"{a:g}" for a in self.args)])


@dataclass
class RecordingSurface:
    """Surface that records every call as a DrawCommand instead of drawing.

    ``stroke`` captures the stroke style and line width in effect at the
    time of the call.
    """

    width: int = 800
    height: int = 600
    stroke_style: ColorRGB = (0, 0, 0)
    line_width: int = 1
    commands: list[DrawCommand] = field(default_factory=list)

    def clear(self) -> None:
        self.commands.append(DrawCommand("clear", (0, 0, self.width, self.height)))

    def begin_path(self) -> None:
        self.commands.append(DrawCommand("begin_path"))

    def move_to(self, x: float, y: float) -> None:
        self.commands.append(DrawCommand("move_to", (x, y)))

    def line_to(self, x: float, y: float) -> None:
        self.commands.append(DrawCommand("line_to", (x, y)))

    def bezier_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float,
    ) -> None:
        self.commands.append(
            DrawCommand("bezier_curve_to", (c1x, c1y, c2x, c2y, x, y))
        )

    def stroke(self) -> None:
        self.commands.append(
            DrawCommand("stroke", (self.stroke_style, self.line_width))
        )

    def ops(self) -> list[str]:
        return [cmd.op for cmd in self.commands]

    def dump(self) -> str:
        """One line per recorded command, strokes shown as CSS colours."""
        return "\n".join(str(cmd) for cmd in self.commands)

    def reset(self) -> None:
        self.commands.clear()
