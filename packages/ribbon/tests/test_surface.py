"""Tests for RecordingSurface and DrawCommand formatting."""

from ribbon import bezier
from ribbon.surface import DrawCommand, RecordingSurface


def test_stroke_command_shows_css_color():
    cmd = DrawCommand("stroke", ((38, 69, 187), 2))
    assert str(cmd) == "stroke rgb(38, 69, 187) 2"


def test_path_command_formats_numbers():
    assert str(DrawCommand("move_to", (0.0, 12.5))) == "move_to 0 12.5"
    assert str(DrawCommand("begin_path")) == "begin_path"


def test_dump_lists_commands_in_order():
    surface = RecordingSurface()
    surface.stroke_style = (238, 0, 53)
    bezier.render(surface, [(0, 0), (10, 5)])
    assert surface.dump().splitlines() == [
        "begin_path",
        "move_to 0 0",
        "line_to 10 5",
        "stroke rgb(238, 0, 53) 1",
    ]


def test_reset_clears_commands():
    surface = RecordingSurface()
    surface.clear()
    surface.reset()
    assert surface.commands == []
    assert surface.dump() == ""
