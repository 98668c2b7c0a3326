"""Unit tests for the recording and SVG drawing surfaces."""

import xml.etree.ElementTree as ET

from fretmap.fretboard_models import CircleCommand, LineCommand, Point, RenderConfig, TextCommand
from fretmap.fretboard_renderer import render
from fretmap.surfaces import RecordingSurface, SvgSurface

SVG_NS = "{http://www.w3.org/2000/svg}"


def test_surface_size() -> None:
    assert RecordingSurface(320, 80).size == (320, 80)
    assert SvgSurface(320, 80).size == (320, 80)


def test_recording_surface_keeps_call_order() -> None:
    surface = RecordingSurface(10, 10)
    surface.draw_line(Point(0, 0), Point(10, 0), "red", 1.0)
    surface.draw_circle(Point(5, 5), 2.0, "blue")
    surface.draw_text("A", Point(5, 5), "white", 12.0)

    assert surface.commands == [
        LineCommand(Point(0, 0), Point(10, 0), "red", 1.0),
        CircleCommand(Point(5, 5), 2.0, "blue"),
        TextCommand("A", Point(5, 5), "white", 12.0),
    ]
    assert surface.of_type(CircleCommand) == [CircleCommand(Point(5, 5), 2.0, "blue")]


def _parse(svg: str) -> ET.Element:
    return ET.fromstring(svg)


def _all(root: ET.Element, tag: str) -> list[ET.Element]:
    return root.findall(f".//{SVG_NS}{tag}")


def test_svg_surface_elements() -> None:
    surface = SvgSurface(100, 50)
    surface.draw_line(Point(0, 0), Point(100, 0), "#123456", 1.0)
    surface.draw_circle(Point(12.5, 25), 5.0, "red")
    surface.draw_text("C#", Point(12.5, 25), "#fff", 12.0)
    root = _parse(surface.to_svg())

    (line,) = _all(root, "line")
    assert [float(line.get(k)) for k in ("x1", "y1", "x2", "y2")] == [0, 0, 100, 0]  # type: ignore[arg-type]
    assert line.get("stroke") == "#123456"
    assert float(line.get("stroke-width")) == 1.0  # type: ignore[arg-type]

    (circle,) = _all(root, "circle")
    assert float(circle.get("cx")) == 12.5  # type: ignore[arg-type]
    assert float(circle.get("r")) == 5.0  # type: ignore[arg-type]
    assert circle.get("fill") == "red"

    (text,) = _all(root, "text")
    assert text.text == "C#"
    assert text.get("text-anchor") == "middle"
    assert text.get("dominant-baseline") == "central"


def test_svg_surface_rounds_coordinates() -> None:
    surface = SvgSurface(100, 50)
    surface.draw_circle(Point(1 / 3, 2 / 3), 1 / 7, "red")
    (circle,) = _all(_parse(surface.to_svg()), "circle")
    assert circle.get("cx") == "0.33"
    assert circle.get("cy") == "0.67"
    assert circle.get("r") == "0.14"


def test_svg_surface_escapes_text() -> None:
    surface = SvgSurface(100, 50)
    surface.draw_text("<A&B>", Point(0, 0), 'x"y', 12.0)
    svg = surface.to_svg()
    assert "<A&B>" not in svg

    (text,) = _all(_parse(svg), "text")
    assert text.text == "<A&B>"
    assert text.get("fill") == 'x"y'


def test_svg_padding_extends_viewbox() -> None:
    root = _parse(SvgSurface(100, 50, padding=10).to_svg())
    assert float(root.get("width")) == 120  # type: ignore[arg-type]
    assert float(root.get("height")) == 70  # type: ignore[arg-type]
    assert [float(v) for v in root.get("viewBox", "").split()] == [-10, -10, 120, 70]


def test_render_onto_svg_surface() -> None:
    surface = SvgSurface(400, 100)
    render(surface, RenderConfig(tuning=("E", "A", "D", "G", "B", "E"), total_frets=12))
    root = _parse(surface.to_svg())
    assert len(_all(root, "line")) == 13 + 6
    assert len(_all(root, "circle")) == 6
    assert _all(root, "text") == []
