"""Drawing surface implementations that fretboard renders are emitted onto."""

from __future__ import annotations

from abc import ABC, abstractmethod

import svgwrite

from fretmap.fretboard_models import CircleCommand, DrawCommand, LineCommand, Point, TextCommand


class DrawingSurface(ABC):
    """Abstract 2D drawing surface with line, circle and text primitives."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    @property
    def size(self) -> tuple[float, float]:
        """Drawable area as ``(width, height)`` in pixels."""
        return self.width, self.height

    @abstractmethod
    def draw_line(self, start: Point, end: Point, color: str, width: float) -> None:
        """Draw a straight line segment."""

    @abstractmethod
    def draw_circle(self, center: Point, radius: float, color: str) -> None:
        """Draw a filled circle."""

    @abstractmethod
    def draw_text(self, text: str, position: Point, color: str, size: float) -> None:
        """Draw a text label centred on *position*."""


class RecordingSurface(DrawingSurface):
    """Surface that keeps every draw call as a command record, in order."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__(width, height)
        self.commands: list[DrawCommand] = []

    def draw_line(self, start: Point, end: Point, color: str, width: float) -> None:
        self.commands.append(LineCommand(start=start, end=end, color=color, width=width))

    def draw_circle(self, center: Point, radius: float, color: str) -> None:
        self.commands.append(CircleCommand(center=center, radius=radius, color=color))

    def draw_text(self, text: str, position: Point, color: str, size: float) -> None:
        self.commands.append(TextCommand(text=text, position=position, color=color, size=size))

    def of_type(self, kind: type) -> list[DrawCommand]:
        """Recorded commands of a single command class."""
        return [cmd for cmd in self.commands if isinstance(cmd, kind)]


class SvgSurface(DrawingSurface):
    """
    Surface that builds a standalone SVG document with svgwrite.

    ``padding`` adds a margin around the drawable area so that strings on the
    outer edges and note markers centred on them are not clipped.
    """

    FONT_FAMILY: str = "Helvetica, Arial, sans-serif"
    PRECISION: int = 2  # decimal places kept in coordinates

    def __init__(self, width: float, height: float, padding: float = 0.0) -> None:
        super().__init__(width, height)
        self.padding = padding
        outer_w = width + 2 * padding
        outer_h = height + 2 * padding
        # debug=False: svgwrite's validator rejects CSS rgba() colours
        self._dwg = svgwrite.Drawing(size=(outer_w, outer_h), debug=False)
        self._dwg.viewbox(-padding, -padding, outer_w, outer_h)
        self._board = self._dwg.g(class_="fretboard", font_family=self.FONT_FAMILY)
        self._dwg.add(self._board)

    def _xy(self, point: Point) -> tuple[float, float]:
        return round(point.x, self.PRECISION), round(point.y, self.PRECISION)

    def draw_line(self, start: Point, end: Point, color: str, width: float) -> None:
        self._board.add(
            self._dwg.line(start=self._xy(start), end=self._xy(end), stroke=color, stroke_width=width)
        )

    def draw_circle(self, center: Point, radius: float, color: str) -> None:
        self._board.add(
            self._dwg.circle(center=self._xy(center), r=round(radius, self.PRECISION), fill=color)
        )

    def draw_text(self, text: str, position: Point, color: str, size: float) -> None:
        self._board.add(
            self._dwg.text(
                text,
                insert=self._xy(position),
                fill=color,
                font_size=size,
                text_anchor="middle",
                dominant_baseline="central",
            )
        )

    def to_svg(self) -> str:
        """Return the accumulated drawing as an SVG document string."""
        return self._dwg.tostring()
