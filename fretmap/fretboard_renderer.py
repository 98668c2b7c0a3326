"""FretboardRenderer: turns a RenderConfig into draw calls on a surface."""

from __future__ import annotations

from typing import Final

from fretmap.fret_geometry import (
    SCALE_LENGTH,
    calculate_fret_positions,
    cell_midpoint,
    normalize_positions,
    string_rows,
)
from fretmap.fretboard_models import Point, RenderConfig
from fretmap.note_mapper import map_notes
from fretmap.surfaces import DrawingSurface

#: Frets that carry an inlay dot on a conventional guitar neck
INLAY_FRETS: Final[tuple[int, ...]] = (3, 5, 7, 9, 12, 15, 17, 19, 21)
DOUBLE_INLAY_FRET: Final[int] = 12


class FretboardRenderer:
    """
    Renders a fretboard diagram onto any DrawingSurface.

    Draw order
    ----------
    Later calls are painted on top of earlier ones:

    1. **Frets** – one vertical line per normalised fret position, nut included.
    2. **Strings** – one horizontal line per string row.
    3. **Notes** – a filled circle plus a centred label for every highlighted
       note, placed in the middle of its fret cell on its string.
    4. **Inlays** – decorative dots at frets 3, 5, 7, 9, 15, 17, 19, 21 and
       a double dot at fret 12, skipped when beyond the last fret.

    The renderer holds no per-call state; every call recomputes all geometry.
    """

    LINE_WIDTH = 1.0
    LABEL_FONT_SIZE = 12.0
    INLAY_RADIUS = 5.0
    NOTE_RADIUS_DIVISOR = 2.5   # note radius = string spacing / 2.5
    DOUBLE_INLAY_TOP = 0.3      # fraction of surface height
    DOUBLE_INLAY_BOTTOM = 0.7

    def __init__(self, scale_length: float = SCALE_LENGTH) -> None:
        self.scale_length = scale_length

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _draw_frets(
        self, surface: DrawingSurface, frets_x: list[float], height: float, color: str
    ) -> None:
        for x in frets_x:
            surface.draw_line(Point(x, 0.0), Point(x, height), color, self.LINE_WIDTH)

    def _draw_strings(
        self, surface: DrawingSurface, rows_y: list[float], width: float, color: str
    ) -> None:
        for y in rows_y:
            surface.draw_line(Point(0.0, y), Point(width, y), color, self.LINE_WIDTH)

    def _draw_notes(
        self,
        surface: DrawingSurface,
        config: RenderConfig,
        frets_x: list[float],
        rows_y: list[float],
    ) -> None:
        radius = (rows_y[1] - rows_y[0]) / self.NOTE_RADIUS_DIVISOR
        marked = map_notes(
            config.tuning,
            config.highlighted_notes,
            config.highlighted_chords,
            config.total_frets,
        )
        for mark in marked:
            center = Point(cell_midpoint(frets_x, mark.fret), rows_y[mark.string_index])
            surface.draw_circle(center, radius, config.note_color)
            surface.draw_text(mark.note, center, config.note_text_color, self.LABEL_FONT_SIZE)

    def _draw_inlays(
        self,
        surface: DrawingSurface,
        frets_x: list[float],
        total_frets: int,
        height: float,
        color: str,
    ) -> None:
        for fret in INLAY_FRETS:
            if fret > total_frets:
                continue
            x = cell_midpoint(frets_x, fret)
            if fret == DOUBLE_INLAY_FRET:
                surface.draw_circle(Point(x, height * self.DOUBLE_INLAY_TOP), self.INLAY_RADIUS, color)
                surface.draw_circle(
                    Point(x, height * self.DOUBLE_INLAY_BOTTOM), self.INLAY_RADIUS, color
                )
            else:
                surface.draw_circle(Point(x, height / 2), self.INLAY_RADIUS, color)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, surface: DrawingSurface, config: RenderConfig) -> None:
        """
        Draw the full fretboard for *config* onto *surface*.

        Validation happens before the first draw call, so a rejected config
        leaves the surface untouched.

        Raises:
            ValueError:        If total_frets < 1 or the tuning has < 2 strings.
            UnknownPitchClass: If a tuning entry is not a pitch class.
        """
        config.validate()
        width, height = surface.size

        positions = calculate_fret_positions(config.total_frets, self.scale_length)
        frets_x = normalize_positions(positions, width)
        rows_y = string_rows(len(config.tuning), height)

        self._draw_frets(surface, frets_x, height, config.fret_color)
        self._draw_strings(surface, rows_y, width, config.string_color)
        self._draw_notes(surface, config, frets_x, rows_y)
        self._draw_inlays(surface, frets_x, config.total_frets, height, config.fret_color)


def render(surface: DrawingSurface, config: RenderConfig) -> None:
    """Render *config* onto *surface* with the default FretboardRenderer."""
    FretboardRenderer().render(surface, config)
