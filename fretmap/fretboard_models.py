"""Data models for fretboard rendering: configuration and draw commands."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Final

from fretmap.note_mapper import validate_tuning

DEFAULT_TOTAL_FRETS: Final[int] = 18

# Theme defaults: translucent divider grey for frets and strings,
# translucent highlight for note markers, white labels.
DEFAULT_FRET_COLOR: Final[str] = "rgba(0, 0, 0, 0.4)"
DEFAULT_STRING_COLOR: Final[str] = "rgba(0, 0, 0, 0.4)"
DEFAULT_NOTE_COLOR: Final[str] = "rgba(102, 102, 204, 0.75)"
DEFAULT_NOTE_TEXT_COLOR: Final[str] = "#ffffff"


@dataclass(frozen=True)
class Point:
    """A pixel-space coordinate on the drawing surface."""

    x: float
    y: float


@dataclass(frozen=True)
class LineCommand:
    start: Point
    end: Point
    color: str
    width: float


@dataclass(frozen=True)
class CircleCommand:
    center: Point
    radius: float
    color: str


@dataclass(frozen=True)
class TextCommand:
    """A text label centred on *position*."""

    text: str
    position: Point
    color: str
    size: float


DrawCommand = LineCommand | CircleCommand | TextCommand


@dataclass(frozen=True)
class RenderConfig:
    """
    Everything one render call needs besides the surface.

    Collections are frozen on construction so two configs built from equal
    lists or sets compare equal. A bare string is rejected rather than
    split into characters.

    Attributes:
        tuning:             Open-string pitch classes, index 0 = top row.
        highlighted_notes:  Pitch classes marked wherever they occur.
        highlighted_chords: Chord roots whose major triads are marked, or None.
        total_frets:        Number of frets drawn (>= 1).
        fret_color:         Fret lines and inlay markers.
        string_color:       String lines.
        note_color:         Highlighted note circles.
        note_text_color:    Highlighted note labels.
    """

    tuning: tuple[str, ...]
    highlighted_notes: frozenset[str] = frozenset()
    highlighted_chords: frozenset[str] | None = None
    total_frets: int = DEFAULT_TOTAL_FRETS
    fret_color: str = DEFAULT_FRET_COLOR
    string_color: str = DEFAULT_STRING_COLOR
    note_color: str = DEFAULT_NOTE_COLOR
    note_text_color: str = DEFAULT_NOTE_TEXT_COLOR

    def __post_init__(self) -> None:
        for name in ("tuning", "highlighted_notes", "highlighted_chords"):
            if isinstance(getattr(self, name), str):
                raise TypeError(f"{name} must be a collection of pitch names, not a string.")
        object.__setattr__(self, "tuning", tuple(self.tuning))
        object.__setattr__(self, "highlighted_notes", frozenset(self.highlighted_notes))
        if self.highlighted_chords is not None:
            object.__setattr__(self, "highlighted_chords", frozenset(self.highlighted_chords))

    def validate(self) -> None:
        """
        Check the caller preconditions before anything is drawn.

        Raises:
            ValueError:        If total_frets < 1 or the tuning has < 2 strings.
            UnknownPitchClass: If a tuning entry is not a pitch class.
        """
        if self.total_frets < 1:
            raise ValueError(f"total_frets must be at least 1, got {self.total_frets}.")
        validate_tuning(self.tuning)


def needs_redraw(previous: RenderConfig | None, current: RenderConfig) -> bool:
    """Return True if *current* differs from *previous* in any field."""
    if previous is None:
        return True
    return any(
        getattr(previous, f.name) != getattr(current, f.name) for f in fields(RenderConfig)
    )
