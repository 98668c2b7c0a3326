"""Chord resolver: maps a chord root name to its major-triad pitch classes."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from fretmap.pitch import is_pitch_class, transpose

#: Root position major triad: root, major-3rd (+4), perfect-5th (+7)
MAJOR_TRIAD_INTERVALS: Final[tuple[int, ...]] = (0, 4, 7)


@dataclass(frozen=True)
class Found:
    """A resolved chord and the pitch classes it contains."""

    root: str
    notes: frozenset[str]


@dataclass(frozen=True)
class NotFound:
    """The chord name is not a recognised pitch class."""

    name: str


ChordLookupResult = Found | NotFound


def resolve_chord(name: str) -> ChordLookupResult:
    """
    Resolve a chord name to the three tones of its major triad.

    The chord name is the root pitch class (e.g. ``"A"`` -> A, C#, E).
    Unknown names are not an error; they resolve to ``NotFound``.
    """
    if not is_pitch_class(name):
        return NotFound(name)
    return Found(
        root=name,
        notes=frozenset(transpose(name, interval) for interval in MAJOR_TRIAD_INTERVALS),
    )


def chord_tones(chords: Iterable[str] | None) -> frozenset[str]:
    """Union of the tones of every resolvable chord in *chords*."""
    if chords is None:
        return frozenset()

    tones: set[str] = set()
    for chord in chords:
        result = resolve_chord(chord)
        if isinstance(result, Found):
            tones |= result.notes
    return frozenset(tones)
