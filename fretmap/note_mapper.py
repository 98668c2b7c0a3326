"""NoteMapper: locates highlighted pitch classes on every string and fret."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from fretmap.chord_resolver import chord_tones
from fretmap.pitch import CHROMATIC_SCALE, SEMITONES_PER_OCTAVE, pitch_index


@dataclass(frozen=True)
class MarkedNote:
    """
    A highlighted note at a concrete fretboard location.

    Attributes:
        string_index: Row of the string in the tuning (0 = first rendered row).
        fret:         Fret number, 1..total_frets. Open strings are never marked.
        note:         Pitch class sounding at that location.
    """

    string_index: int
    fret: int
    note: str


def validate_tuning(tuning: Sequence[str]) -> None:
    """
    Check the caller preconditions for a tuning.

    Raises:
        ValueError:        If the tuning has fewer than two strings.
        UnknownPitchClass: If any open-string name is not a pitch class.
    """
    if len(tuning) < 2:
        raise ValueError(f"A tuning needs at least two strings, got {len(tuning)}.")
    for open_note in tuning:
        pitch_index(open_note)


def note_at(open_note: str, fret: int) -> str:
    """Pitch class sounding on a string tuned to *open_note* at *fret*."""
    return CHROMATIC_SCALE[(pitch_index(open_note) + fret) % SEMITONES_PER_OCTAVE]


def map_notes(
    tuning: Sequence[str],
    highlighted_notes: Iterable[str],
    highlighted_chords: Iterable[str] | None,
    total_frets: int,
) -> list[MarkedNote]:
    """
    Find every fretted location whose note is highlighted.

    A note is marked when it is in *highlighted_notes* or belongs to the
    major triad of any chord in *highlighted_chords*.

    Args:
        tuning:             Open-string pitch classes, one per string.
        highlighted_notes:  Pitch classes to mark directly.
        highlighted_chords: Chord roots whose tones are marked, or None.
        total_frets:        Highest fret to scan.

    Returns:
        Marked notes ordered by string, then fret.

    Raises:
        UnknownPitchClass: If a tuning entry is not a pitch class.
    """
    wanted = frozenset(highlighted_notes) | chord_tones(highlighted_chords)

    marked: list[MarkedNote] = []
    for string_index, open_note in enumerate(tuning):
        for fret in range(1, total_frets + 1):
            note = note_at(open_note, fret)
            if note in wanted:
                marked.append(MarkedNote(string_index=string_index, fret=fret, note=note))
    return marked
