"""Pitch-class table and validated lookups shared by every fretboard module."""

from typing import Final

# Chromatic pitch class names (index 0 = C)
CHROMATIC_SCALE: Final[tuple[str, ...]] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
)

SEMITONES_PER_OCTAVE: Final[int] = len(CHROMATIC_SCALE)

_INDEX_BY_NAME: Final[dict[str, int]] = {name: i for i, name in enumerate(CHROMATIC_SCALE)}


class UnknownPitchClass(ValueError):
    """Raised when a name is not one of the twelve canonical pitch classes."""

    def __init__(self, name: str) -> None:
        self.name = name
        supported = ", ".join(CHROMATIC_SCALE)
        super().__init__(f"Unknown pitch class '{name}'. Use one of: {supported}.")


def is_pitch_class(name: str) -> bool:
    """Return True if *name* is a canonical pitch-class name."""
    return name in _INDEX_BY_NAME


def pitch_index(name: str) -> int:
    """
    Return the chromatic index (0=C, ..., 11=B) of a pitch-class name.

    Raises:
        UnknownPitchClass: If *name* is not in CHROMATIC_SCALE.
    """
    try:
        return _INDEX_BY_NAME[name]
    except KeyError:
        raise UnknownPitchClass(name) from None


def transpose(name: str, semitones: int) -> str:
    """Return the pitch class *semitones* above *name*, wrapping at the octave."""
    return CHROMATIC_SCALE[(pitch_index(name) + semitones) % SEMITONES_PER_OCTAVE]
