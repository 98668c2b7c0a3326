"""Equal-tempered fret spacing and pixel-space normalisation."""

import numpy as np

from fretmap.pitch import SEMITONES_PER_OCTAVE

# Reference scale length. The normalised geometry does not depend on it.
SCALE_LENGTH = 800.0


def calculate_fret_positions(total_frets: int, scale_length: float = SCALE_LENGTH) -> list[float]:
    """
    Distance of every fret from the nut on a string of length *scale_length*.

    Uses the 12-TET closed form ``pos(f) = L - L / 2 ** (f / 12)``. Each fret
    sits 2 ** (1/12) closer to the bridge than the previous one.

    Args:
        total_frets:  Number of frets (>= 1).
        scale_length: Nut-to-bridge distance in arbitrary units.

    Returns:
        ``total_frets + 1`` strictly increasing positions, starting at 0.0
        for the nut.
    """
    frets = np.arange(total_frets + 1, dtype=float)
    positions = scale_length - scale_length / np.power(2.0, frets / SEMITONES_PER_OCTAVE)
    return [float(p) for p in positions]


def normalize_positions(positions: list[float], width: float) -> list[float]:
    """Scale *positions* so that the last one lands exactly on *width*."""
    scaled = np.asarray(positions, dtype=float) * (width / positions[-1])
    scaled[-1] = width
    return [float(x) for x in scaled]


def string_rows(num_strings: int, height: float) -> list[float]:
    """
    Evenly spaced vertical positions for *num_strings* strings across *height*.

    Raises:
        ValueError: If fewer than two strings are given.
    """
    if num_strings < 2:
        raise ValueError(f"At least two strings are required, got {num_strings}.")
    spacing = height / (num_strings - 1)
    return [i * spacing for i in range(num_strings)]


def cell_midpoint(normalized: list[float], fret: int) -> float:
    """Horizontal centre of the cell between fret ``fret - 1`` and ``fret``."""
    return (normalized[fret - 1] + normalized[fret]) / 2
