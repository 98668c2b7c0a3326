"""Unit tests for fret spacing and coordinate normalisation."""

import pytest

from fretmap.fret_geometry import (
    calculate_fret_positions,
    cell_midpoint,
    normalize_positions,
    string_rows,
)


@pytest.mark.parametrize("total_frets", [1, 5, 12, 18, 22, 24])
def test_positions_length_and_strictly_increasing(total_frets: int) -> None:
    positions = calculate_fret_positions(total_frets)
    assert len(positions) == total_frets + 1
    assert positions[0] == 0.0
    assert all(a < b for a, b in zip(positions, positions[1:]))


def test_twelfth_fret_is_half_the_scale_length() -> None:
    positions = calculate_fret_positions(12, scale_length=800.0)
    assert positions[12] == pytest.approx(400.0)


def test_first_fret_matches_closed_form() -> None:
    positions = calculate_fret_positions(1, scale_length=648.0)
    assert positions[1] == pytest.approx(648.0 - 648.0 / 2 ** (1 / 12))


def test_fret_spacing_shrinks_towards_bridge() -> None:
    positions = calculate_fret_positions(18)
    gaps = [b - a for a, b in zip(positions, positions[1:])]
    assert all(a > b for a, b in zip(gaps, gaps[1:]))


@pytest.mark.parametrize("width", [1.0, 320.0, 1234.5])
def test_normalize_maps_last_position_to_width(width: float) -> None:
    normalized = normalize_positions(calculate_fret_positions(22), width)
    assert normalized[0] == 0.0
    assert normalized[-1] == pytest.approx(width)


def test_normalize_is_independent_of_scale_length() -> None:
    short = normalize_positions(calculate_fret_positions(18, scale_length=600.0), 500.0)
    long = normalize_positions(calculate_fret_positions(18, scale_length=900.0), 500.0)
    assert short == pytest.approx(long)


def test_string_rows_evenly_spaced() -> None:
    assert string_rows(6, 100.0) == pytest.approx([0.0, 20.0, 40.0, 60.0, 80.0, 100.0])


def test_string_rows_requires_two_strings() -> None:
    with pytest.raises(ValueError):
        string_rows(1, 100.0)


def test_cell_midpoint() -> None:
    assert cell_midpoint([0.0, 10.0, 18.0], 2) == pytest.approx(14.0)
