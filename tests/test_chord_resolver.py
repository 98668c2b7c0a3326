"""Unit tests for major-triad chord resolution."""

from fretmap.chord_resolver import Found, NotFound, chord_tones, resolve_chord
from fretmap.pitch import CHROMATIC_SCALE


def test_resolve_c_major() -> None:
    assert resolve_chord("C") == Found(root="C", notes=frozenset({"C", "E", "G"}))


def test_resolve_a_major_includes_sharp_third() -> None:
    result = resolve_chord("A")
    assert isinstance(result, Found)
    assert result.notes == {"A", "C#", "E"}


def test_resolve_wraps_past_b() -> None:
    result = resolve_chord("B")
    assert isinstance(result, Found)
    assert result.notes == {"B", "D#", "F#"}


def test_resolve_unknown_name_is_not_found() -> None:
    assert resolve_chord("Z") == NotFound("Z")


def test_every_pitch_class_resolves_to_three_tones() -> None:
    for name in CHROMATIC_SCALE:
        result = resolve_chord(name)
        assert isinstance(result, Found)
        assert len(result.notes) == 3
        assert name in result.notes


def test_chord_tones_union() -> None:
    assert chord_tones({"C", "G"}) == {"C", "D", "E", "G", "B"}


def test_chord_tones_skips_unknown_chords() -> None:
    assert chord_tones(["Z", "D"]) == {"D", "F#", "A"}


def test_chord_tones_none_or_empty() -> None:
    assert chord_tones(None) == frozenset()
    assert chord_tones([]) == frozenset()
