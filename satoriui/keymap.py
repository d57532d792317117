"""Mapping from computer-keyboard letters to MIDI notes."""

from __future__ import annotations

SEMITONES_PER_OCTAVE = 12

WHITE_BINDINGS: tuple[tuple[str, int], ...] = (
    ("A", 0),
    ("S", 2),
    ("D", 4),
    ("F", 5),
    ("G", 7),
    ("H", 9),
    ("J", 11),
)

BLACK_BINDINGS: tuple[tuple[str, int], ...] = (
    ("W", 1),
    ("E", 3),
    ("T", 6),
    ("Y", 8),
    ("U", 10),
)


def make_keyboard_keymap(base_midi_note: int, octave_count: int) -> dict[str, int]:
    """Map key letters to MIDI notes above ``base_midi_note``.

    Only offsets inside ``octave_count`` octaves are bound; a non-positive
    octave count yields an empty map.
    """
    semitone_limit = octave_count * SEMITONES_PER_OCTAVE if octave_count > 0 else 0
    if semitone_limit <= 0:
        return {}
    return {
        key: base_midi_note + offset
        for key, offset in WHITE_BINDINGS + BLACK_BINDINGS
        if offset < semitone_limit
    }