"""
Pitch primitives - PitchClass and MIDI note naming.

A chord stores absolute MIDI note numbers (0-127). PitchClass gives the
octave-independent view used when naming those notes for display.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Annotated

from pydantic import Field

from chuk_mcp_chords.constants import OCTAVE, PITCH_MAX, PITCH_MIN

# A single MIDI note number, validated by pydantic
Pitch = Annotated[int, Field(ge=PITCH_MIN, le=PITCH_MAX)]

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * OCTAVE

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % OCTAVE)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()
        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))
        raise ValueError(f"Unknown pitch class: {name}")


def note_name(midi_note: int, prefer_flats: bool = False) -> str:
    """
    Name a MIDI note with scientific pitch notation.

    Args:
        midi_note: MIDI note number (0-127)
        prefer_flats: Spell accidentals as flats

    Returns:
        Name like 'C4' or 'F#3'
    """
    if not PITCH_MIN <= midi_note <= PITCH_MAX:
        raise ValueError(f"MIDI note must be {PITCH_MIN}-{PITCH_MAX}, got {midi_note}")
    octave = midi_note // OCTAVE - 1
    return f"{PitchClass.from_midi(midi_note).spell(prefer_flats)}{octave}"


def parse_note(name: str) -> int:
    """
    Parse a note name like 'C4', 'Eb3' or 'F#-1' into a MIDI note number.

    Plain integers ('60') are accepted as-is.
    """
    name = name.strip()
    if name.lstrip("-").isdigit():
        midi_note = int(name)
    else:
        split = 2 if len(name) > 1 and name[1] in "#b" else 1
        pitch_class = PitchClass.parse(name[:split])
        try:
            octave = int(name[split:])
        except ValueError:
            raise ValueError(f"Invalid note name: {name}") from None
        midi_note = pitch_class.to_midi(octave)

    if not PITCH_MIN <= midi_note <= PITCH_MAX:
        raise ValueError(f"Note '{name}' is outside the MIDI range {PITCH_MIN}-{PITCH_MAX}")
    return midi_note
