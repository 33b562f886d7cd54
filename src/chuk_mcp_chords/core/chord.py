"""
Chord event - simultaneous pitches sharing one duration.

A chord is an ordered list of MIDI note numbers (index 0 is the bass)
plus the duration state from TimedEvent and a set of performance
annotations. Every modifier is all-or-nothing: it returns False and
leaves the chord untouched when it cannot be applied.
"""

from __future__ import annotations

from typing import Any, ClassVar, Literal

from pydantic import Field, model_validator

from chuk_mcp_chords.constants import OCTAVE, PITCH_MIN, TRANSPOSE_CEILING, ChordAnnotation
from chuk_mcp_chords.core.defaults import get_defaults
from chuk_mcp_chords.core.pitch import Pitch, note_name
from chuk_mcp_chords.core.timed import TimedEvent


class Chord(TimedEvent):
    """
    Several notes with the same duration.

    Octave shifts gate on the highest and lowest pitch. Inversion works on
    positions: the note at index 0 moves up an octave to the end. Callers
    that need the list ordered low to high after an inversion must keep it
    that way themselves (see is_ascending).
    """

    kind: Literal["chord"] = "chord"
    pitches: list[Pitch] = Field(..., description="MIDI note numbers, bass first")

    staccato: bool = Field(False, description="Played short")
    tenuto: bool = Field(False, description="Held for full value")
    accent: bool = Field(False, description="Played with emphasis")
    fermata: bool = Field(False, description="Held beyond its value")
    tied: bool = Field(False, description="Tied to the next chord")
    slurred: bool = Field(False, description="Slurred to the next chord")

    ANNOTATIONS: ClassVar[tuple[ChordAnnotation, ...]] = (
        "staccato",
        "tenuto",
        "accent",
        "fermata",
        "tied",
        "slurred",
    )

    @model_validator(mode="before")
    @classmethod
    def fill_pitch_defaults(cls, data: Any) -> Any:
        """A chord built without pitches uses the default voicing."""
        if isinstance(data, dict) and "pitches" not in data:
            data = {**data, "pitches": list(get_defaults().default_chord)}
        return data

    # Pitch modifiers

    def add_octave(self) -> bool:
        """
        Move the chord up one octave.

        Gates on the highest pitch rather than the last one, so a chord whose
        top voice is not last still never moves past the ceiling. For an
        ascending chord the two are the same note.

        Returns:
            Whether the chord was moved up an octave
        """
        if not self.pitches or max(self.pitches) + OCTAVE > TRANSPOSE_CEILING:
            return False
        self.pitches = [pitch + OCTAVE for pitch in self.pitches]
        return True

    def drop_octave(self) -> bool:
        """
        Move the chord down one octave.

        Gates on the lowest pitch rather than the first one.

        Returns:
            Whether the chord was moved down an octave
        """
        if not self.pitches or min(self.pitches) - OCTAVE < PITCH_MIN:
            return False
        self.pitches = [pitch - OCTAVE for pitch in self.pitches]
        return True

    def invert(self) -> bool:
        """
        Move the bottom note of the chord up one octave.

        [60, 64, 67] becomes [64, 67, 72].

        Returns:
            Whether the chord could be inverted
        """
        if len(self.pitches) < 2 or self.pitches[0] + OCTAVE > TRANSPOSE_CEILING:
            return False
        self.pitches = [*self.pitches[1:], self.pitches[0] + OCTAVE]
        return True

    # Comparison

    def equals(self, other: object) -> bool:
        """
        Check whether another chord is the same chord.

        Pitches must match in order, and every duration and annotation
        flag must match exactly.
        """
        if not isinstance(other, Chord):
            return False
        if self.pitches != other.pitches or not self._same_timing(other):
            return False
        return all(getattr(self, name) == getattr(other, name) for name in self.ANNOTATIONS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chord):
            return NotImplemented
        return self.equals(other)

    # Display

    @property
    def is_ascending(self) -> bool:
        """Whether the pitches are ordered low to high."""
        return all(low <= high for low, high in zip(self.pitches, self.pitches[1:]))

    @property
    def active_annotations(self) -> list[str]:
        """Names of the annotation flags that are set."""
        return [name for name in self.ANNOTATIONS if getattr(self, name)]

    def note_names(self, prefer_flats: bool = False) -> list[str]:
        """Pitches in scientific pitch notation, e.g. ['C4', 'E4', 'G4']."""
        return [note_name(pitch, prefer_flats) for pitch in self.pitches]

    def __str__(self) -> str:
        notes = " ".join(self.note_names()) or "(empty)"
        details = ", ".join([self.describe_duration(), *self.active_annotations])
        return f"{notes} ({details})"
