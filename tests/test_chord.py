"""
Tests for the Chord event.

Tests cover:
- Construction (defaults, explicit values, validation)
- Duration modifiers (dot, double_dot, put_in_triplet)
- Pitch modifiers (add_octave, drop_octave, invert)
- Equality
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_chords.core import Chord, DurationTable, NoteValue


class TestChordConstruction:
    """Tests for building chords."""

    def test_default_chord(self) -> None:
        """Default chord is a C major quarter note with no flags."""
        chord = Chord()
        assert chord.pitches == [60, 64, 67]
        assert chord.duration == DurationTable().quarter
        assert chord.kind == "chord"
        for flag in ("triplet", "dotted", "double_dotted", *Chord.ANNOTATIONS):
            assert getattr(chord, flag) is False

    def test_explicit_chord(self) -> None:
        """Explicit pitches, duration and flags."""
        chord = Chord(pitches=[48, 55], duration=768, staccato=True, tied=True)
        assert chord.pitches == [48, 55]
        assert chord.duration == 768
        assert chord.staccato
        assert chord.tied
        assert not chord.accent

    def test_note_value(self) -> None:
        """Duration from a note value name."""
        chord = Chord(pitches=[60], note_value="eighth")
        assert chord.duration == 192

    def test_injected_table(self) -> None:
        """The duration table is injected at construction."""
        table = DurationTable(ticks_per_quarter=192)
        chord = Chord(pitches=[60], durations=table)
        assert chord.duration == 192
        assert chord.durations is table

    def test_empty_pitches(self) -> None:
        """A chord may have no pitches."""
        assert Chord(pitches=[], duration=384).pitches == []

    def test_pitch_out_of_range(self) -> None:
        """Pitches must be 0-127."""
        with pytest.raises(ValidationError):
            Chord(pitches=[128], duration=384)
        with pytest.raises(ValidationError):
            Chord(pitches=[-1], duration=384)

    def test_duration_must_be_positive(self) -> None:
        """Durations must be positive."""
        with pytest.raises(ValidationError):
            Chord(pitches=[60], duration=0)

    def test_dump_excludes_table(self) -> None:
        """The shared table is not part of the chord's data."""
        data = Chord().model_dump()
        assert "durations" not in data
        assert data["pitches"] == [60, 64, 67]


class TestChordDurationModifiers:
    """Tests for dot, double_dot and put_in_triplet."""

    @pytest.mark.parametrize(
        "value",
        [
            NoteValue.WHOLE,
            NoteValue.HALF,
            NoteValue.QUARTER,
            NoteValue.EIGHTH,
            NoteValue.SIXTEENTH,
            NoteValue.THIRTY_SECOND,
        ],
    )
    def test_dot_sequence(self, table: DurationTable, value: NoteValue) -> None:
        """Dot, dot again, then refuse a third dot."""
        base = table.ticks(value)
        chord = Chord(pitches=[60], duration=base)

        assert chord.dot() is True
        assert chord.duration * 2 == base * 3
        assert chord.dotted and not chord.double_dotted

        assert chord.dot() is True
        assert chord.duration * 4 == base * 7
        assert chord.double_dotted

        before = chord.model_copy()
        assert chord.dot() is False
        assert chord == before

    def test_dot_shortest_fails(self, table: DurationTable) -> None:
        """A 128th note chord cannot be dotted."""
        chord = Chord(pitches=[60], duration=table.one_twenty_eighth)
        assert chord.dot() is False
        assert chord.duration == table.one_twenty_eighth
        assert not chord.dotted

    def test_second_dot_on_dotted_sixty_fourth_fails(self, table: DurationTable) -> None:
        """A dotted 64th cannot take a second dot."""
        chord = Chord(pitches=[60], duration=table.sixty_fourth)
        assert chord.dot() is True
        assert chord.dot() is False
        assert chord.duration == table.dotted_sixty_fourth
        assert not chord.double_dotted

    def test_double_dot_matches_two_dots(self, table: DurationTable) -> None:
        """Both dotting paths land on the same state."""
        once = Chord(pitches=[60, 64], duration=table.half)
        twice = Chord(pitches=[60, 64], duration=table.half)

        assert once.double_dot() is True
        assert twice.dot() and twice.dot()
        assert once.duration == 1344
        assert once.equals(twice)

    def test_double_dot_refused(self, table: DurationTable) -> None:
        """Double dot needs an undotted chord with headroom."""
        dotted = Chord(pitches=[60], duration=table.quarter)
        dotted.dot()
        assert dotted.double_dot() is False
        assert dotted.duration == 576

        assert Chord(pitches=[60], duration=table.sixty_fourth).double_dot() is False
        assert Chord(pitches=[60], duration=table.one_twenty_eighth).double_dot() is False

    def test_triplet_once(self, table: DurationTable) -> None:
        """Triplet scales by 2/3 once."""
        chord = Chord(pitches=[60], duration=table.quarter)
        assert chord.put_in_triplet() is True
        assert chord.duration == 256
        assert chord.triplet

        assert chord.put_in_triplet() is False
        assert chord.duration == 256

    def test_triplet_and_dot_compose(self, table: DurationTable) -> None:
        """Dotted triplet is base x 3/2 x 2/3."""
        chord = Chord(pitches=[60], duration=table.quarter)
        chord.put_in_triplet()
        chord.dot()
        assert chord.duration == table.quarter
        assert chord.triplet and chord.dotted

    def test_inexact_duration_refused(self) -> None:
        """A modifier that would need a fractional tick is refused."""
        chord = Chord(pitches=[60], duration=100)
        assert chord.put_in_triplet() is False
        assert chord.duration == 100
        assert not chord.triplet

    def test_annotations_carried(self, table: DurationTable) -> None:
        """Modifiers leave annotation flags alone."""
        chord = Chord(pitches=[60, 64], duration=table.quarter, accent=True, slurred=True)
        chord.dot()
        chord.put_in_triplet()
        chord.invert()
        assert chord.accent and chord.slurred
        assert not chord.staccato


class TestChordPitchModifiers:
    """Tests for add_octave, drop_octave and invert."""

    def test_add_octave(self) -> None:
        """Every pitch moves up 12."""
        chord = Chord(pitches=[60, 64, 67], duration=384)
        assert chord.add_octave() is True
        assert chord.pitches == [72, 76, 79]

    def test_add_octave_ceiling(self) -> None:
        """Octave shifts stop at 126."""
        assert Chord(pitches=[118], duration=384).add_octave() is False

        chord = Chord(pitches=[114], duration=384)
        assert chord.add_octave() is True
        assert chord.pitches == [126]
        assert chord.add_octave() is False
        assert chord.pitches == [126]

    def test_add_octave_checks_highest(self) -> None:
        """The highest pitch gates the shift even out of order."""
        chord = Chord(pitches=[120, 60], duration=384)
        assert chord.add_octave() is False
        assert chord.pitches == [120, 60]

    def test_drop_octave(self) -> None:
        """Every pitch moves down 12."""
        chord = Chord(pitches=[60, 64, 67], duration=384)
        assert chord.drop_octave() is True
        assert chord.pitches == [48, 52, 55]

    def test_drop_octave_floor(self) -> None:
        """Octave drops stop at 0."""
        assert Chord(pitches=[11, 20], duration=384).drop_octave() is False

        chord = Chord(pitches=[12, 16], duration=384)
        assert chord.drop_octave() is True
        assert chord.pitches == [0, 4]

    def test_drop_octave_checks_lowest(self) -> None:
        """The lowest pitch gates the drop even out of order."""
        chord = Chord(pitches=[60, 5], duration=384)
        assert chord.drop_octave() is False
        assert chord.pitches == [60, 5]

    def test_empty_chord(self) -> None:
        """Pitch modifiers refuse empty chords."""
        chord = Chord(pitches=[], duration=384)
        assert chord.add_octave() is False
        assert chord.drop_octave() is False
        assert chord.invert() is False

    @pytest.mark.parametrize(
        "pitches",
        [[60], [0, 7, 12], [36, 40, 43, 48], [100, 114]],
    )
    def test_octave_round_trip(self, pitches: list[int]) -> None:
        """add_octave then drop_octave restores the pitches."""
        chord = Chord(pitches=pitches, duration=384)
        assert chord.add_octave() is True
        assert chord.drop_octave() is True
        assert chord.pitches == pitches

    def test_invert(self) -> None:
        """The bass note moves up an octave to the top."""
        chord = Chord(pitches=[60, 64, 67], duration=384)
        assert chord.invert() is True
        assert chord.pitches == [64, 67, 72]
        assert chord.invert() is True
        assert chord.pitches == [67, 72, 76]

    def test_invert_ceiling(self) -> None:
        """Inversion fails when the bass would pass 126."""
        chord = Chord(pitches=[120, 124], duration=384)
        assert chord.invert() is False
        assert chord.pitches == [120, 124]

    def test_invert_needs_two_pitches(self) -> None:
        """Single notes cannot be inverted."""
        chord = Chord(pitches=[60], duration=384)
        assert chord.invert() is False
        assert chord.pitches == [60]

    def test_invert_can_break_ascending_order(self) -> None:
        """Wide voicings are no longer ascending after inversion."""
        chord = Chord(pitches=[60, 64, 79], duration=384)
        assert chord.is_ascending
        assert chord.invert() is True
        assert chord.pitches == [64, 79, 72]
        assert not chord.is_ascending

    def test_note_names(self) -> None:
        """Pitches are named in scientific pitch notation."""
        assert Chord().note_names() == ["C4", "E4", "G4"]
        assert Chord(pitches=[61], duration=384).note_names(prefer_flats=True) == ["Db4"]


class TestChordEquality:
    """Tests for equals and ==."""

    def test_reflexive(self) -> None:
        """A chord equals itself."""
        chord = Chord()
        assert chord.equals(chord)

    def test_symmetric(self) -> None:
        """Equality is symmetric."""
        a = Chord(pitches=[60, 64], duration=384, fermata=True)
        b = Chord(pitches=[60, 64], duration=384, fermata=True)
        assert a.equals(b) and b.equals(a)
        assert a == b

    def test_order_sensitive(self) -> None:
        """Same pitches in another order are not equal."""
        a = Chord(pitches=[60, 64], duration=384)
        b = Chord(pitches=[64, 60], duration=384)
        assert not a.equals(b)
        assert not b.equals(a)

    def test_length_sensitive(self) -> None:
        """Different pitch counts are not equal."""
        assert not Chord(pitches=[60], duration=384).equals(Chord(pitches=[60, 64], duration=384))

    @pytest.mark.parametrize(
        "flag",
        ["triplet", "dotted", "double_dotted", "staccato", "tenuto", "accent", "fermata", "tied", "slurred"],
    )
    def test_flag_sensitive(self, flag: str) -> None:
        """Every flag takes part in equality."""
        a = Chord(pitches=[60], duration=384)
        b = Chord(pitches=[60], duration=384, **{flag: True})
        assert not a.equals(b)

    def test_duration_sensitive(self) -> None:
        """Different tick durations are not equal."""
        assert not Chord(pitches=[60], duration=384).equals(Chord(pitches=[60], duration=192))

    def test_table_ignored(self) -> None:
        """The injected table does not affect equality."""
        a = Chord(pitches=[60], duration=384)
        b = Chord(pitches=[60], duration=384, durations=DurationTable(ticks_per_quarter=768))
        assert a.equals(b)

    def test_not_equal_to_other_types(self) -> None:
        """Chords never equal other objects."""
        assert not Chord().equals("C major")
        assert Chord() != "C major"


class TestChordScenario:
    """End-to-end chord editing."""

    def test_dot_invert_compare(self) -> None:
        """Default chord, dotted and inverted, matches a fresh chord in that state."""
        chord = Chord()
        assert chord.dot() is True
        assert chord.invert() is True

        expected = Chord(pitches=[64, 67, 72], duration=576, dotted=True)
        assert chord.equals(expected)
        assert expected.equals(chord)

    def test_str(self) -> None:
        """Readable description."""
        chord = Chord(pitches=[60, 64, 67], duration=576, dotted=True, staccato=True)
        assert str(chord) == "C4 E4 G4 (dotted quarter, staccato)"
