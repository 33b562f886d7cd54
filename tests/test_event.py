"""
Tests for the event family.

Tests cover:
- Rest events
- Tagged union parsing
- Capability lookup and dispatch
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_chords.constants import EventKind, EventOperation
from chuk_mcp_chords.core import (
    SUPPORTED_OPERATIONS,
    Chord,
    Rest,
    UnsupportedOperationError,
    apply_operation,
    parse_event,
    parse_operation,
    supported_operations,
)


class TestRest:
    """Tests for Rest events."""

    def test_default_rest(self) -> None:
        """Default rest is a quarter."""
        rest = Rest()
        assert rest.kind == "rest"
        assert rest.duration == 384
        assert not rest.fermata

    def test_rest_duration_modifiers(self) -> None:
        """Rests take dots and triplets like chords."""
        rest = Rest(note_value="half")
        assert rest.dot() is True
        assert rest.duration == 1152
        assert rest.dot() is True
        assert rest.duration == 1344
        assert rest.dot() is False

        triplet = Rest(note_value="eighth")
        assert triplet.put_in_triplet() is True
        assert triplet.duration == 128
        assert triplet.put_in_triplet() is False

    def test_rest_equality(self) -> None:
        """Rests compare duration state and fermata."""
        assert Rest(duration=384).equals(Rest(duration=384))
        assert not Rest(duration=384).equals(Rest(duration=384, fermata=True))
        assert not Rest(duration=384).equals(Rest(duration=384, dotted=True))

    def test_rest_never_equals_chord(self) -> None:
        """Different kinds are never equal."""
        rest = Rest(duration=384)
        chord = Chord(pitches=[], duration=384)
        assert not rest.equals(chord)
        assert not chord.equals(rest)

    def test_str(self) -> None:
        """Readable description."""
        assert str(Rest(duration=576, dotted=True, fermata=True)) == "rest (dotted quarter, fermata)"


class TestParseEvent:
    """Tests for the tagged union."""

    def test_parse_chord(self) -> None:
        """A chord mapping becomes a Chord."""
        event = parse_event({"kind": "chord", "pitches": [60, 64], "duration": 192})
        assert isinstance(event, Chord)
        assert event.pitches == [60, 64]
        assert event.duration == 192

    def test_parse_rest(self) -> None:
        """A rest mapping becomes a Rest."""
        event = parse_event({"kind": "rest", "note_value": "whole"})
        assert isinstance(event, Rest)
        assert event.duration == 1536

    def test_parse_defaults(self) -> None:
        """Missing fields come from the defaults."""
        event = parse_event({"kind": "chord"})
        assert isinstance(event, Chord)
        assert event.equals(Chord())

    def test_round_trip(self) -> None:
        """Dumped events parse back into equal events."""
        chord = Chord(pitches=[62, 65, 69], duration=256, triplet=True, accent=True)
        assert parse_event(chord.model_dump()).equals(chord)

    def test_unknown_kind(self) -> None:
        """Unknown kinds are rejected."""
        with pytest.raises(ValidationError):
            parse_event({"kind": "glissando", "duration": 384})


class TestCapabilities:
    """Tests for capability lookup and dispatch."""

    def test_supported_operations(self) -> None:
        """Chords support everything, rests only duration modifiers."""
        assert supported_operations(Chord()) == frozenset(EventOperation)
        assert supported_operations(Rest()) == SUPPORTED_OPERATIONS[EventKind.REST]
        assert EventOperation.INVERT not in supported_operations(Rest())

    def test_parse_operation(self) -> None:
        """Operation names are normalized."""
        assert parse_operation("dot") == EventOperation.DOT
        assert parse_operation("add-octave") == EventOperation.ADD_OCTAVE
        assert parse_operation(" Put_In_Triplet ") == EventOperation.PUT_IN_TRIPLET
        with pytest.raises(ValueError):
            parse_operation("retrograde")

    def test_apply_to_chord(self) -> None:
        """Dispatch reaches the chord's modifiers."""
        chord = Chord()
        assert apply_operation(chord, "invert") is True
        assert chord.pitches == [64, 67, 72]
        assert apply_operation(chord, EventOperation.DOUBLE_DOT) is True
        assert chord.duration == 672

    def test_apply_rejection_is_false(self) -> None:
        """An inapplicable modifier is a False result, not an error."""
        chord = Chord(pitches=[120, 124], duration=384)
        assert apply_operation(chord, "invert") is False

    def test_apply_unsupported(self) -> None:
        """Pitch modifiers on a rest are caller errors."""
        rest = Rest()
        with pytest.raises(UnsupportedOperationError):
            apply_operation(rest, "add_octave")
        assert rest.equals(Rest())
