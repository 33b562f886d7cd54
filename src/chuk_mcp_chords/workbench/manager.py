"""
Event Manager - handles the lifecycle of named events.

Provides async operations for creating, modifying, comparing and listing
chords and rests. Events live in memory for the life of the manager.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chuk_mcp_chords.constants import ErrorMessages, EventOperation
from chuk_mcp_chords.core import (
    Chord,
    EventDefaults,
    NoteValue,
    Rest,
    apply_operation,
    get_defaults,
    parse_note,
    parse_operation,
)

logger = logging.getLogger(__name__)


class EventSummary:
    """Lightweight metadata for listing events."""

    def __init__(self, name: str, kind: str, duration: int, description: str):
        self.name = name
        self.kind = kind
        self.duration = duration
        self.description = description

    def __repr__(self) -> str:
        return f"EventSummary({self.name!r}, {self.kind}, {self.duration} ticks)"


class EventManager:
    """
    Manages named chord and rest events.

    Every event is built from the same EventDefaults, so all of them share
    one duration table.
    """

    def __init__(self, defaults: EventDefaults | None = None):
        """
        Initialize the manager.

        Args:
            defaults: Shared tables for new events (installed defaults if None)
        """
        self.defaults = defaults or get_defaults()
        self._events: dict[str, Chord | Rest] = {}

    def _claim(self, name: str) -> None:
        if not name:
            raise ValueError("Event name must not be empty")
        if name in self._events:
            raise ValueError(ErrorMessages.EVENT_EXISTS.format(name=name))

    def _require(self, name: str) -> Chord | Rest:
        event = self._events.get(name)
        if event is None:
            raise KeyError(ErrorMessages.EVENT_NOT_FOUND.format(name=name))
        return event

    def _duration(self, note_value: str | None, duration: int | None) -> int:
        if duration is not None:
            return duration
        if note_value is not None:
            return self.defaults.durations.ticks(NoteValue.parse(note_value))
        return self.defaults.default_duration

    async def create_chord(
        self,
        name: str,
        pitches: Sequence[int | str] | None = None,
        note_value: str | None = None,
        duration: int | None = None,
        **flags: bool,
    ) -> Chord:
        """
        Create a new chord.

        Args:
            name: Unique event name
            pitches: MIDI numbers or note names (default chord if None)
            note_value: Note value name like 'quarter' or '8th'
            duration: Explicit tick duration (overrides note_value)
            **flags: Modifier and annotation flags (dotted, staccato, ...)

        Returns:
            The created Chord
        """
        self._claim(name)
        if pitches is None:
            resolved = list(self.defaults.default_chord)
        else:
            resolved = [parse_note(p) if isinstance(p, str) else p for p in pitches]

        chord = Chord(
            pitches=resolved,
            duration=self._duration(note_value, duration),
            durations=self.defaults.durations,
            **flags,
        )
        self._events[name] = chord
        logger.debug(f"Created chord {name!r}: {chord}")
        return chord

    async def create_rest(
        self,
        name: str,
        note_value: str | None = None,
        duration: int | None = None,
        **flags: bool,
    ) -> Rest:
        """
        Create a new rest.

        Args:
            name: Unique event name
            note_value: Note value name like 'half'
            duration: Explicit tick duration (overrides note_value)
            **flags: Modifier flags and fermata

        Returns:
            The created Rest
        """
        self._claim(name)
        rest = Rest(
            duration=self._duration(note_value, duration),
            durations=self.defaults.durations,
            **flags,
        )
        self._events[name] = rest
        logger.debug(f"Created rest {name!r}: {rest}")
        return rest

    async def get(self, name: str) -> Chord | Rest | None:
        """
        Get an event by name.

        Returns:
            The event or None if not found
        """
        return self._events.get(name)

    async def list_events(self) -> list[EventSummary]:
        """
        List all events, in creation order.

        Returns:
            List of event summaries
        """
        return [
            EventSummary(name=name, kind=event.kind, duration=event.duration, description=str(event))
            for name, event in self._events.items()
        ]

    async def delete(self, name: str) -> bool:
        """
        Delete an event.

        Returns:
            True if the event existed
        """
        return self._events.pop(name, None) is not None

    async def duplicate(self, name: str, new_name: str) -> Chord | Rest:
        """
        Copy an event under a new name.

        Raises:
            KeyError: if the original does not exist
            ValueError: if new_name is taken
        """
        original = self._require(name)
        self._claim(new_name)
        copy = original.model_copy(deep=True)
        self._events[new_name] = copy
        return copy

    async def apply(self, name: str, operation: str | EventOperation) -> bool:
        """
        Apply a modifier to an event in place.

        Args:
            name: Event name
            operation: Operation name (dot, double_dot, put_in_triplet,
                add_octave, drop_octave, invert)

        Returns:
            Whether the event was modified

        Raises:
            KeyError: if the event does not exist
            UnsupportedOperationError: if the event kind lacks the operation
        """
        event = self._require(name)
        op = parse_operation(operation)
        applied = apply_operation(event, op)
        if applied:
            logger.debug(f"Applied {op.value} to {name!r}: {event}")
        else:
            logger.debug(f"Rejected {op.value} on {name!r}: {event}")
        return applied

    async def compare(self, name: str, other: str) -> bool:
        """
        Check whether two events are structurally equal.

        Raises:
            KeyError: if either event does not exist
        """
        return self._require(name).equals(self._require(other))
