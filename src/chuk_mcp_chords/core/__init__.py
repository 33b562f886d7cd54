"""
Core event primitives.

- PitchClass: The 12 chromatic pitch classes, for naming notes
- NoteValue: Canonical note values (whole to 128th)
- DurationTable: Tick lengths of the canonical note values
- RhythmicValue: A duration with its dot/triplet state
- EventDefaults: Shared tables injected into event construction
- Chord: Simultaneous pitches with one duration
- Rest: A timed silence
- Event: Tagged union over Chord and Rest
"""

from chuk_mcp_chords.core.chord import Chord
from chuk_mcp_chords.core.defaults import (
    DefaultsAlreadyInstalledError,
    DefaultsRegistry,
    EventDefaults,
    defaults_installed,
    get_defaults,
    install_defaults,
)
from chuk_mcp_chords.core.event import (
    SUPPORTED_OPERATIONS,
    Event,
    UnsupportedOperationError,
    apply_operation,
    parse_event,
    parse_operation,
    supported_operations,
)
from chuk_mcp_chords.core.pitch import Pitch, PitchClass, note_name, parse_note
from chuk_mcp_chords.core.rest import Rest
from chuk_mcp_chords.core.rhythm import DurationTable, NoteValue, RhythmicValue
from chuk_mcp_chords.core.timed import TimedEvent

__all__ = [
    # Pitch
    "Pitch",
    "PitchClass",
    "note_name",
    "parse_note",
    # Rhythm
    "NoteValue",
    "DurationTable",
    "RhythmicValue",
    # Defaults
    "EventDefaults",
    "DefaultsRegistry",
    "DefaultsAlreadyInstalledError",
    "get_defaults",
    "install_defaults",
    "defaults_installed",
    # Events
    "TimedEvent",
    "Chord",
    "Rest",
    "Event",
    "SUPPORTED_OPERATIONS",
    "UnsupportedOperationError",
    "apply_operation",
    "parse_event",
    "parse_operation",
    "supported_operations",
]
