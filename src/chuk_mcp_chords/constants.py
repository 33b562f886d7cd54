"""
Constants and enums for the chord event system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal

# MIDI note-number domain
PITCH_MIN = 0
PITCH_MAX = 127

# Octave shifts are refused when they would pass this note number
TRANSPOSE_CEILING = 126

OCTAVE = 12

# Default voicing: C major triad from middle C
C_MAJOR_CHORD: tuple[int, ...] = (60, 64, 67)

# Ticks per quarter note in the built-in duration table
DEFAULT_TICKS_PER_QUARTER = 384


class EventKind(str, Enum):
    """Variant tags for the event family."""

    CHORD = "chord"
    REST = "rest"


class EventOperation(str, Enum):
    """
    Guarded in-place modifiers.

    Values match the method names on the event models.
    """

    DOT = "dot"
    DOUBLE_DOT = "double_dot"
    PUT_IN_TRIPLET = "put_in_triplet"
    ADD_OCTAVE = "add_octave"
    DROP_OCTAVE = "drop_octave"
    INVERT = "invert"


# Annotation flags carried by a chord
ChordAnnotation = Literal["staccato", "tenuto", "accent", "fermata", "tied", "slurred"]


class ErrorMessages:
    """Standardized error messages."""

    EVENT_NOT_FOUND = "Event '{name}' not found."
    EVENT_EXISTS = "Event '{name}' already exists."
    UNSUPPORTED_OPERATION = "Operation '{operation}' is not supported by a {kind}."
    UNKNOWN_OPERATION = "Unknown operation: '{operation}'."
    UNKNOWN_NOTE_VALUE = "Unknown note value: '{value}'."
    DEFAULTS_ALREADY_INSTALLED = "Event defaults are already installed and cannot be replaced."


class SuccessMessages:
    """Standardized success messages."""

    EVENT_CREATED = "Created {kind} '{name}'."
    EVENT_DELETED = "Event '{name}' deleted."
    EVENT_DUPLICATED = "Created duplicate: {new_name}"
    OPERATION_APPLIED = "Applied '{operation}' to '{name}'."
    OPERATION_REJECTED = "'{operation}' is not applicable to '{name}' in its current state."
