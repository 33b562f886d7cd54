"""
Event family - the tagged union over event kinds.

Every event carries a `kind` tag. Capabilities are looked up per kind
rather than inherited, so applying a pitch modifier to a rest is a
caller error, while an inapplicable modifier on a supported kind is an
ordinary False result.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, TypeAdapter

from chuk_mcp_chords.constants import ErrorMessages, EventKind, EventOperation
from chuk_mcp_chords.core.chord import Chord
from chuk_mcp_chords.core.rest import Rest

Event = Annotated[Chord | Rest, Field(discriminator="kind")]

_event_adapter: TypeAdapter[Chord | Rest] = TypeAdapter(Event)

_DURATION_OPERATIONS = frozenset(
    {EventOperation.DOT, EventOperation.DOUBLE_DOT, EventOperation.PUT_IN_TRIPLET}
)
_PITCH_OPERATIONS = frozenset(
    {EventOperation.ADD_OCTAVE, EventOperation.DROP_OCTAVE, EventOperation.INVERT}
)

SUPPORTED_OPERATIONS: dict[EventKind, frozenset[EventOperation]] = {
    EventKind.CHORD: _DURATION_OPERATIONS | _PITCH_OPERATIONS,
    EventKind.REST: _DURATION_OPERATIONS,
}


class UnsupportedOperationError(ValueError):
    """Raised when an event kind does not support an operation."""


def parse_event(data: Any) -> Chord | Rest:
    """
    Validate a mapping into the matching event variant.

    Args:
        data: Mapping with a 'kind' tag ('chord' or 'rest')

    Returns:
        A Chord or Rest
    """
    return _event_adapter.validate_python(data)


def parse_operation(operation: str | EventOperation) -> EventOperation:
    """Parse an operation name like 'dot' or 'add-octave'."""
    if isinstance(operation, EventOperation):
        return operation
    try:
        return EventOperation(operation.strip().lower().replace("-", "_"))
    except ValueError:
        raise ValueError(ErrorMessages.UNKNOWN_OPERATION.format(operation=operation)) from None


def supported_operations(event: Chord | Rest) -> frozenset[EventOperation]:
    """Get the operations an event's kind supports."""
    return SUPPORTED_OPERATIONS[EventKind(event.kind)]


def apply_operation(event: Chord | Rest, operation: str | EventOperation) -> bool:
    """
    Apply a guarded modifier to an event in place.

    Args:
        event: The event to modify
        operation: Operation to apply

    Returns:
        Whether the event was modified

    Raises:
        UnsupportedOperationError: if the event kind lacks the operation
    """
    op = parse_operation(operation)
    if op not in supported_operations(event):
        raise UnsupportedOperationError(
            ErrorMessages.UNSUPPORTED_OPERATION.format(operation=op.value, kind=event.kind)
        )
    modifier = getattr(event, op.value)
    return bool(modifier())
