"""
Event defaults - the shared constant tables every event is built from.

EventDefaults bundles the duration table and the default chord voicing.
DefaultsRegistry holds the process-wide copy: installed once, before any
event is constructed, and never replaced afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_chords.constants import C_MAJOR_CHORD, ErrorMessages
from chuk_mcp_chords.core.pitch import Pitch
from chuk_mcp_chords.core.rhythm import DurationTable, NoteValue


class DefaultsAlreadyInstalledError(RuntimeError):
    """Raised when different defaults are installed over existing ones."""


class EventDefaults(BaseModel):
    """
    Immutable configuration injected into event construction.
    """

    durations: DurationTable = Field(default_factory=DurationTable, description="Tick table")
    default_chord: tuple[Pitch, ...] = Field(
        C_MAJOR_CHORD, description="Pitches of a default-constructed chord"
    )
    default_note_value: NoteValue = Field(
        NoteValue.QUARTER, description="Note value of a default-constructed event"
    )

    model_config = {"frozen": True}

    @field_validator("default_note_value", mode="before")
    @classmethod
    def parse_note_value(cls, v: object) -> object:
        """Accept aliases like '8th' or '1/4'."""
        if isinstance(v, str):
            return NoteValue.parse(v)
        return v

    @property
    def default_duration(self) -> int:
        """Tick length of a default-constructed event."""
        return self.durations.ticks(self.default_note_value)


class DefaultsRegistry:
    """
    Process-wide holder for the active EventDefaults.

    The first call to get() or install() fixes the defaults for the
    lifetime of the registry.
    """

    def __init__(self) -> None:
        self._defaults: EventDefaults | None = None

    @property
    def installed(self) -> bool:
        return self._defaults is not None

    def get(self) -> EventDefaults:
        """Get the active defaults, installing the built-in ones if needed."""
        if self._defaults is None:
            self._defaults = EventDefaults()
        return self._defaults

    def install(self, defaults: EventDefaults) -> EventDefaults:
        """
        Install defaults.

        Installing defaults equal to the active ones is a no-op.

        Raises:
            DefaultsAlreadyInstalledError: if different defaults are active
        """
        if self._defaults is not None and self._defaults != defaults:
            raise DefaultsAlreadyInstalledError(ErrorMessages.DEFAULTS_ALREADY_INSTALLED)
        self._defaults = defaults
        return defaults


_registry = DefaultsRegistry()


def get_defaults() -> EventDefaults:
    """Get the process-wide event defaults."""
    return _registry.get()


def defaults_installed() -> bool:
    """Whether the process-wide defaults have been fixed."""
    return _registry.installed


def install_defaults(defaults: EventDefaults) -> EventDefaults:
    """Install the process-wide event defaults (once)."""
    return _registry.install(defaults)
