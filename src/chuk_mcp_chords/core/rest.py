"""
Rest event - a timed silence.

Rests take the same duration modifiers as chords but have no pitches.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from chuk_mcp_chords.core.timed import TimedEvent


class Rest(TimedEvent):
    """A silence with a duration and an optional fermata."""

    kind: Literal["rest"] = "rest"
    fermata: bool = Field(False, description="Held beyond its value")

    def equals(self, other: object) -> bool:
        """Check whether another rest has the same duration state and fermata."""
        if not isinstance(other, Rest):
            return False
        return self._same_timing(other) and self.fermata == other.fermata

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rest):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        details = self.describe_duration()
        if self.fermata:
            details += ", fermata"
        return f"rest ({details})"
