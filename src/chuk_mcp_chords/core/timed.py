"""
TimedEvent - the duration state shared by every event kind.

Holds the tick duration, its modifier flags and the injected duration
table. The dot/triplet arithmetic itself lives in RhythmicValue; this
class only applies its results in place.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from chuk_mcp_chords.core.defaults import get_defaults
from chuk_mcp_chords.core.rhythm import DurationTable, NoteValue, RhythmicValue


class TimedEvent(BaseModel):
    """
    Base for events that occupy a rhythmic duration.

    Missing durations and tables are filled from the installed defaults.
    """

    duration: int = Field(..., gt=0, description="Duration in ticks")
    triplet: bool = Field(False, description="Compressed to 2/3 length")
    dotted: bool = Field(False, description="At least one dot applied")
    double_dotted: bool = Field(False, description="Two dots applied")

    durations: DurationTable = Field(
        default_factory=DurationTable,
        exclude=True,
        repr=False,
        description="Duration table the modifiers are checked against",
    )

    @model_validator(mode="before")
    @classmethod
    def fill_timing_defaults(cls, data: Any) -> Any:
        """Inject the shared duration table and default duration."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        table = data.get("durations")
        if table is None:
            table = get_defaults().durations
        elif not isinstance(table, DurationTable):
            table = DurationTable.model_validate(table)
        data["durations"] = table

        note_value = data.pop("note_value", None)
        if "duration" not in data:
            if note_value is None:
                value = get_defaults().default_note_value
            elif isinstance(note_value, NoteValue):
                value = note_value
            else:
                value = NoteValue.parse(note_value)
            data["duration"] = table.ticks(value)
        return data

    @property
    def rhythm(self) -> RhythmicValue:
        """The current duration and its modifiers."""
        return RhythmicValue(self.duration, self.triplet, self.dotted, self.double_dotted)

    def _apply_rhythm(self, value: RhythmicValue | None) -> bool:
        if value is None:
            return False
        self.duration = value.ticks
        self.triplet = value.triplet
        self.dotted = value.dotted
        self.double_dotted = value.double_dotted
        return True

    def dot(self) -> bool:
        """
        Add a dot, or upgrade a single dot to a double dot.

        Returns:
            Whether the event was dotted
        """
        return self._apply_rhythm(self.rhythm.dot(self.durations))

    def double_dot(self) -> bool:
        """
        Add two dots to an undotted event (7/4 of its duration).

        Returns:
            Whether the event was double dotted
        """
        return self._apply_rhythm(self.rhythm.double_dot(self.durations))

    def put_in_triplet(self) -> bool:
        """
        Put the event in a triplet (2/3 of its duration).

        Returns:
            Whether the event was put in a triplet
        """
        return self._apply_rhythm(self.rhythm.put_in_triplet())

    def describe_duration(self) -> str:
        """Human-readable duration, e.g. 'dotted quarter'."""
        return self.rhythm.describe(self.durations)

    def _same_timing(self, other: TimedEvent) -> bool:
        return (
            self.duration == other.duration
            and self.triplet == other.triplet
            and self.dotted == other.dotted
            and self.double_dotted == other.double_dotted
        )
