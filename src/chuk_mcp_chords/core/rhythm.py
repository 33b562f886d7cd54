"""
Rhythm primitives - NoteValue, DurationTable, RhythmicValue.

Durations are integer ticks. The DurationTable maps canonical note values
(whole down to 128th) onto ticks, and RhythmicValue carries the dot/triplet
state of a duration. Uses Fraction so every rescale is exact.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from fractions import Fraction

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_chords.constants import DEFAULT_TICKS_PER_QUARTER, ErrorMessages

DOT = Fraction(3, 2)
DOUBLE_DOT = Fraction(7, 4)
# Second dot applied on top of a single dot: 3/2 * 7/6 == 7/4
SECOND_DOT = Fraction(7, 6)
TRIPLET = Fraction(2, 3)

# 32 128ths per quarter, each divisible by 2 (dot) and 3 (triplet)
RESOLUTION_STEP = 192


class NoteValue(str, Enum):
    """Canonical note values, longest to shortest."""

    WHOLE = "whole"
    HALF = "half"
    QUARTER = "quarter"
    EIGHTH = "eighth"
    SIXTEENTH = "sixteenth"
    THIRTY_SECOND = "thirty_second"
    SIXTY_FOURTH = "sixty_fourth"
    ONE_TWENTY_EIGHTH = "one_twenty_eighth"

    @property
    def divisor(self) -> int:
        """How many of this value fit in a whole note."""
        return 2 ** list(NoteValue).index(self)

    @classmethod
    def parse(cls, value: str) -> NoteValue:
        """Parse a note value from a name like 'quarter', '8th' or '1/16'."""
        key = value.strip().lower().replace("-", "_").replace(" ", "_")

        # Numeric forms: '8', '8th', '1/8', '32nd'
        number = key.removeprefix("1/")
        for suffix in ("th", "nd", "st"):
            if number.endswith(suffix) and number[: -len(suffix)].isdigit():
                number = number[: -len(suffix)]
        if number.isdigit():
            for member in cls:
                if member.divisor == int(number):
                    return member

        try:
            return cls(key)
        except ValueError:
            raise ValueError(ErrorMessages.UNKNOWN_NOTE_VALUE.format(value=value)) from None


class DurationTable(BaseModel):
    """
    The canonical duration-constant table.

    Every note value is a whole number of ticks and each is exactly half of
    the one before it. The 128th note must also divide by 6 so that every
    dot and triplet combination stays a whole number of ticks, which means
    ticks_per_quarter must be a multiple of RESOLUTION_STEP.

    Immutable - shared by every event built from the same defaults.
    """

    ticks_per_quarter: int = Field(
        DEFAULT_TICKS_PER_QUARTER, gt=0, description="Ticks in one quarter note"
    )

    model_config = {"frozen": True}

    @field_validator("ticks_per_quarter")
    @classmethod
    def validate_resolution(cls, v: int) -> int:
        """Ensure every dotted and triplet duration is a whole number of ticks."""
        if v % RESOLUTION_STEP != 0:
            raise ValueError(
                f"ticks_per_quarter must be a multiple of {RESOLUTION_STEP}, got {v}"
            )
        return v

    def ticks(self, value: NoteValue) -> int:
        """Get the tick length of a note value."""
        return self.ticks_per_quarter * 4 // value.divisor

    @property
    def whole(self) -> int:
        return self.ticks(NoteValue.WHOLE)

    @property
    def half(self) -> int:
        return self.ticks(NoteValue.HALF)

    @property
    def quarter(self) -> int:
        return self.ticks(NoteValue.QUARTER)

    @property
    def eighth(self) -> int:
        return self.ticks(NoteValue.EIGHTH)

    @property
    def sixteenth(self) -> int:
        return self.ticks(NoteValue.SIXTEENTH)

    @property
    def thirty_second(self) -> int:
        return self.ticks(NoteValue.THIRTY_SECOND)

    @property
    def sixty_fourth(self) -> int:
        return self.ticks(NoteValue.SIXTY_FOURTH)

    @property
    def one_twenty_eighth(self) -> int:
        return self.ticks(NoteValue.ONE_TWENTY_EIGHTH)

    @property
    def shortest(self) -> int:
        """The shortest representable duration (a 128th note)."""
        return self.one_twenty_eighth

    @property
    def dotted_sixty_fourth(self) -> int:
        """The shortest representable dotted duration."""
        return int(self.sixty_fourth * DOT)

    def note_value_for(self, ticks: int | Fraction) -> NoteValue | None:
        """Find the note value with exactly this many ticks, if any."""
        for value in NoteValue:
            if self.ticks(value) == ticks:
                return value
        return None


def _scale(ticks: int, factor: Fraction) -> int | None:
    """Scale ticks exactly, or None if the result is not a whole tick."""
    scaled = ticks * factor
    if scaled.denominator != 1:
        return None
    return int(scaled)


@dataclass(frozen=True)
class RhythmicValue:
    """
    A tick duration together with the modifiers applied to it.

    Transitions return a new value, or None when the modifier cannot be
    applied in the current state. Immutable and hashable.
    """

    ticks: int
    triplet: bool = False
    dotted: bool = False
    double_dotted: bool = False

    def __post_init__(self) -> None:
        if self.ticks <= 0:
            raise ValueError(f"Duration must be positive, got {self.ticks}")

    @property
    def scalar(self) -> Fraction:
        """Cumulative factor applied to the written note value."""
        factor = Fraction(1)
        if self.double_dotted:
            factor *= DOUBLE_DOT
        elif self.dotted:
            factor *= DOT
        if self.triplet:
            factor *= TRIPLET
        return factor

    @property
    def base_ticks(self) -> Fraction:
        """The undotted, non-triplet duration this value was derived from."""
        return self.ticks / self.scalar

    def dot(self, table: DurationTable) -> RhythmicValue | None:
        """
        Add one dot.

        An undotted value grows by half. A dotted value becomes double
        dotted (x7/6, so 7/4 of the undotted base overall). A double dotted
        value cannot take another dot.
        """
        if not self.dotted:
            if self.ticks == table.shortest:
                return None
            ticks = _scale(self.ticks, DOT)
            if ticks is None:
                return None
            return replace(self, ticks=ticks, dotted=True)

        if not self.double_dotted:
            if self.ticks == table.dotted_sixty_fourth:
                return None
            ticks = _scale(self.ticks, SECOND_DOT)
            if ticks is None:
                return None
            return replace(self, ticks=ticks, double_dotted=True)

        return None

    def double_dot(self, table: DurationTable) -> RhythmicValue | None:
        """Add two dots at once (x7/4) to an undotted value."""
        if self.dotted:
            return None
        if self.ticks in (table.one_twenty_eighth, table.sixty_fourth):
            return None
        ticks = _scale(self.ticks, DOUBLE_DOT)
        if ticks is None:
            return None
        return replace(self, ticks=ticks, dotted=True, double_dotted=True)

    def put_in_triplet(self) -> RhythmicValue | None:
        """Compress to 2/3 length, once."""
        if self.triplet:
            return None
        ticks = _scale(self.ticks, TRIPLET)
        if ticks is None:
            return None
        return replace(self, ticks=ticks, triplet=True)

    def describe(self, table: DurationTable) -> str:
        """
        Human-readable name, e.g. 'dotted quarter' or 'eighth triplet'.

        Falls back to a tick count when the base is not a canonical value.
        """
        value = self.table_value(table)
        if value is None:
            return f"{self.ticks} ticks"

        name = value.value.replace("_", " ")
        if self.double_dotted:
            name = f"double dotted {name}"
        elif self.dotted:
            name = f"dotted {name}"
        if self.triplet:
            name = f"{name} triplet"
        return name

    def table_value(self, table: DurationTable) -> NoteValue | None:
        """The canonical note value underneath the modifiers, if any."""
        return table.note_value_for(self.base_ticks)

    def __str__(self) -> str:
        return self.describe(DurationTable())
