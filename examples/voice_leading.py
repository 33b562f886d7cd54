#!/usr/bin/env python3
"""
Example: Reshape a chord with duration and pitch modifiers.

Walks a C major triad through its inversions, dots it, and shows which
modifiers are refused at the edges of the pitch and duration ranges.

Usage:
    python examples/voice_leading.py
"""

from chuk_mcp_chords.core import Chord, Rest


def main() -> None:
    """Print each step of a small chord-editing session."""
    chord = Chord()
    print(f"Start:            {chord}")

    # Inversions: root position -> first -> second
    for label in ("First inversion", "Second inversion"):
        chord.invert()
        print(f"{label + ':':<18}{chord}")

    # Dot, then upgrade to a double dot
    chord.dot()
    print(f"Dotted:           {chord}")
    chord.dot()
    print(f"Double dotted:    {chord}")
    print(f"Third dot applied? {chord.dot()}")

    # Climb until the octave ceiling refuses
    octaves = 0
    while chord.add_octave():
        octaves += 1
    print(f"Raised {octaves} octave(s): {chord}")

    # Same pitches in another order are a different chord
    a = Chord(pitches=[60, 64], duration=384)
    b = Chord(pitches=[64, 60], duration=384)
    print(f"\n[60, 64] equals [64, 60]? {a.equals(b)}")

    # Rests share the duration modifiers
    rest = Rest(note_value="eighth")
    rest.put_in_triplet()
    print(f"Rest:             {rest}")


if __name__ == "__main__":
    main()
