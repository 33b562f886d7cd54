"""
CHUK chord events - chords and rests with exact duration arithmetic.
"""

__version__ = "0.1.0"
