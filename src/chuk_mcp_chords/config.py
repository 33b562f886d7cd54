"""
Defaults loader - reads EventDefaults from YAML.

A defaults file looks like:

    durations:
      ticks_per_quarter: 384
    default_chord: [60, 64, 67]
    default_note_value: quarter

Every key is optional; missing keys keep the built-in values.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from chuk_mcp_chords.core.defaults import EventDefaults, install_defaults
from chuk_mcp_chords.core.pitch import parse_note

logger = logging.getLogger(__name__)

DEFAULTS_FILENAME = "chords.defaults.yaml"


def defaults_from_dict(data: dict) -> EventDefaults:
    """
    Build EventDefaults from a parsed YAML mapping.

    The default chord may use note names ('C4') as well as MIDI numbers.
    """
    data = dict(data)
    chord = data.get("default_chord")
    if chord is not None:
        data["default_chord"] = [
            parse_note(note) if isinstance(note, str) else note for note in chord
        ]
    return EventDefaults.model_validate(data)


def load_defaults(path: Path) -> EventDefaults:
    """
    Load event defaults from a YAML file.

    Args:
        path: Path to the defaults file

    Returns:
        The validated EventDefaults

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if the file is not a mapping or fails validation
    """
    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Defaults file must contain a mapping: {path}")

    defaults = defaults_from_dict(data)
    logger.debug(f"Loaded event defaults from {path}")
    return defaults


def configure_defaults(base_path: Path) -> EventDefaults | None:
    """
    Install defaults from base_path/chords.defaults.yaml if the file exists.

    Must run before any event is constructed.

    Returns:
        The installed defaults, or None if there was no file
    """
    path = base_path / DEFAULTS_FILENAME
    if not path.exists():
        return None

    defaults = install_defaults(load_defaults(path))
    logger.info(f"Installed event defaults from {path}")
    return defaults
