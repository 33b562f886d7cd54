#!/usr/bin/env python3
"""
Async Chord MCP Server using chuk-mcp-server

This server provides MCP tools for building and reshaping chord events:
- Creating chords and rests from note names or MIDI numbers
- Dotting, double dotting and putting events in triplets
- Octave shifts and inversions
- Structural comparison of events

Event defaults (tick resolution, default chord) are read from
chords.defaults.yaml in the working directory when present.
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chords.config import configure_defaults
from chuk_mcp_chords.core import defaults_installed, get_defaults
from chuk_mcp_chords.tools import register_event_tools, register_modifier_tools
from chuk_mcp_chords.workbench import EventManager

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-chords")

# Paths - use standard project structure
BASE_PATH = Path.cwd()

# Defaults must be installed before any event exists
if not defaults_installed():
    configure_defaults(BASE_PATH)
defaults = get_defaults()

# Create managers
event_manager = EventManager(defaults)

# Register all tools
event_tools = register_event_tools(mcp, event_manager)
modifier_tools = register_modifier_tools(mcp, event_manager)

# Export tool functions for direct access
chord_create = event_tools["chord_create"]
rest_create = event_tools["rest_create"]
event_get = event_tools["event_get"]
event_list = event_tools["event_list"]
event_delete = event_tools["event_delete"]
event_duplicate = event_tools["event_duplicate"]

event_modify = modifier_tools["event_modify"]
event_compare = modifier_tools["event_compare"]

logger.info("CHUK Chord MCP Server initialized")
logger.info(f"  Ticks per quarter: {defaults.durations.ticks_per_quarter}")
logger.info(f"  Default chord: {list(defaults.default_chord)}")
