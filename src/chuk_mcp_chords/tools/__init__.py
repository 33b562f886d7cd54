"""
MCP tool implementations.

Tools are organized by domain:
- events - Event lifecycle (create, get, list, delete, duplicate)
- modifiers - Duration and pitch modifiers, comparison
"""

from chuk_mcp_chords.tools.events import register_event_tools
from chuk_mcp_chords.tools.modifiers import register_modifier_tools

__all__ = [
    "register_event_tools",
    "register_modifier_tools",
]
