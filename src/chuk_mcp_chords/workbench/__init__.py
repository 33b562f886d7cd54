"""
Event workbench - named events held in memory.

This module provides:
- EventManager: Lifecycle management for named chords and rests
- EventSummary: Listing metadata
"""

from chuk_mcp_chords.workbench.manager import EventManager, EventSummary

__all__ = [
    "EventManager",
    "EventSummary",
]
