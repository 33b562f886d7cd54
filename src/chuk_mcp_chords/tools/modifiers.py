"""
Modifier tools - MCP tools that change or compare events.

A modifier that cannot be applied is not an error: the tool succeeds
with "applied": false and the event is unchanged.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.constants import SuccessMessages
from chuk_mcp_chords.tools.events import event_to_dict
from chuk_mcp_chords.workbench import EventManager

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_modifier_tools(
    mcp: ChukMCPServer,
    manager: EventManager,
) -> dict[str, Any]:
    """
    Register modifier and comparison tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The event manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def event_modify(name: str, operation: str) -> str:
        """
        Apply a modifier to an event.

        Duration modifiers (chords and rests):
        - dot: add a dot (x1.5), or turn a dotted value into double dotted
        - double_dot: add two dots at once (x1.75)
        - put_in_triplet: compress to 2/3 length

        Pitch modifiers (chords only):
        - add_octave: move every note up 12 semitones
        - drop_octave: move every note down 12 semitones
        - invert: move the bass note up an octave to the top

        Args:
            name: Event name
            operation: One of the operations above

        Returns:
            JSON string with whether the modifier applied and the event state

        Example:
            event_modify(name="tonic", operation="invert")
        """
        try:
            applied = await manager.apply(name, operation)
            event = await manager.get(name)

            message = SuccessMessages.OPERATION_APPLIED if applied else SuccessMessages.OPERATION_REJECTED
            return json.dumps(
                {
                    "status": "success",
                    "applied": applied,
                    "message": message.format(operation=operation, name=name),
                    "event": event_to_dict(event) if event is not None else None,
                }
            )
        except Exception as e:
            logger.exception("Failed to modify event")
            return json.dumps({"status": "error", "message": str(e)})

    tools["event_modify"] = event_modify

    @mcp.tool  # type: ignore[arg-type]
    async def event_compare(name: str, other: str) -> str:
        """
        Compare two events.

        Chords are equal only when their pitches match in the same order
        and every duration and annotation flag matches.

        Args:
            name: First event name
            other: Second event name

        Returns:
            JSON string with the comparison result

        Example:
            event_compare(name="tonic", other="tonic-copy")
        """
        try:
            equal = await manager.compare(name, other)

            return json.dumps({"status": "success", "equal": equal})
        except Exception as e:
            logger.exception("Failed to compare events")
            return json.dumps({"status": "error", "message": str(e)})

    tools["event_compare"] = event_compare

    return tools
