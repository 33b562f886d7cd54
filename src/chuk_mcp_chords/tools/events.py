"""
Event tools - MCP tools for event lifecycle.

Tools for creating, inspecting, listing and copying chords and rests.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.constants import ErrorMessages, SuccessMessages
from chuk_mcp_chords.core import Chord, Rest, supported_operations
from chuk_mcp_chords.workbench import EventManager

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def event_to_dict(event: Chord | Rest) -> dict[str, Any]:
    """Build the JSON payload for an event."""
    data = event.model_dump(mode="json")
    data["description"] = str(event)
    data["duration_name"] = event.describe_duration()
    data["operations"] = sorted(op.value for op in supported_operations(event))
    if isinstance(event, Chord):
        data["notes"] = event.note_names()
        data["ascending"] = event.is_ascending
    return data


def register_event_tools(
    mcp: ChukMCPServer,
    manager: EventManager,
) -> dict[str, Any]:
    """
    Register event lifecycle tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The event manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_create(
        name: str,
        pitches: list[int | str] | None = None,
        note_value: str = "quarter",
        duration: int | None = None,
        staccato: bool = False,
        tenuto: bool = False,
        accent: bool = False,
        fermata: bool = False,
        tied: bool = False,
        slurred: bool = False,
    ) -> str:
        """
        Create a new chord.

        Pitches are MIDI note numbers or note names, bass first. Without
        pitches the default chord (C major, C4-E4-G4) is used.

        Args:
            name: Unique name for the chord
            pitches: Notes like [60, 64, 67] or ['C4', 'E4', 'G4']
            note_value: Note value (whole, half, quarter, eighth, 16th, ... 128th)
            duration: Explicit duration in ticks (overrides note_value)
            staccato: Played short
            tenuto: Held for full value
            accent: Played with emphasis
            fermata: Held beyond its value
            tied: Tied to the next chord
            slurred: Slurred to the next chord

        Returns:
            JSON string with chord details

        Example:
            chord_create(name="tonic", pitches=["C4", "E4", "G4"], note_value="half")
        """
        try:
            chord = await manager.create_chord(
                name=name,
                pitches=pitches,
                note_value=note_value,
                duration=duration,
                staccato=staccato,
                tenuto=tenuto,
                accent=accent,
                fermata=fermata,
                tied=tied,
                slurred=slurred,
            )

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.EVENT_CREATED.format(kind="chord", name=name),
                    "event": event_to_dict(chord),
                }
            )
        except Exception as e:
            logger.exception("Failed to create chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_create"] = chord_create

    @mcp.tool  # type: ignore[arg-type]
    async def rest_create(
        name: str,
        note_value: str = "quarter",
        duration: int | None = None,
        fermata: bool = False,
    ) -> str:
        """
        Create a new rest.

        Args:
            name: Unique name for the rest
            note_value: Note value (whole, half, quarter, eighth, 16th, ... 128th)
            duration: Explicit duration in ticks (overrides note_value)
            fermata: Held beyond its value

        Returns:
            JSON string with rest details

        Example:
            rest_create(name="breath", note_value="eighth")
        """
        try:
            rest = await manager.create_rest(
                name=name,
                note_value=note_value,
                duration=duration,
                fermata=fermata,
            )

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.EVENT_CREATED.format(kind="rest", name=name),
                    "event": event_to_dict(rest),
                }
            )
        except Exception as e:
            logger.exception("Failed to create rest")
            return json.dumps({"status": "error", "message": str(e)})

    tools["rest_create"] = rest_create

    @mcp.tool  # type: ignore[arg-type]
    async def event_get(name: str) -> str:
        """
        Get event details.

        Args:
            name: Event name

        Returns:
            JSON string with event details

        Example:
            event_get(name="tonic")
        """
        try:
            event = await manager.get(name)
            if event is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.EVENT_NOT_FOUND.format(name=name)}
                )

            return json.dumps({"status": "success", "event": event_to_dict(event)})
        except Exception as e:
            logger.exception("Failed to get event")
            return json.dumps({"status": "error", "message": str(e)})

    tools["event_get"] = event_get

    @mcp.tool  # type: ignore[arg-type]
    async def event_list() -> str:
        """
        List all events.

        Returns:
            JSON string with list of event summaries

        Example:
            event_list()
        """
        try:
            summaries = await manager.list_events()

            return json.dumps(
                {
                    "status": "success",
                    "events": [
                        {
                            "name": summary.name,
                            "kind": summary.kind,
                            "duration": summary.duration,
                            "description": summary.description,
                        }
                        for summary in summaries
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to list events")
            return json.dumps({"status": "error", "message": str(e)})

    tools["event_list"] = event_list

    @mcp.tool  # type: ignore[arg-type]
    async def event_delete(name: str) -> str:
        """
        Delete an event.

        Args:
            name: Event name

        Returns:
            JSON string with delete result

        Example:
            event_delete(name="tonic")
        """
        try:
            deleted = await manager.delete(name)

            if deleted:
                return json.dumps(
                    {
                        "status": "success",
                        "message": SuccessMessages.EVENT_DELETED.format(name=name),
                    }
                )
            else:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.EVENT_NOT_FOUND.format(name=name)}
                )
        except Exception as e:
            logger.exception("Failed to delete event")
            return json.dumps({"status": "error", "message": str(e)})

    tools["event_delete"] = event_delete

    @mcp.tool  # type: ignore[arg-type]
    async def event_duplicate(name: str, new_name: str) -> str:
        """
        Duplicate an event with a new name.

        Creates an independent copy, so modifiers applied to one do not
        affect the other.

        Args:
            name: Original event name
            new_name: Name for the duplicate

        Returns:
            JSON string with the new event details

        Example:
            event_duplicate(name="tonic", new_name="tonic-inverted")
        """
        try:
            event = await manager.duplicate(name, new_name)

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.EVENT_DUPLICATED.format(new_name=new_name),
                    "event": event_to_dict(event),
                }
            )
        except Exception as e:
            logger.exception("Failed to duplicate event")
            return json.dumps({"status": "error", "message": str(e)})

    tools["event_duplicate"] = event_duplicate

    return tools
