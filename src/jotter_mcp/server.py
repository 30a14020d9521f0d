"""
MCP Server for Jotter.

Exposes the notes store to a host app over stdio:
list_notes, create_note, update_note, delete_note.
"""

import json
import logging
import sys

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent
from pydantic import BaseModel, Field, ValidationError

from jotter.config import get_log_level
from jotter.exceptions import JotterError
from jotter.store import (
    create_note,
    delete_note,
    ensure_notes_dir,
    list_notes,
    update_note,
)

logger = logging.getLogger(__name__)

# Create MCP server
server = Server("jotter")


class UpdateNoteRequest(BaseModel):
    """Payload for update_note."""

    id: str = Field(description="Note id (sanitized before use)")
    content: str = Field(description="Full replacement content")


class DeleteNoteRequest(BaseModel):
    """Payload for delete_note."""

    id: str = Field(description="Note id (sanitized before use)")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="list_notes",
            description="List all notes, newest first. Returns a JSON array of {id, path, content}.",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
        Tool(
            name="create_note",
            description="Create a new empty note. Returns {id, path, content} for the created note.",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
        Tool(
            name="update_note",
            description="Replace the full content of a note. Creates the note if it doesn't exist.",
            inputSchema={
                "type": "object",
                "properties": {
                    "id": {
                        "type": "string",
                        "description": "The note id",
                    },
                    "content": {
                        "type": "string",
                        "description": "New content for the note",
                    },
                },
                "required": ["id", "content"],
            },
        ),
        Tool(
            name="delete_note",
            description="Delete a note. Deleting a note that doesn't exist succeeds.",
            inputSchema={
                "type": "object",
                "properties": {
                    "id": {
                        "type": "string",
                        "description": "The note id",
                    },
                },
                "required": ["id"],
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "list_notes":
            return await tool_list(arguments)
        elif name == "create_note":
            return await tool_create(arguments)
        elif name == "update_note":
            return await tool_update(arguments)
        elif name == "delete_note":
            return await tool_delete(arguments)
        else:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]
    except ValidationError as e:
        return [TextContent(type="text", text=f"Error: Invalid arguments for {name}: {e}")]
    except JotterError as e:
        logger.warning(f"{name} failed: {e}")
        return [TextContent(type="text", text=f"Error: {e}")]


def _json_result(payload) -> list[TextContent]:
    return [TextContent(type="text", text=json.dumps(payload))]


async def tool_list(args: dict) -> list[TextContent]:
    """List notes."""
    notes = list_notes()
    return _json_result([note.model_dump() for note in notes])


async def tool_create(args: dict) -> list[TextContent]:
    """Create a note."""
    note = create_note()
    return _json_result(note.model_dump())


async def tool_update(args: dict) -> list[TextContent]:
    """Overwrite a note."""
    req = UpdateNoteRequest.model_validate(args or {})
    update_note(req.id, req.content)
    return _json_result({"ok": True})


async def tool_delete(args: dict) -> list[TextContent]:
    """Delete a note."""
    req = DeleteNoteRequest.model_validate(args or {})
    delete_note(req.id)
    return _json_result({"ok": True})


async def main():
    """Run the MCP server."""
    # stdout carries the protocol; logs go to stderr
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=get_log_level("INFO"),
        stream=sys.stderr,
    )

    notes_dir = ensure_notes_dir()
    logger.info(f"Jotter MCP server starting. Notes dir: {notes_dir}")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run() -> None:
    """Console script entry point."""
    import asyncio
    asyncio.run(main())


if __name__ == "__main__":
    run()
