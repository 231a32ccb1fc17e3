"""MCP server exposing the GitLab repository tools over stdio."""

import asyncio
import json
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .glob_files import TOOL_DEFINITION as GLOB_FILES_TOOL
from .glob_files import GlobFilesArgs, glob_files
from .list_directory import TOOL_DEFINITION as LIST_DIRECTORY_TOOL
from .list_directory import ListDirectoryArgs, list_directory
from .list_projects import TOOL_DEFINITION as LIST_PROJECTS_TOOL
from .list_projects import ListProjectsArgs, list_projects
from .models import GitLabConfig
from .read_file import TOOL_DEFINITION as READ_FILE_TOOL
from .read_file import ReadFileArgs, read_file
from .search_code import TOOL_DEFINITION as SEARCH_CODE_TOOL
from .search_code import SearchCodeArgs, search_code
from .settings import get_settings

logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

SERVER_NAME = "gitlab-server"

# name -> (definition, argument parser, operation)
TOOLS = {
    "read_file": (READ_FILE_TOOL, ReadFileArgs.from_arguments, read_file),
    "search_code": (SEARCH_CODE_TOOL, SearchCodeArgs.from_arguments, search_code),
    "list_projects": (LIST_PROJECTS_TOOL, ListProjectsArgs.from_arguments, list_projects),
    "glob_files": (GLOB_FILES_TOOL, GlobFilesArgs.from_arguments, glob_files),
    "list_directory": (LIST_DIRECTORY_TOOL, ListDirectoryArgs.from_arguments, list_directory),
}

server = Server(SERVER_NAME)


async def run_tool(name: str, arguments: dict[str, Any] | None, config: GitLabConfig, on_progress=None):
    """Parse arguments and run one tool, returning its plain result."""
    if name not in TOOLS:
        raise ValueError(f"Unknown tool: {name}")
    _, parse_args, operation = TOOLS[name]
    return await operation(parse_args(arguments or {}), config, on_progress)


async def handle_tool(name: str, arguments: dict[str, Any] | None, config: GitLabConfig) -> list[TextContent]:
    """Run a tool and wrap its result as one JSON text block.

    Separated from ``call_tool`` so tests can invoke tool logic without the
    MCP decorator. Failures raise; the SDK reports them with isError set.
    """
    result = await run_tool(name, arguments, config)
    return [TextContent(type="text", text=json.dumps(result, indent=2))]


@server.list_tools()
async def list_tools() -> list[Tool]:
    return [Tool(**definition) for definition, _, _ in TOOLS.values()]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    return await handle_tool(name, arguments, get_settings().to_config())


async def run() -> None:
    """Run the MCP server over stdio until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        print("GitLab MCP Server running on stdio", file=sys.stderr, flush=True)
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def serve() -> None:
    asyncio.run(run())
