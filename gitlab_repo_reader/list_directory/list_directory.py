"""List one directory level of a GitLab project."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..api_client import GitLabApiError, fetch_from_gitlab_api
from ..models import MAX_PAGE_SIZE, GitLabConfig, optional_int, optional_str, require_str
from ..paths import build_path, encode, normalize_file_path, normalize_project

DEFAULT_LIMIT = 100

TOOL_DEFINITION = {
    "name": "list_directory",
    "description": """List the contents of a directory in a GitLab project.

PARAMETERS:
- project: The GitLab project path (e.g., "group/project" or URL)
- path: The directory path to list (default: root)
- limit: Maximum number of entries to return (default: 100)

Returns list of files and directories, with directories having a trailing slash.""",
    "inputSchema": {
        "type": "object",
        "properties": {
            "project": {
                "type": "string",
                "description": 'The GitLab project path (e.g., "group/project") or full URL',
            },
            "path": {
                "type": "string",
                "description": "The directory path to list (default: root)",
            },
            "limit": {
                "type": "number",
                "description": "Maximum number of entries to return (default: 100)",
            },
        },
        "required": ["project"],
    },
}


@dataclass(frozen=True)
class ListDirectoryArgs:
    project: str
    path: str = ""
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_arguments(cls, arguments: dict[str, Any]) -> "ListDirectoryArgs":
        return cls(
            project=require_str(arguments, "project"),
            path=optional_str(arguments, "path") or "",
            limit=optional_int(arguments, "limit", DEFAULT_LIMIT, minimum=1),
        )


def format_entry(item: dict) -> str:
    return f"{item['name']}/" if item.get("type") == "tree" else item["name"]


def sort_entries(entries: list[str]) -> list[str]:
    """Directories first, then files. Each group sorts case-insensitively,
    with the exact name breaking ties so "a" and "A" stay adjacent and ordered.
    """
    return sorted(entries, key=lambda e: (not e.endswith("/"), e.casefold(), e))


async def list_directory(
    args: ListDirectoryArgs,
    config: GitLabConfig,
    on_progress: Callable[[str], None] | None = None,
) -> list[str]:
    project = normalize_project(args.project)

    if on_progress:
        on_progress(f'Listing directory "{args.path or "/"}" in {project}...')

    directory = normalize_file_path(args.path, project).rstrip("/")
    if directory == ".":
        directory = ""

    resp = await fetch_from_gitlab_api(
        build_path(
            f"projects/{encode(project)}/repository/tree",
            per_page=min(args.limit, MAX_PAGE_SIZE),
            path=directory or None,
        ),
        config,
    )
    if not resp.has_data:
        raise GitLabApiError.from_response("list directory", resp)

    return sort_entries([format_entry(item) for item in resp.data])
