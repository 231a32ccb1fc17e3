"""Search code in a GitLab project via the blob search scope."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..api_client import GitLabApiError, fetch_from_gitlab_api
from ..models import (
    MAX_CHUNK_LENGTH,
    MAX_PAGE_SIZE,
    TRUNCATION_MARKER,
    GitLabConfig,
    optional_int,
    optional_str,
    require_str,
)
from ..paths import absolute_path, build_path, encode, normalize_project

DEFAULT_LIMIT = 25

TOOL_DEFINITION = {
    "name": "search_code",
    "description": """Search for code in a GitLab project.

PARAMETERS:
- project: The GitLab project path (e.g., "group/project" or URL)
- query: Search query - keywords to find in code (required)
- path: Optional path to limit search to specific directory
- limit: Maximum results (default: 25)
- offset: Number of results to skip (default: 0)

Returns matching files with code snippets.""",
    "inputSchema": {
        "type": "object",
        "properties": {
            "project": {
                "type": "string",
                "description": 'The GitLab project path (e.g., "group/project") or full URL',
            },
            "query": {
                "type": "string",
                "description": "Search query - keywords to find in code",
            },
            "path": {
                "type": "string",
                "description": "Optional path to limit search to specific directory",
            },
            "limit": {
                "type": "number",
                "description": "Maximum number of results (default: 25)",
            },
            "offset": {
                "type": "number",
                "description": "Number of results to skip (default: 0)",
            },
        },
        "required": ["project", "query"],
    },
}


@dataclass(frozen=True)
class SearchCodeArgs:
    project: str
    query: str
    path: str | None = None
    limit: int = DEFAULT_LIMIT
    offset: int = 0

    @classmethod
    def from_arguments(cls, arguments: dict[str, Any]) -> "SearchCodeArgs":
        return cls(
            project=require_str(arguments, "project"),
            query=require_str(arguments, "query"),
            path=optional_str(arguments, "path"),
            limit=optional_int(arguments, "limit", DEFAULT_LIMIT, minimum=1),
            offset=optional_int(arguments, "offset", 0),
        )


def truncate_fragment(fragment: str, max_len: int = MAX_CHUNK_LENGTH) -> str:
    fragment = fragment.strip()
    if len(fragment) > max_len:
        return f"{fragment[:max_len]}{TRUNCATION_MARKER}"
    return fragment


def group_matches(project: str, items: list[dict]) -> list[dict]:
    """Group blob matches by file, in order of first appearance."""
    by_file: dict[str, list[str]] = {}
    for item in items:
        chunks = by_file.setdefault(absolute_path(project, item["path"]), [])
        if item.get("data"):
            chunks.append(truncate_fragment(item["data"]))
    return [{"file": file, "chunks": chunks} for file, chunks in by_file.items()]


async def search_code(
    args: SearchCodeArgs,
    config: GitLabConfig,
    on_progress: Callable[[str], None] | None = None,
) -> dict:
    """Run one blob search request and group the matches by file.

    Returns dict with 'results' and 'totalCount' keys. totalCount is the number
    of matches on the page fetched, not GitLab's total across all pages.
    """
    project = normalize_project(args.project)

    if on_progress:
        on_progress(f'Searching for "{args.query}" in {project}...')

    # GitLab search is page based; offsets that aren't a multiple of
    # per_page land on the page containing them.
    per_page = min(args.limit, MAX_PAGE_SIZE)
    page = args.offset // per_page + 1

    resp = await fetch_from_gitlab_api(
        build_path(
            f"projects/{encode(project)}/search",
            scope="blobs",
            search=args.query,
            per_page=per_page,
            page=page,
            filename=args.path if args.path and args.path != "." else None,
        ),
        config,
    )
    if not resp.ok:
        raise GitLabApiError.from_response("search code", resp)

    items = resp.data if resp.has_data else []
    return {"results": group_matches(project, items), "totalCount": len(items)}
