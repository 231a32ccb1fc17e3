"""List or search GitLab projects, most recently active first."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..api_client import GitLabApiError, fetch_from_gitlab_api
from ..models import MAX_PAGE_SIZE, GitLabConfig, optional_int, optional_str
from ..pagination import collect_all
from ..paths import build_path

DEFAULT_LIMIT = 30

TOOL_DEFINITION = {
    "name": "list_projects",
    "description": """List or search GitLab projects.

PARAMETERS:
- search: Optional search query to filter projects by name
- limit: Maximum number of results (default: 30)
- offset: Number of results to skip (default: 0)

Returns list of projects with metadata.""",
    "inputSchema": {
        "type": "object",
        "properties": {
            "search": {
                "type": "string",
                "description": "Optional search query to filter projects by name",
            },
            "limit": {
                "type": "number",
                "description": "Maximum number of results (default: 30)",
            },
            "offset": {
                "type": "number",
                "description": "Number of results to skip (default: 0)",
            },
        },
        "required": [],
    },
}


@dataclass(frozen=True)
class ListProjectsArgs:
    search: str | None = None
    limit: int = DEFAULT_LIMIT
    offset: int = 0

    @classmethod
    def from_arguments(cls, arguments: dict[str, Any]) -> "ListProjectsArgs":
        return cls(
            search=optional_str(arguments, "search"),
            limit=optional_int(arguments, "limit", DEFAULT_LIMIT, minimum=1),
            offset=optional_int(arguments, "offset", 0),
        )


def project_info(project: dict) -> dict:
    """Reduce a GitLab project record to the fields callers need."""
    return {
        "id": project["id"],
        "name": project["name"],
        "path": project["path_with_namespace"],
        "description": project.get("description"),
        "url": project.get("web_url"),
        "defaultBranch": project.get("default_branch"),
        "visibility": project.get("visibility"),
        "lastActivity": project.get("last_activity_at"),
    }


async def list_projects(
    args: ListProjectsArgs,
    config: GitLabConfig,
    on_progress: Callable[[str], None] | None = None,
) -> list[dict]:
    """List projects visible to the token.

    offset is approximated by page: page = offset // per_page + 1. Limits above
    MAX_PAGE_SIZE walk forward from that page until limit projects are held.
    """
    if on_progress:
        suffix = f' matching "{args.search}"' if args.search else ""
        on_progress(f"Listing GitLab projects{suffix}...")

    per_page = min(args.limit, MAX_PAGE_SIZE)
    page = args.offset // per_page + 1

    async def fetch_page(n: int):
        return await fetch_from_gitlab_api(
            build_path(
                "projects",
                per_page=per_page,
                page=n,
                order_by="last_activity_at",
                sort="desc",
                search=args.search or None,
            ),
            config,
        )

    if args.limit <= MAX_PAGE_SIZE:
        resp = await fetch_page(page)
        if not resp.has_data:
            raise GitLabApiError.from_response("list projects", resp)
        projects = resp.data
    else:
        projects = await collect_all(
            fetch_page, per_page, "list projects", first_page=page, max_items=args.limit
        )

    return [project_info(p) for p in projects]
