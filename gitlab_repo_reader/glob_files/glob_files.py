"""Find files in a GitLab project by glob pattern.

GitLab has no server-side glob, so the whole recursive tree is collected and
matched locally with wcmatch.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from wcmatch import glob

from ..api_client import fetch_from_gitlab_api
from ..models import MAX_PAGE_SIZE, GitLabConfig, optional_int, require_str
from ..pagination import collect_all
from ..paths import absolute_path, build_path, encode, normalize_project

DEFAULT_LIMIT = 100
# "**" spans directories; "/" is the only separator on every platform
GLOB_FLAGS = glob.GLOBSTAR | glob.DOTGLOB | glob.BRACE | glob.FORCEUNIX
TREE_PAGE_SIZE = MAX_PAGE_SIZE

TOOL_DEFINITION = {
    "name": "glob_files",
    "description": """Find files matching a glob pattern in a GitLab project.

PARAMETERS:
- project: The GitLab project path (e.g., "group/project" or URL)
- filePattern: Glob pattern to match files (required, e.g., "**/*.ts")
- limit: Maximum results (default: 100)
- offset: Number of results to skip (default: 0)

Returns list of file paths matching the pattern.""",
    "inputSchema": {
        "type": "object",
        "properties": {
            "project": {
                "type": "string",
                "description": 'The GitLab project path (e.g., "group/project") or full URL',
            },
            "filePattern": {
                "type": "string",
                "description": 'Glob pattern to match files (e.g., "**/*.ts")',
            },
            "limit": {
                "type": "number",
                "description": "Maximum number of results (default: 100)",
            },
            "offset": {
                "type": "number",
                "description": "Number of results to skip (default: 0)",
            },
        },
        "required": ["project", "filePattern"],
    },
}


@dataclass(frozen=True)
class GlobFilesArgs:
    project: str
    file_pattern: str
    limit: int = DEFAULT_LIMIT  # 0 means no limit
    offset: int = 0

    @classmethod
    def from_arguments(cls, arguments: dict[str, Any]) -> "GlobFilesArgs":
        return cls(
            project=require_str(arguments, "project"),
            file_pattern=require_str(arguments, "filePattern"),
            limit=optional_int(arguments, "limit", DEFAULT_LIMIT),
            offset=optional_int(arguments, "offset", 0),
        )


def compile_glob(pattern: str) -> Callable[[str], bool]:
    """Compile a glob into a predicate over project-relative paths.

    Patterns are anchored at the project root: "*" never crosses a "/", so
    "*.py" only matches top-level files, while "**/*.py" matches at any depth,
    including the root. A leading "/" is accepted and ignored.
    """
    relative = pattern.lstrip("/")
    return lambda path: glob.globmatch(path, relative, flags=GLOB_FLAGS)


def match_paths(paths: list[str], pattern: str, limit: int = 0, offset: int = 0) -> list[str]:
    """Filter by pattern, then slice the matches (not the input) by offset/limit."""
    is_match = compile_glob(pattern)
    matched = [p for p in paths if is_match(p)]
    return matched[offset : offset + limit] if limit else matched[offset:]


async def glob_files(
    args: GlobFilesArgs,
    config: GitLabConfig,
    on_progress: Callable[[str], None] | None = None,
) -> list[str]:
    project = normalize_project(args.project)

    if on_progress:
        on_progress(f'Finding files matching "{args.file_pattern}" in {project}...')

    tree_path = f"projects/{encode(project)}/repository/tree"

    async def fetch_page(page: int):
        return await fetch_from_gitlab_api(
            build_path(tree_path, recursive="true", per_page=TREE_PAGE_SIZE, page=page), config
        )

    items = await collect_all(fetch_page, TREE_PAGE_SIZE, "fetch files")
    files = [item["path"] for item in items if item.get("type") == "blob"]

    return [
        absolute_path(project, path)
        for path in match_paths(files, args.file_pattern, args.limit, args.offset)
    ]
