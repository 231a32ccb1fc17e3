"""Read a file from a GitLab project, with line numbers and an optional line range."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..api_client import GitLabApiError, fetch_from_gitlab_api
from ..models import MAX_READ_BYTES, GitLabConfig, require_str
from ..paths import absolute_path, encode, normalize_file_path, normalize_project

TOOL_DEFINITION = {
    "name": "read_file",
    "description": """Read file contents from a GitLab project.

PARAMETERS:
- project: The GitLab project path (e.g., "group/project" or URL)
- path: The file path within the repository (required)
- read_range: Optional [startLine, endLine] to read only a portion of the file

Returns file contents with line numbers.""",
    "inputSchema": {
        "type": "object",
        "properties": {
            "project": {
                "type": "string",
                "description": 'The GitLab project path (e.g., "group/project") or full URL',
            },
            "path": {
                "type": "string",
                "description": "The file path within the repository",
            },
            "read_range": {
                "type": "array",
                "description": "Optional [startLine, endLine] to read only a portion",
                "items": {"type": "number"},
                "minItems": 2,
                "maxItems": 2,
            },
        },
        "required": ["project", "path"],
    },
}


class FileTooLargeError(GitLabApiError):
    """Selected content is over MAX_READ_BYTES. Never truncated silently."""

    def __init__(self, size_bytes: int, total_lines: int):
        super().__init__(
            f"File is too large ({round(size_bytes / 1024)}KB). "
            f"The file has {total_lines} lines. "
            "Please retry with a smaller read_range parameter."
        )
        self.size_bytes = size_bytes
        self.total_lines = total_lines


@dataclass(frozen=True)
class ReadFileArgs:
    project: str
    path: str
    read_range: tuple[int, int] | None = None

    @classmethod
    def from_arguments(cls, arguments: dict[str, Any]) -> "ReadFileArgs":
        read_range = arguments.get("read_range")
        if read_range is not None:
            if (
                not isinstance(read_range, (list, tuple))
                or len(read_range) != 2
                or not all(isinstance(n, (int, float)) and not isinstance(n, bool) for n in read_range)
            ):
                raise ValueError("read_range must be a [startLine, endLine] pair of numbers")
            read_range = (int(read_range[0]), int(read_range[1]))
        return cls(
            project=require_str(arguments, "project"),
            path=require_str(arguments, "path"),
            read_range=read_range,
        )


def select_lines(content: str, read_range: tuple[int, int] | None = None) -> tuple[int, list[str], int]:
    """Return (start_line, selected_lines, total_lines) for a 1-based inclusive range.

    The range is clamped to [1, total_lines].
    """
    lines = content.split("\n")
    start, end = 1, len(lines)
    if read_range:
        start = max(1, read_range[0])
        end = max(0, min(len(lines), read_range[1]))
    return start, lines[start - 1 : end], len(lines)


def number_lines(lines: list[str], start: int) -> str:
    return "\n".join(f"{start + i}: {line}" for i, line in enumerate(lines))


async def read_file(
    args: ReadFileArgs,
    config: GitLabConfig,
    on_progress: Callable[[str], None] | None = None,
) -> dict:
    """Fetch one file's raw content and return it line-numbered.

    Returns dict with 'absolutePath' and 'content' keys.
    Raises FileTooLargeError if the selected lines exceed MAX_READ_BYTES.
    """
    project = normalize_project(args.project)

    if on_progress:
        on_progress(f'Reading file "{args.path}" from {project}...')

    relative = normalize_file_path(args.path, project)
    resp = await fetch_from_gitlab_api(
        f"projects/{encode(project)}/repository/files/{encode(relative)}/raw", config
    )
    if not resp.ok:
        raise GitLabApiError.from_response("read file", resp)

    start, selected, total = select_lines(resp.text or "", args.read_range)

    size = len("\n".join(selected).encode("utf-8"))
    if size > MAX_READ_BYTES:
        raise FileTooLargeError(size, total)

    return {
        "absolutePath": absolute_path(project, relative),
        "content": number_lines(selected, start),
    }
