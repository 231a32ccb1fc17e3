"""Project and file path normalization, plus API path encoding."""

import re
from urllib.parse import quote

_URL_PREFIX = re.compile(r"^https?://[^/]+/")
VCS_SUFFIX = ".git"
FILE_SCHEME = "file://"


def normalize_project(project: str) -> str:
    """Turn "group/project", "group/project.git" or a project URL into "group/project"."""
    return _URL_PREFIX.sub("", project.removesuffix(VCS_SUFFIX), count=1)


def normalize_file_path(path: str, project: str) -> str:
    """Make a user-supplied path relative to the project root.

    Strips, in order: a file:// prefix, a leading "/{project}" segment, and one
    leading slash. "/group/projectx/a" is not treated as inside "group/project".
    """
    relative = path.removeprefix(FILE_SCHEME)
    prefix = f"/{project}"
    if relative == prefix or relative.startswith(f"{prefix}/"):
        relative = relative[len(prefix):]
    return relative.removeprefix("/")


def absolute_path(project: str, relative: str) -> str:
    return f"/{project}/{relative}"


def encode(value) -> str:
    """Percent-encode a value as one opaque path segment or query value."""
    return quote(str(value), safe="")


def build_path(path: str, /, **params) -> str:
    """Append an encoded query string, skipping parameters that are None."""
    query = "&".join(f"{key}={encode(value)}" for key, value in params.items() if value is not None)
    return f"{path}?{query}" if query else path
