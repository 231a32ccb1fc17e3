"""Data models and constants for GitLab repository access."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_INSTANCE_URL = "https://gitlab.com"
API_VERSION_PATH = "/api/v4"

MAX_PAGE_SIZE = 100  # GitLab rejects per_page above this
MAX_READ_BYTES = 128 * 1024
MAX_CHUNK_LENGTH = 2048
TRUNCATION_MARKER = "... (truncated)"


@dataclass(frozen=True)
class GitLabConfig:
    """Where to send API calls and which token to send with them."""

    base_url: str
    token: str


class ResponseKind(Enum):
    TRANSPORT_FAILURE = "transport_failure"  # no HTTP response at all
    REJECTED = "rejected"  # non-2xx
    RAW = "raw"  # 2xx, body kept as text only
    PARSED = "parsed"  # 2xx, JSON body decoded into data


@dataclass(frozen=True)
class ApiResponse:
    """Result of a single GitLab API call.

    ``data`` is only meaningful when ``kind`` is PARSED; ``text`` carries the
    raw body (or the transport error message) in every other case.
    """

    kind: ResponseKind
    status: int
    status_text: str
    text: str | None = None
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.kind in (ResponseKind.RAW, ResponseKind.PARSED)

    @property
    def has_data(self) -> bool:
        return self.kind is ResponseKind.PARSED


def require_str(arguments: dict[str, Any], key: str) -> str:
    value = arguments.get(key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"{key} is required and must be a non-empty string")
    return value


def optional_str(arguments: dict[str, Any], key: str) -> str | None:
    value = arguments.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


def optional_int(arguments: dict[str, Any], key: str, default: int, minimum: int = 0) -> int:
    """Read an integer argument. JSON numbers may arrive as floats."""
    value = arguments.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)) or int(value) != value:
        raise ValueError(f"{key} must be an integer")
    if value < minimum:
        raise ValueError(f"{key} must be >= {minimum}")
    return int(value)
