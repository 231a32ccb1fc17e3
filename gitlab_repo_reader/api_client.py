"""Single gateway for every GitLab REST API v4 call, using httpx."""

import json
from typing import Any

import httpx

from .models import API_VERSION_PATH, ApiResponse, GitLabConfig, ResponseKind

AUTH_HEADER = "PRIVATE-TOKEN"


class GitLabApiError(Exception):
    """A GitLab operation failed, either rejected by the platform or never delivered."""

    def __init__(self, message: str, status: int = 0, status_text: str = ""):
        super().__init__(message)
        self.status = status
        self.status_text = status_text

    @classmethod
    def from_response(cls, action: str, resp: ApiResponse) -> "GitLabApiError":
        return cls(
            f"Failed to {action}: {resp.status} {resp.status_text or 'Unknown error'}",
            status=resp.status,
            status_text=resp.status_text,
        )


def api_url(path: str, config: GitLabConfig) -> str:
    if path.startswith(("http://", "https://")):
        return path
    ep = path if path.startswith("/") else f"/{path}"
    return f"{config.base_url.rstrip('/')}{API_VERSION_PATH}{ep}"


async def fetch_from_gitlab_api(
    path: str,
    config: GitLabConfig,
    method: str = "GET",
    headers: dict[str, str] | None = None,
    body: Any = None,
) -> ApiResponse:
    """Make one GitLab API call and normalize the outcome.

    Args:
        path: API path with its query string already encoded, e.g.
            "projects/group%2Fproject/repository/tree?per_page=100",
            or a fully-qualified URL.
        config: Instance URL and access token.
        method: HTTP method (default GET)
        headers: Extra request headers. The access token header always wins.
        body: Optional JSON-serializable request body.

    Returns:
        ApiResponse. HTTP and network failures are reported in the response,
        never raised. asyncio.CancelledError propagates untouched.
    """
    request_headers = httpx.Headers(headers or {})
    request_headers[AUTH_HEADER] = config.token

    content = None
    if body is not None:
        content = json.dumps(body)
        if "content-type" not in request_headers:
            request_headers["Content-Type"] = "application/json"

    try:
        async with httpx.AsyncClient(timeout=None, follow_redirects=True) as client:
            resp = await client.request(
                method, api_url(path, config), headers=request_headers, content=content
            )
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        message = str(e) or type(e).__name__
        return ApiResponse(
            kind=ResponseKind.TRANSPORT_FAILURE, status=0, status_text=message, text=message
        )

    # Body is fully read by request(); .text is the only read we make.
    text = resp.text
    if not resp.is_success:
        return ApiResponse(
            kind=ResponseKind.REJECTED,
            status=resp.status_code,
            status_text=resp.reason_phrase,
            text=text,
        )

    if "application/json" in resp.headers.get("content-type", "") and text:
        try:
            data = json.loads(text)
        except ValueError:
            pass
        else:
            return ApiResponse(
                kind=ResponseKind.PARSED,
                status=resp.status_code,
                status_text=resp.reason_phrase,
                text=text,
                data=data,
            )

    return ApiResponse(
        kind=ResponseKind.RAW, status=resp.status_code, status_text=resp.reason_phrase, text=text
    )
