"""Read GitLab repositories over the REST API, exposed as MCP tools.

Browse projects, list directories, read files, glob paths and search code
without a local checkout.
"""

from .api_client import GitLabApiError, fetch_from_gitlab_api
from .cli import main
from .models import ApiResponse, GitLabConfig, ResponseKind

__all__ = [
    "main",
    "fetch_from_gitlab_api",
    "ApiResponse",
    "GitLabApiError",
    "GitLabConfig",
    "ResponseKind",
]

if __name__ == "__main__":
    main()
