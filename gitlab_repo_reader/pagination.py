"""Sequential page collection for GitLab list endpoints."""

from collections.abc import Awaitable, Callable

from .api_client import GitLabApiError
from .models import ApiResponse

PageFetcher = Callable[[int], Awaitable[ApiResponse]]


async def collect_all(
    fetch_page: PageFetcher,
    page_size: int,
    action: str = "fetch results",
    first_page: int = 1,
    max_items: int | None = None,
) -> list:
    """Fetch pages in order until a short page, a failed page, or max_items.

    A failure on the first page raises GitLabApiError("Failed to {action}: ...").
    A failure on any later page ends collection and keeps what was gathered.
    Pages are never fetched concurrently: page N+1 is only requested once
    page N came back full.
    """
    collected = []
    page = first_page

    while True:
        resp = await fetch_page(page)

        if not resp.has_data:
            if page == first_page:
                raise GitLabApiError.from_response(action, resp)
            break

        items = list(resp.data)
        collected.extend(items)

        if max_items is not None and len(collected) >= max_items:
            return collected[:max_items]

        # Short page means last page
        if len(items) < page_size:
            break
        page += 1

    return collected
