"""List Envelopes - page a fully fetched result set into the list response shape."""

from typing import Callable

from club_api.core.pagination import paginate


def list_response(
    rows: list[dict],
    page: int,
    limit: int,
    shape: Callable[[dict], dict],
    with_pagination: bool = True,
) -> dict:
    result = paginate(rows, page, limit)
    body = {
        "success": True,
        "count": len(result.items),
        "total": result.total,
    }
    if with_pagination:
        body["pagination"] = result.pagination()
    body["data"] = [shape(row) for row in result.items]
    return body
