from __future__ import annotations

import math
from typing import Callable, Sequence, TypeVar

from blogtheme.schemas.render import PaginationState

T = TypeVar("T")


def index_path(num: int) -> str:
    return "/" if num <= 1 else f"/page{num}/"


def category_path(slug: str, num: int = 1) -> str:
    base = f"/category/{slug}/"
    return base if num <= 1 else f"{base}page{num}/"


def total_pages_for(count: int, per_page: int) -> int:
    return max(1, math.ceil(count / per_page))


def pagination_state(
    page: int,
    total_pages: int,
    per_page: int,
    path_for: Callable[[int], str] = index_path,
) -> PaginationState:
    page = min(max(1, page), total_pages)
    previous_page = page - 1 if page > 1 else None
    next_page = page + 1 if page < total_pages else None
    return PaginationState(
        page=page,
        total_pages=total_pages,
        per_page=per_page,
        previous_page=previous_page,
        next_page=next_page,
        previous_page_path=path_for(previous_page) if previous_page else None,
        next_page_path=path_for(next_page) if next_page else None,
    )


def paginate(
    items: Sequence[T],
    page: int,
    per_page: int,
    path_for: Callable[[int], str] = index_path,
) -> tuple[PaginationState, list[T]]:
    """
    Split ``items`` into fixed-size pages and return the state for ``page``
    together with that page's slice.

    The page number is clamped into range, so callers that need to reject
    out-of-range pages compare ``state.page`` with what they asked for.
    """
    state = pagination_state(page, total_pages_for(len(items), per_page), per_page, path_for)
    start = (state.page - 1) * per_page
    return state, list(items[start:start + per_page])
