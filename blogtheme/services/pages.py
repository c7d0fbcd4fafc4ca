from __future__ import annotations

from blogtheme.models.blog import Category, Post
from blogtheme.repositories.blog import category_registry, list_posts, list_posts_by_category
from blogtheme.schemas.render import PaginatedMode, PaginationState, PostCard, UnpagedMode
from blogtheme.services.paginator import category_path, index_path, paginate, pagination_state, total_pages_for


def to_cards(posts: list[Post]) -> tuple[PostCard, ...]:
    return tuple(PostCard.from_post(p) for p in posts)


def paginated_category_mode(category: Category, page: int, per_page: int) -> PaginatedMode:
    posts = list_posts_by_category(category.name)
    state, chunk = paginate(posts, page, per_page, lambda n: category_path(category.slug, n))
    return PaginatedMode(title=category.name, paginator=state, posts=to_cards(chunk))


def unpaged_category_mode(category: Category) -> UnpagedMode:
    registry = {name: to_cards(posts) for name, posts in category_registry().items()}
    return UnpagedMode(
        title=category.name,
        posts=registry.get(category.name, ()),
        registry=registry,
    )


def index_page(page: int, per_page: int) -> tuple[PaginationState, tuple[PostCard, ...]]:
    """One page of the article index; the slice is taken by the database."""
    posts, total = list_posts(page=max(1, page), per_page=per_page)
    state = pagination_state(page, total_pages_for(total, per_page), per_page, index_path)
    if state.page != page:
        return state, ()
    return state, to_cards(posts)
