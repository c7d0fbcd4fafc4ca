# Import all repository functions to maintain compatibility
from blogtheme.repositories.blog import (
    category_registry,
    create_category,
    get_category_by_name,
    get_category_by_slug,
    get_post_by_slug,
    list_all_posts,
    list_categories,
    list_posts,
    list_posts_by_category,
    upsert_post,
)

__all__ = [
    "category_registry",
    "create_category",
    "get_category_by_name",
    "get_category_by_slug",
    "get_post_by_slug",
    "list_all_posts",
    "list_categories",
    "list_posts",
    "list_posts_by_category",
    "upsert_post",
]
