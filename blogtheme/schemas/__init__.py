from blogtheme.schemas.posts import PostFrontmatter
from blogtheme.schemas.render import (
    NavLink,
    PaginatedMode,
    PaginationState,
    PostCard,
    RenderMode,
    SiteSettings,
    UnpagedMode,
)

__all__ = [
    "NavLink",
    "PaginatedMode",
    "PaginationState",
    "PostCard",
    "PostFrontmatter",
    "RenderMode",
    "SiteSettings",
    "UnpagedMode",
]
