from __future__ import annotations

# Import all models so metadata is complete before create_all()
from blogtheme.models.blog import Category, Post, PostCategory

__all__ = [
    "Category",
    "Post",
    "PostCategory",
]
