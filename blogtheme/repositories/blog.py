from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from blogtheme.extensions import db
from blogtheme.models.blog import Category, Post, PostCategory
from blogtheme.utils.slug import slugify


# Category repositories
def get_category_by_slug(slug: str) -> Optional[Category]:
    stmt = db.select(Category).filter_by(slug=slug).order_by(Category.display_order, Category.name)
    return db.session.execute(stmt).scalars().first()


def get_category_by_name(name: str) -> Optional[Category]:
    return db.session.execute(db.select(Category).filter_by(name=name)).scalar_one_or_none()


def list_categories() -> list[Category]:
    return list(db.session.execute(db.select(Category).order_by(Category.display_order, Category.name)).scalars())


def create_category(*, name: str, slug: str | None = None, description: str | None = None, display_order: int = 0) -> Category:
    cat = Category(name=name, slug=slug or slugify(name), description=description, display_order=display_order)
    db.session.add(cat)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValueError("name_conflict")
    return cat


def get_or_create_category(name: str) -> Category:
    cat = get_category_by_name(name)
    if cat is None:
        cat = Category(name=name, slug=slugify(name))
        db.session.add(cat)
        db.session.flush()
    return cat


# Post repositories
def get_post_by_slug(slug: str) -> Optional[Post]:
    return db.session.execute(db.select(Post).filter_by(slug=slug)).scalar_one_or_none()


def list_posts(page: int = 1, per_page: int = 10) -> tuple[list[Post], int]:
    stmt = db.select(Post).order_by(Post.date.desc(), Post.id.desc())
    pag = db.paginate(stmt, page=page, per_page=per_page, error_out=False)
    return list(pag.items), pag.total


def list_all_posts() -> list[Post]:
    return list(db.session.execute(db.select(Post).order_by(Post.date.desc(), Post.id.desc())).scalars())


def list_posts_by_category(category_name: str) -> list[Post]:
    """All posts filed under a category, newest first."""
    stmt = (
        db.select(Post)
        .join(PostCategory, PostCategory.post_id == Post.id)
        .join(Category, Category.id == PostCategory.category_id)
        .filter(Category.name == category_name)
        .order_by(Post.date.desc(), Post.id.desc())
    )
    return list(db.session.execute(stmt).scalars())


def category_registry() -> dict[str, list[Post]]:
    """Every category name mapped to its posts, in category display order."""
    return {cat.name: list_posts_by_category(cat.name) for cat in list_categories()}


def upsert_post(
    *,
    title: str,
    slug: str,
    date: datetime,
    categories: list[str],
    excerpt: str | None = None,
    description: str | None = None,
    cover: str | None = None,
    body: str | None = None,
) -> Post:
    p = get_post_by_slug(slug)
    if p is None:
        p = Post(slug=slug)
        db.session.add(p)
    p.title = title
    p.date = date
    p.excerpt = excerpt
    p.description = description
    p.cover = cover
    p.body = body
    try:
        # Replace links wholesale; delete-orphan removes the old rows on flush
        p.category_links.clear()
        db.session.flush()
        for name in dict.fromkeys(categories):
            p.category_links.append(PostCategory(category=get_or_create_category(name)))
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValueError("slug_conflict")
    return p
