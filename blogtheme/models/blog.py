from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, Index
from sqlalchemy.ext.associationproxy import AssociationProxy, association_proxy
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogtheme.extensions import db


class Category(db.Model):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(db.String(80), unique=True, nullable=False)
    # Shared by names that slugify alike; lookups take the first in display order
    slug: Mapped[str] = mapped_column(db.String(120), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(db.Text, nullable=True)
    display_order: Mapped[int] = mapped_column(db.Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)

    post_links: Mapped[list["PostCategory"]] = relationship(back_populates="category", cascade="all, delete-orphan")

    __table_args__ = (
        Index("ix_categories_display_order", "display_order"),
    )


class PostCategory(db.Model):
    """Association row; ``position`` keeps the order categories were listed in frontmatter."""

    __tablename__ = "post_categories"

    post_id: Mapped[int] = mapped_column(db.ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True)
    category_id: Mapped[int] = mapped_column(db.ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True)
    position: Mapped[int] = mapped_column(db.Integer, default=0, nullable=False)

    post: Mapped["Post"] = relationship(back_populates="category_links")
    category: Mapped[Category] = relationship(back_populates="post_links")


class Post(db.Model):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(db.Text, nullable=False, default="")
    slug: Mapped[str] = mapped_column(db.String(220), unique=True, nullable=False, index=True)
    date: Mapped[datetime] = mapped_column(db.DateTime(timezone=True), nullable=False, index=True)
    excerpt: Mapped[str | None] = mapped_column(db.Text, nullable=True)
    description: Mapped[str | None] = mapped_column(db.Text, nullable=True)
    cover: Mapped[str | None] = mapped_column(db.String(300), nullable=True)
    body: Mapped[str | None] = mapped_column(db.Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(db.DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime | None] = mapped_column(db.DateTime(timezone=True), onupdate=func.now())

    category_links: Mapped[list[PostCategory]] = relationship(
        back_populates="post",
        order_by=PostCategory.position,
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    categories: AssociationProxy[list[Category]] = association_proxy(
        "category_links",
        "category",
        creator=lambda category: PostCategory(category=category),
    )

    @property
    def url(self) -> str:
        """Jekyll ``date`` permalink: ``/yyyy/mm/dd/slug.html``."""
        return f"/{self.date:%Y/%m/%d}/{self.slug}.html"

    @property
    def category_names(self) -> list[str]:
        return [c.name for c in self.categories]
