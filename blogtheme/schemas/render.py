from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PostCard(BaseModel):
    """Read-only view of a post as the listing templates see it."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    url: str = ""
    date: datetime | None = None
    excerpt: str = ""
    description: str = ""
    cover: str = ""
    categories: tuple[str, ...] = ()

    @field_validator("title", "url", "excerpt", "description", "cover", mode="before")
    @classmethod
    def none_to_blank(cls, v):
        return "" if v is None else v

    @field_validator("categories", mode="before")
    @classmethod
    def unique_categories(cls, v):
        if v is None:
            return ()
        seen: list[str] = []
        for name in v:
            if name not in seen:
                seen.append(name)
        return tuple(seen)

    @classmethod
    def from_post(cls, post) -> "PostCard":
        return cls(
            title=post.title,
            url=post.url,
            date=post.date,
            excerpt=post.excerpt,
            description=post.description,
            cover=post.cover,
            categories=post.category_names,
        )


class PaginationState(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int = Field(ge=1)
    total_pages: int = Field(ge=1)
    per_page: int = Field(ge=1)
    previous_page: int | None = None
    next_page: int | None = None
    previous_page_path: str | None = None
    next_page_path: str | None = None

    @model_validator(mode="after")
    def check_pointers(self) -> "PaginationState":
        if (self.previous_page is not None) != (self.page > 1):
            raise ValueError("previous_page must be set exactly when page > 1")
        if (self.next_page is not None) != (self.page < self.total_pages):
            raise ValueError("next_page must be set exactly when page < total_pages")
        return self

    @property
    def is_multi_page(self) -> bool:
        return self.total_pages > 1


class NavLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    href: str
    rel: str | None = None


class PaginatedMode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["paginated"] = "paginated"
    title: str
    paginator: PaginationState
    # The paginator's current slice
    posts: tuple[PostCard, ...] = ()


class UnpagedMode(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["unpaged"] = "unpaged"
    title: str
    posts: tuple[PostCard, ...] = ()
    # category name -> its posts, in display order
    registry: dict[str, tuple[PostCard, ...]] = Field(default_factory=dict)


RenderMode = Annotated[Union[PaginatedMode, UnpagedMode], Field(discriminator="kind")]


class SiteSettings(BaseModel):
    """Site-wide values the renderer reads but never writes."""

    model_config = ConfigDict(frozen=True)

    site_name: str = "Blog"
    baseurl: str = ""
    show_excerpts: bool = True
    subscribe_url: str = ""
    twitter_username: str = ""

    @field_validator("baseurl")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def from_config(cls, config) -> "SiteSettings":
        return cls(
            site_name=config.get("SITE_NAME", "Blog"),
            baseurl=config.get("BASEURL", ""),
            show_excerpts=config.get("SHOW_EXCERPTS", True),
            subscribe_url=config.get("SUBSCRIBE_URL", ""),
            twitter_username=config.get("TWITTER_USERNAME", ""),
        )
