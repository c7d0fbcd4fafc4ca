from __future__ import annotations

from datetime import date, datetime, time, timezone

from pydantic import BaseModel, Field, field_validator, model_validator

# Jekyll's documented post date format, e.g. "2024-03-04 10:00:00 +0100"
JEKYLL_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"


class PostFrontmatter(BaseModel):
    """YAML frontmatter of a Jekyll ``_posts`` file."""

    title: str = ""
    date: datetime | None = None
    categories: list[str] = Field(default_factory=list)
    category: str | None = None
    description: str | None = None
    cover: str | None = None
    excerpt: str | None = None
    published: bool = True

    @field_validator("title", mode="before")
    @classmethod
    def none_to_blank(cls, v):
        return "" if v is None else str(v)

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v):
        # YAML gives bare dates as datetime.date
        if isinstance(v, date) and not isinstance(v, datetime):
            return datetime.combine(v, time.min, tzinfo=timezone.utc)
        if isinstance(v, str):
            try:
                return datetime.strptime(v.strip(), JEKYLL_DATE_FORMAT)
            except ValueError:
                return v
        return v

    @field_validator("categories", mode="before")
    @classmethod
    def split_categories(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return v.split()
        return [str(c) for c in v]

    @model_validator(mode="after")
    def merge_category(self) -> "PostFrontmatter":
        if self.category and self.category not in self.categories:
            self.categories.insert(0, self.category)
        return self
