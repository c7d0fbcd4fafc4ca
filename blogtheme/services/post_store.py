"""Load Jekyll ``_posts`` directories into the post store."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

import frontmatter
import structlog
import yaml
from pydantic import ValidationError

from blogtheme.repositories.blog import upsert_post
from blogtheme.schemas.posts import PostFrontmatter
from blogtheme.utils.slug import titleize_slug

logger = structlog.get_logger(__name__)

POST_FILENAME = re.compile(r"^(?P<date>\d{4}-\d{2}-\d{2})-(?P<slug>.+)\.(?:md|markdown)$")
EXCERPT_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class LoadedPost:
    slug: str
    meta: PostFrontmatter
    body: str

    @property
    def date(self) -> datetime:
        return self.meta.date  # type: ignore[return-value]

    @property
    def excerpt(self) -> str:
        if self.meta.excerpt:
            return self.meta.excerpt
        return self.body.strip().split(EXCERPT_SEPARATOR, 1)[0].strip()


def parse_post(path: Path) -> LoadedPost | None:
    """Parse one post file; returns None (and logs) when the file is unusable."""
    match = POST_FILENAME.match(path.name)
    if not match:
        logger.warning("post_skipped", path=str(path), reason="filename is not YYYY-MM-DD-slug.md")
        return None
    try:
        parsed = frontmatter.loads(path.read_text(encoding="utf-8"))
        meta = PostFrontmatter.model_validate(parsed.metadata or {})
    except (yaml.YAMLError, ValidationError, ValueError) as exc:
        logger.warning("post_skipped", path=str(path), reason=str(exc))
        return None

    defaults = {}
    if meta.date is None:
        defaults["date"] = datetime.strptime(match.group("date"), "%Y-%m-%d").replace(tzinfo=timezone.utc)
    if not meta.title.strip():
        defaults["title"] = titleize_slug(match.group("slug"))
    if defaults:
        meta = meta.model_copy(update=defaults)
    return LoadedPost(slug=match.group("slug"), meta=meta, body=parsed.content)


def load_posts_dir(directory: Path) -> list[LoadedPost]:
    posts = []
    for path in sorted(directory.iterdir()):
        if path.is_file() and not path.name.startswith("."):
            post = parse_post(path)
            if post is not None and not post.meta.published:
                logger.info("post_unpublished", path=str(path))
            elif post is not None:
                posts.append(post)
    return posts


def import_posts(directory: Path) -> int:
    """Upsert every post under ``directory``; returns how many were stored."""
    count = 0
    for post in load_posts_dir(directory):
        try:
            upsert_post(
                title=post.meta.title,
                slug=post.slug,
                date=post.date,
                categories=post.meta.categories,
                excerpt=post.excerpt,
                description=post.meta.description,
                cover=post.meta.cover,
                body=post.body,
            )
        except ValueError as exc:
            logger.error("post_import_failed", slug=post.slug, error=str(exc))
            continue
        count += 1
    logger.info("posts_imported", directory=str(directory), count=count)
    return count
