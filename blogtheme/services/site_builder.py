"""Freeze the rendered site into static ``index.html`` files."""
from __future__ import annotations

from pathlib import Path

import structlog
from flask import Flask

from blogtheme.extensions import limiter
from blogtheme.repositories.blog import list_all_posts, list_categories, list_posts_by_category
from blogtheme.services.paginator import category_path, index_path, total_pages_for

logger = structlog.get_logger(__name__)


class BuildError(RuntimeError):
    pass


def site_paths(app: Flask) -> list[str]:
    """Every listing path the site serves, in build order."""
    per_page = app.config["PAGINATE"]
    paths = [index_path(n) for n in range(1, total_pages_for(len(list_all_posts()), per_page) + 1)]
    paths.append("/categories/")
    for cat in list_categories():
        if app.config["PAGINATE_CATEGORIES"]:
            pages = total_pages_for(len(list_posts_by_category(cat.name)), per_page)
            paths.extend(category_path(cat.slug, n) for n in range(1, pages + 1))
        else:
            paths.append(category_path(cat.slug))
    return paths


def output_file(output: Path, path: str) -> Path:
    return output.joinpath(*[part for part in path.split("/") if part], "index.html")


def build_site(app: Flask, output: Path) -> list[Path]:
    """Render each listing page through the test client and write it under ``output``."""
    written: list[Path] = []
    with app.app_context():
        paths = site_paths(app)
    client = app.test_client()
    # Every page is fetched from one address in a burst
    limiter_was_enabled = limiter.enabled
    limiter.enabled = False
    try:
        for path in paths:
            resp = client.get(path)
            if resp.status_code != 200:
                raise BuildError(f"{path} returned {resp.status_code}")
            target = output_file(output, path)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(resp.data)
            written.append(target)
            logger.debug("page_written", path=path, file=str(target))
    finally:
        limiter.enabled = limiter_was_enabled
    logger.info("site_built", output=str(output), pages=len(written))
    return written
