"""
Category page rendering.

A category page is drawn in one of two modes. ``PaginatedMode`` carries the
paginator's current slice and gets compact excerpt cards with Newer/Older
links. ``UnpagedMode`` carries the full collection and gets full cards framed
by the subscribe and social cards, with cross-links to the other categories.
"""
from __future__ import annotations

from typing import Mapping, Sequence

from flask import current_app
from jinja2 import Environment
from markupsafe import Markup

from blogtheme.schemas.render import (
    NavLink,
    PaginatedMode,
    PaginationState,
    PostCard,
    RenderMode,
    SiteSettings,
    UnpagedMode,
)
from blogtheme.utils.slug import slugify
from blogtheme.utils.urls import relative_url

FRAGMENT_TEMPLATE = "partials/category_page.html"


def category_heading(mode: RenderMode) -> str:
    if isinstance(mode, PaginatedMode) and mode.paginator.is_multi_page:
        p = mode.paginator
        return f"Category index page {p.page} / {p.total_pages} for “{mode.title}”"
    return f"Articles for the category “{mode.title}”"


def visible_posts(mode: RenderMode) -> list[PostCard]:
    if isinstance(mode, PaginatedMode):
        return list(mode.posts[: mode.paginator.per_page])
    return list(mode.posts)


def pager_links(paginator: PaginationState, baseurl: str = "") -> list[NavLink]:
    links: list[NavLink] = []
    if paginator.previous_page is not None:
        links.append(NavLink(label="Newer", href=relative_url(paginator.previous_page_path, baseurl), rel="prev"))
    if paginator.next_page is not None:
        links.append(NavLink(label="Older", href=relative_url(paginator.next_page_path, baseurl), rel="next"))
    return links


def category_links(title: str, registry: Mapping[str, Sequence[PostCard]] | Sequence[str], baseurl: str = "") -> list[NavLink]:
    links = [NavLink(label="All categories", href=relative_url("/categories/", baseurl))]
    for name in registry:
        if name == title:
            continue
        links.append(NavLink(label=name, href=relative_url(f"/category/{slugify(name)}/", baseurl)))
    return links


def page_context(mode: RenderMode, site: SiteSettings) -> dict:
    ctx = {
        "mode": mode.kind,
        "title": mode.title,
        "heading": category_heading(mode),
        "posts": visible_posts(mode),
        "site": site,
        "pager": [],
        "category_links": [],
    }
    if isinstance(mode, PaginatedMode):
        ctx["pager"] = pager_links(mode.paginator, site.baseurl)
    elif isinstance(mode, UnpagedMode):
        ctx["category_links"] = category_links(mode.title, mode.registry, site.baseurl)
    return ctx


def render_category_page(mode: RenderMode, site: SiteSettings, env: Environment | None = None) -> Markup:
    """Render the category listing as an HTML fragment for the page layout."""
    env = env or current_app.jinja_env
    template = env.get_template(FRAGMENT_TEMPLATE)
    return Markup(template.render(**page_context(mode, site)))
