from __future__ import annotations

from flask import abort, current_app, jsonify, render_template, request

from blogtheme.extensions import cache, limiter
from blogtheme.repositories.blog import get_category_by_slug, list_categories, list_posts_by_category
from blogtheme.schemas.render import PaginatedMode, SiteSettings
from blogtheme.services.category_renderer import page_context, render_category_page
from blogtheme.services.pages import paginated_category_mode, unpaged_category_mode

from blogtheme.blueprints.blog import bp


def cards_json(posts) -> list[dict]:
    return [
        {
            "title": p.title,
            "url": p.url,
            "date": p.date.isoformat() if p.date else None,
            "excerpt": p.excerpt,
            "description": p.description,
            "cover": p.cover,
            "categories": list(p.categories),
        }
        for p in posts
    ]


@bp.get("/category/<slug>/", endpoint="category")
@bp.get("/category/<slug>/page<int(min=2):num>/", endpoint="category_page")
@limiter.limit("120 per minute")
@cache.cached(query_string=True)
def by_category(slug: str, num: int = 1):
    category = get_category_by_slug(slug)
    if not category:
        abort(404)

    if current_app.config["PAGINATE_CATEGORIES"]:
        mode = paginated_category_mode(category, page=num, per_page=current_app.config["PAGINATE"])
        if mode.paginator.page != num:
            abort(404)
    elif num != 1:
        abort(404)
    else:
        mode = unpaged_category_mode(category)

    site = SiteSettings.from_config(current_app.config)
    if request.args.get("format") == "json":
        ctx = page_context(mode, site)
        payload = {
            "status": "ok",
            "page": "category",
            "mode": mode.kind,
            "category": category.name,
            "slug": category.slug,
            "heading": ctx["heading"],
            "posts": cards_json(ctx["posts"]),
            "pager": [link.model_dump() for link in ctx["pager"]],
            "category_links": [link.model_dump() for link in ctx["category_links"]],
        }
        if isinstance(mode, PaginatedMode):
            payload["paginator"] = mode.paginator.model_dump()
        return jsonify(payload)

    current_app.logger.debug(f"Rendering category {category.name!r} ({mode.kind}, page {num})")
    return render_template(
        "category.html",
        category=category,
        content=render_category_page(mode, site),
    )


@bp.get("/categories/", endpoint="categories")
@limiter.limit("120 per minute")
@cache.cached(query_string=True)
def all_categories():
    """The "All categories" page: every category with its post count."""
    categories = [(c, len(list_posts_by_category(c.name))) for c in list_categories()]

    if request.args.get("format") == "json":
        return jsonify({
            "status": "ok",
            "page": "categories",
            "categories": [
                {"name": c.name, "slug": c.slug, "description": c.description, "post_count": count}
                for c, count in categories
            ],
        })
    return render_template("categories.html", categories=categories)
