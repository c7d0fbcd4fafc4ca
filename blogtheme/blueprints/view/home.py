from __future__ import annotations

from flask import abort, current_app, jsonify, render_template, request

from blogtheme.extensions import cache, limiter
from blogtheme.services.category_renderer import pager_links
from blogtheme.services.pages import index_page

from blogtheme.blueprints.blog import bp
from blogtheme.blueprints.view.category import cards_json


@bp.get("/", endpoint="home")
@bp.get("/page<int(min=2):num>/", endpoint="home_page")
@limiter.limit("120 per minute")
@cache.cached(query_string=True)
def home(num: int = 1):
    """Paginated article index"""
    paginator, posts = index_page(num, current_app.config["PAGINATE"])
    if paginator.page != num:
        abort(404)
    pager = pager_links(paginator, current_app.config["BASEURL"])

    if request.args.get("format") == "json":
        return jsonify({
            "status": "ok",
            "page": "home",
            "posts": cards_json(posts),
            "paginator": paginator.model_dump(),
            "pager": [link.model_dump() for link in pager],
        })

    return render_template("index.html", posts=posts, paginator=paginator, pager=pager)
