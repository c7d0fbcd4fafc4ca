from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

import click
from flask import Flask, jsonify, g, request
from jinja2 import pass_context
from markupsafe import Markup

from blogtheme.config import Config
from blogtheme.extensions import db, limiter, cache
from blogtheme.logging_config import configure_logging
from blogtheme.schemas.render import SiteSettings
from blogtheme.utils.dates import date_to_xmlschema, format_date
from blogtheme.utils.markdown import render_markdown, strip_html
from blogtheme.utils.slug import slugify
from blogtheme.utils.urls import relative_url


def create_app(config_overrides: Dict[str, Any] | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=False)

    # Load config
    app.config.from_object(Config())
    if config_overrides:
        app.config.update(config_overrides)
    app.config["BASEURL"] = (app.config.get("BASEURL") or "").rstrip("/")

    configure_logging()

    # Init extensions
    db.init_app(app)
    cache.init_app(app)
    limiter.init_app(app)

    # Every template sees the site settings, as Jekyll templates see `site`
    @app.context_processor
    def template_context() -> dict:
        return {"site": SiteSettings.from_config(app.config)}

    @app.template_filter("slugify")
    def slugify_filter(text: str, mode: str = "default") -> str:
        return slugify(text, mode)

    @app.template_filter("markdownify")
    def markdownify_filter(text: str) -> Markup:
        """Render Markdown to sanitized HTML."""
        return Markup(render_markdown(text))

    @app.template_filter("relative_url")
    @pass_context
    def relative_url_filter(ctx, path: str) -> str:
        site = ctx.get("site")
        baseurl = site.baseurl if isinstance(site, SiteSettings) else app.config["BASEURL"]
        return relative_url(path, baseurl)

    app.add_template_filter(strip_html, "strip_html")
    app.add_template_filter(format_date, "format_date")
    app.add_template_filter(date_to_xmlschema, "date_to_xmlschema")

    # Request context enrichment for logging
    @app.before_request
    def add_request_context() -> None:
        g.request_id = request.headers.get("X-Request-ID") or os.urandom(8).hex()

    # Blueprints
    from blogtheme.blueprints.blog import bp as blog_bp

    app.register_blueprint(blog_bp)

    # Health route
    @app.get("/health")
    def health():
        try:
            db.session.execute(db.text("SELECT 1"))
            db_ok = "connected"
        except Exception:
            db_ok = "error"
        return jsonify({"status": "ok", "db": db_ok}), 200

    # Error handlers (JSON bodies)
    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "not_found", "message": "resource not found"}), 404

    @app.errorhandler(429)
    def rate_limited(e):
        return jsonify({"error": "rate_limited", "message": "too many requests"}), 429

    @app.errorhandler(500)
    def server_error(e):
        return jsonify({"error": "server_error", "message": "internal server error"}), 500

    # CLI: database, post import and static build
    @app.cli.command("init-db")
    def init_db() -> None:
        with app.app_context():
            db.create_all()
        click.echo("Database tables created")

    @app.cli.command("import-posts")
    @click.argument("directory", required=False, type=click.Path(exists=True, file_okay=False, path_type=Path))
    def import_posts_command(directory: Path | None) -> None:
        from blogtheme.services.post_store import import_posts

        directory = directory or Path(app.config["POSTS_DIR"])
        if not directory.is_dir():
            raise click.ClickException(f"{directory} is not a directory")
        with app.app_context():
            db.create_all()
            count = import_posts(directory)
        click.echo(f"Imported {count} posts from {directory}")

    @app.cli.command("build")
    @click.argument("output", type=click.Path(file_okay=False, path_type=Path))
    def build_command(output: Path) -> None:
        from blogtheme.services.site_builder import BuildError, build_site

        try:
            written = build_site(app, output)
        except BuildError as e:
            raise click.ClickException(str(e))
        click.echo(f"Wrote {len(written)} pages to {output}")

    return app
