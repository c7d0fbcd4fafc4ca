from __future__ import annotations

from flask import Blueprint

bp = Blueprint("blog", __name__)

# Import routes to register them with the blueprint
from blogtheme.blueprints.view import home  # noqa: E402,F401
from blogtheme.blueprints.view import category  # noqa: E402,F401
