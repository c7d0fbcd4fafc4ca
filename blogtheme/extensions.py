from __future__ import annotations

from flask_sqlalchemy import SQLAlchemy
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_caching import Cache

# SQLAlchemy 2.0 style

db: SQLAlchemy = SQLAlchemy()
cache: Cache = Cache()

# Rate limiter (IP-based)
limiter: Limiter = Limiter(key_func=get_remote_address, default_limits=["100 per minute"])
