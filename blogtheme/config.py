from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env if present
ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


def env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    SECRET_KEY: str = os.getenv("SECRET_KEY", os.urandom(32).hex())

    # Site
    SITE_NAME: str = os.getenv("SITE_NAME", "Blog")
    SITE_DESCRIPTION: str = os.getenv("SITE_DESCRIPTION", "")
    # Path prefix prepended to every generated link (Jekyll's site.baseurl)
    BASEURL: str = os.getenv("BASEURL", "").rstrip("/")
    SHOW_EXCERPTS: bool = env_flag("SHOW_EXCERPTS", True)

    # Pagination
    PAGINATE: int = int(os.getenv("PAGINATE", "5"))
    PAGINATE_CATEGORIES: bool = env_flag("PAGINATE_CATEGORIES", False)

    # Promotional and social cards on unpaged category pages
    SUBSCRIBE_URL: str = os.getenv("SUBSCRIBE_URL", "")
    TWITTER_USERNAME: str = os.getenv("TWITTER_USERNAME", "")

    # Post import
    POSTS_DIR: str = os.getenv("POSTS_DIR", "_posts")

    # Database
    SQLALCHEMY_DATABASE_URI: str = os.getenv("DATABASE_URL", "sqlite:///blog.db")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Caching (simple for dev)
    CACHE_TYPE = os.getenv("CACHE_TYPE", "SimpleCache")
    CACHE_DEFAULT_TIMEOUT = int(os.getenv("CACHE_DEFAULT_TIMEOUT", "300"))

    # Rate limiting
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "100 per minute")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")

    # Flask env
    ENV = os.getenv("FLASK_ENV", "production")
    DEBUG = ENV != "production"
