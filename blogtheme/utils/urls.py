from __future__ import annotations

from urllib.parse import urlsplit


def relative_url(path: str | None, baseurl: str = "") -> str:
    """Prefix a site path with ``baseurl``; absolute URLs pass through untouched."""
    if not path:
        return baseurl or ""
    if urlsplit(path).scheme or path.startswith("//"):
        return path
    return f"{baseurl.rstrip('/')}/{path.lstrip('/')}"
