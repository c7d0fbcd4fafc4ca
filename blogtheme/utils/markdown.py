from __future__ import annotations

import html
import re

import bleach
import markdown as md

ALLOWED_TAGS = bleach.sanitizer.ALLOWED_TAGS.union(
    {"p", "pre", "code", "span", "br", "hr", "del"}
)
ALLOWED_ATTRS = {
    **bleach.sanitizer.ALLOWED_ATTRIBUTES,
    "code": ["class"],
    "span": ["class"],
}
ALLOWED_PROTOCOLS = ["http", "https", "mailto"]

_WHITESPACE = re.compile(r"\s+")


def render_markdown(text: str | None) -> str:
    html_out = md.markdown(
        text or "",
        extensions=["fenced_code", "tables", "sane_lists", "smarty"],
        output_format="html5",
    )
    return bleach.clean(
        html_out,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRS,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )


def strip_html(text: str | None) -> str:
    """Plain text of an HTML or Markdown fragment, whitespace collapsed."""
    if not text:
        return ""
    stripped = bleach.clean(render_markdown(text), tags=set(), strip=True)
    return _WHITESPACE.sub(" ", html.unescape(stripped)).strip()
