"""Slug generation utilities."""
from __future__ import annotations

import re
import unicodedata

SLUGIFY_MODES = ("raw", "default", "pretty")

# Characters outside these classes are collapsed into a single hyphen
_MODE_PATTERNS = {
    "raw": re.compile(r"\s+"),
    "default": re.compile(r"[^\w]+|_+"),
    "pretty": re.compile(r"[^\w._~!$&'()+,;=@]+|_+"),
}


def slugify(text: str | None, mode: str = "default") -> str:
    """
    Convert a category or post name to a URL path segment the way Jekyll's
    ``slugify`` filter does.

    Args:
        text: The text to convert to a slug
        mode: ``"raw"`` only collapses whitespace, ``"default"`` replaces every
            run of non-alphanumerics, ``"pretty"`` keeps URL-safe punctuation

    Returns:
        A lowercase slug without leading or trailing hyphens
    """
    if not text:
        return ""
    if mode not in _MODE_PATTERNS:
        raise ValueError(f"unknown slugify mode: {mode}")

    # Drop accents so "Café" and "Cafe" share a slug
    text = unicodedata.normalize("NFKD", text)
    text = "".join(ch for ch in text if not unicodedata.combining(ch))

    text = _MODE_PATTERNS[mode].sub("-", text)
    return text.strip("-").lower()


def titleize_slug(slug: str) -> str:
    """Title for a post without one: ``angular-one`` becomes ``Angular One``."""
    return " ".join(word.capitalize() for word in slug.split("-") if word)
