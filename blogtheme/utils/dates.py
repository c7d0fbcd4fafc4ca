from __future__ import annotations

from datetime import datetime


def format_date(value: datetime | None) -> str:
    """Card date, e.g. ``Mar 4, 2024``."""
    if value is None:
        return ""
    return f"{value:%b} {value.day}, {value.year}"


def date_to_xmlschema(value: datetime | None) -> str:
    if value is None:
        return ""
    return value.isoformat()
