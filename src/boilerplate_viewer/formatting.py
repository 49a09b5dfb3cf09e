"""Small text formatting helpers for the generated page."""

from __future__ import annotations

from datetime import datetime


def format_line_count(text: str) -> str:
    """Describe the number of lines in ``text`` for a tab caption."""
    count = len(text.splitlines())
    return f"{count:,} line" if count == 1 else f"{count:,} lines"


def format_generated(dt: datetime | None = None) -> str:
    """Format the page generation time as YYYY-MM-DD HH:MM."""
    return (dt or datetime.now()).strftime("%Y-%m-%d %H:%M")
