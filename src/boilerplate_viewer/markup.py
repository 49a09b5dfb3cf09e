"""Escaping and lightweight inline markup for the snippet viewer."""

from __future__ import annotations

import html
import re

# Entities produced by escape(); highlighting must never split one of these.
ENTITY_RE = re.compile(r"&(?:amp|lt|gt|quot|#x27);")


def escape(text: str | None) -> str:
    """HTML-escape ``&``, ``<``, ``>``, ``"`` and ``'``.

    Returns an empty string for None.
    """
    return html.escape(str(text), quote=True) if text else ""


def render_inline(text: str) -> str:
    """Convert inline code spans and bold text to HTML.

    Only used for the short "next steps" notes, so block constructs are
    not supported.
    """
    escaped = escape(text)

    # Inline code
    escaped = re.sub(r"`([^`]+)`", r"<code>\1</code>", escaped)

    # Bold
    escaped = re.sub(r"\*\*(.+?)\*\*", r"<strong>\1</strong>", escaped)

    return escaped
