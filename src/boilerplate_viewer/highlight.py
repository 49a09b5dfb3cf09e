"""Regex-based syntax highlighting for the two snippet dialects.

The highlighter escapes its input first and then runs an ordered list of
rules over the escaped text. Each rule claims the spans it matches; a later
rule may only claim text that no earlier rule owns, and no rule may split
an escape entity. The markup is assembled once at the end, so inserted
``<span>`` tags are never seen by another rule.

Highlighting is not idempotent: feeding the output back in escapes the
markup itself. Call :func:`highlight` once per raw source text.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .markup import ENTITY_RE, escape

logger = logging.getLogger(__name__)


class Language(str, Enum):
    """Supported dialects."""

    PRISMA = "prisma"
    TYPESCRIPT = "typescript"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


DEFAULT_LANGUAGE = Language.PRISMA
FALLBACK_LANGUAGE = Language.TYPESCRIPT


class UnsupportedLanguage(ValueError):
    """Raised by strict highlighting when the language tag is unknown."""

    def __init__(self, tag: object) -> None:
        self.tag = tag
        choices = ", ".join(member.value for member in Language)
        super().__init__(f"unsupported language {tag!r} (expected one of: {choices})")


@dataclass(frozen=True)
class Rule:
    """A pattern and the inline style wrapped around each match."""

    kind: str
    pattern: re.Pattern[str]
    style: str

    def wrap(self, fragment: str) -> str:
        return f'<span style="{self.style}">{fragment}</span>'


# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------

COMMENT = "color: #6A9955;"
SCHEMA_KEYWORD = "color: #569CD6; font-weight: bold;"
SCRIPT_KEYWORD = "color: #C586C0;"
TYPE = "color: #4EC9B0;"
ANNOTATION = "color: #C586C0;"
CALL = "color: #DCDCAA;"
STRING = "color: #CE9178;"
NUMBER = "color: #B5CEA8;"


def _words(names: Iterable[str]) -> re.Pattern[str]:
    alternation = "|".join(re.escape(name) for name in names)
    return re.compile(rf"\b(?:{alternation})\b")


# Rules match escaped text, so quotes appear as entities.
_LINE_COMMENT = re.compile(r"//.*")
_DOUBLE_QUOTED = r"&quot;.*?&quot;"
_SINGLE_QUOTED = r"&#x27;.*?&#x27;"
_INTEGER = re.compile(r"\b\d+\b")

PRISMA_KEYWORDS = ("model", "enum", "generator", "datasource")
PRISMA_TYPES = ("String", "Int", "Boolean", "DateTime", "Json")
PRISMA_BUILTINS = ("now", "cuid", "uuid")

TYPESCRIPT_KEYWORDS = (
    "import", "from", "const", "let", "var", "async", "function", "await",
    "new", "if", "else", "return", "try", "catch", "for", "true", "false",
)
TYPESCRIPT_TYPES = ("PrismaClient", "Role", "User", "UnitPendidikan", "NavMenu")

PRISMA_RULES: tuple[Rule, ...] = (
    Rule("comment", _LINE_COMMENT, COMMENT),
    Rule("keyword", _words(PRISMA_KEYWORDS), SCHEMA_KEYWORD),
    Rule("type", _words(PRISMA_TYPES), TYPE),
    Rule("annotation", re.compile(r"@\w+"), ANNOTATION),
    Rule(
        "builtin-call",
        re.compile(rf"\b(?:{'|'.join(PRISMA_BUILTINS)})\(\)"),
        CALL,
    ),
    Rule("string", re.compile(_DOUBLE_QUOTED), STRING),
    Rule("number", _INTEGER, NUMBER),
)

# The call rule is a heuristic: any word directly followed by "(" that an
# earlier rule has not claimed, control-flow words included.
TYPESCRIPT_RULES: tuple[Rule, ...] = (
    Rule("comment", _LINE_COMMENT, COMMENT),
    Rule("keyword", _words(TYPESCRIPT_KEYWORDS), SCRIPT_KEYWORD),
    Rule("type", _words(TYPESCRIPT_TYPES), TYPE),
    Rule("function-call", re.compile(r"\b[a-zA-Z0-9_]+(?=\()"), CALL),
    Rule("string", re.compile(f"{_SINGLE_QUOTED}|{_DOUBLE_QUOTED}"), STRING),
    Rule("number", _INTEGER, NUMBER),
)

RULE_SETS: dict[Language, tuple[Rule, ...]] = {
    Language.PRISMA: PRISMA_RULES,
    Language.TYPESCRIPT: TYPESCRIPT_RULES,
}


def resolve_language(tag: Language | str | None, strict: bool = False) -> Language:
    """Map a language tag to a :class:`Language`.

    Unknown tags fall back to TypeScript highlighting unless ``strict`` is
    set, in which case :class:`UnsupportedLanguage` is raised.
    """
    try:
        return Language(tag)
    except ValueError:
        if strict:
            raise UnsupportedLanguage(tag) from None
        logger.debug("unknown language %r, falling back to %s", tag, FALLBACK_LANGUAGE.value)
        return FALLBACK_LANGUAGE


def claim_spans(text: str, rules: Iterable[Rule]) -> list[tuple[int, int, Rule]]:
    """Return the ``(start, end, rule)`` spans each rule owns in ``text``.

    Rules are tried in order. A match is dropped when it is empty, overlaps
    a span owned by an earlier rule, or starts or ends inside an entity.
    The result is sorted by start offset.
    """
    interior: set[int] = set()
    for m in ENTITY_RE.finditer(text):
        interior.update(range(m.start() + 1, m.end()))

    owned = bytearray(len(text))
    spans: list[tuple[int, int, Rule]] = []
    for rule in rules:
        for m in rule.pattern.finditer(text):
            start, end = m.span()
            if start == end or start in interior or end in interior:
                continue
            if any(owned[start:end]):
                continue
            owned[start:end] = b"\x01" * (end - start)
            spans.append((start, end, rule))

    spans.sort(key=lambda span: span[0])
    return spans


def highlight(
    text: str,
    language: Language | str | None = DEFAULT_LANGUAGE,
    strict: bool = False,
) -> str:
    """Escape ``text`` and wrap recognised tokens in styled spans.

    The result is safe to insert as the inner HTML of a ``<pre>`` element
    without further escaping.
    """
    rules = RULE_SETS[resolve_language(language, strict=strict)]
    escaped = escape(text)

    parts: list[str] = []
    pos = 0
    for start, end, rule in claim_spans(escaped, rules):
        parts.append(escaped[pos:start])
        parts.append(rule.wrap(escaped[start:end]))
        pos = end
    parts.append(escaped[pos:])
    return "".join(parts)
