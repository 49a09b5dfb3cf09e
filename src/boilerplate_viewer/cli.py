"""Command-line interface for the boilerplate snippet viewer."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .highlight import Language, UnsupportedLanguage, highlight, resolve_language
from .html_builder import build_html
from .snippets import SNIPPETS

DEFAULT_OUTPUT = "boilerplate.html"

USAGE = (
    "usage: boilerplate-viewer [output.html]\n"
    "       boilerplate-viewer --highlight <file> [prisma|typescript]"
)

_SCHEMA_SUFFIXES = {".prisma", ".sql", ".env"}


def guess_language(path: Path) -> Language:
    """Pick a dialect from a file name; schema-like files use Prisma rules."""
    if path.suffix in _SCHEMA_SUFFIXES or path.name.startswith(".env"):
        return Language.PRISMA
    return Language.TYPESCRIPT


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s - %(message)s")
    args = sys.argv[1:] if argv is None else argv

    if args and args[0] in ("-h", "--help"):
        print(USAGE)
        sys.exit(0)

    if args and args[0] == "--highlight":
        _highlight_file(args[1:])
        return

    if len(args) > 1:
        print(USAGE)
        sys.exit(1)

    outpath = Path(args[0]) if args else Path(DEFAULT_OUTPUT)
    html_content = build_html()

    try:
        outpath.write_text(html_content, encoding="utf-8")
    except OSError as exc:
        print(f"error: cannot write {outpath}: {exc}", file=sys.stderr)
        sys.exit(1)
    size = outpath.stat().st_size
    print(f"written to {outpath} ({size:,} bytes, {len(SNIPPETS)} snippets)")


def _highlight_file(args: list[str]) -> None:
    if not args or len(args) > 2:
        print(USAGE)
        sys.exit(1)

    inpath = Path(args[0])
    if not inpath.exists():
        print(f"error: {inpath} not found", file=sys.stderr)
        sys.exit(1)

    try:
        language = (
            resolve_language(args[1], strict=True) if len(args) == 2 else guess_language(inpath)
        )
    except UnsupportedLanguage as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(highlight(inpath.read_text(encoding="utf-8"), language))


if __name__ == "__main__":
    main()
