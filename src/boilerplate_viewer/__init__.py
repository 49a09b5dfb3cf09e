"""Static viewer for CMS boilerplate snippets with a small regex highlighter."""

from .highlight import Language, UnsupportedLanguage, highlight

__all__ = ["Language", "UnsupportedLanguage", "highlight"]
