import json
import re

import pytest

from boilerplate_viewer.html_builder import build_html
from boilerplate_viewer.snippets import SNIPPETS, UnknownSnippet

_SOURCES_RE = re.compile(
    r'<script id="snippet-sources" type="application/json">(.*?)</script>', re.DOTALL
)


def _panel_tags(page):
    return re.findall(r'<div class="code-panel" data-tab="(\w+)"( hidden)?>', page)


def test_page_has_a_tab_per_snippet():
    page = build_html()
    assert page.startswith("<!DOCTYPE html>")
    for snippet in SNIPPETS:
        assert f'data-tab="{snippet.key}"' in page
    assert "Final Setup (.env)" in page
    assert "Copy Code" in page


def test_only_active_panel_is_visible():
    page = build_html(active="seed")
    panels = dict(_panel_tags(page))
    assert panels.pop("seed") == ""
    assert set(panels.values()) == {" hidden"}
    assert 'class="tab-btn active" data-tab="seed"' in page


def test_panels_contain_highlighted_markup():
    page = build_html()
    assert '<span style="color: #569CD6; font-weight: bold;">model</span>' in page
    assert '<span style="color: #C586C0;">await</span>' in page


def test_sources_are_embedded_raw():
    page = build_html()
    payload = _SOURCES_RE.search(page).group(1)
    assert "</" not in payload
    sources = json.loads(payload)
    for snippet in SNIPPETS:
        assert sources[snippet.key] == snippet.load()


def test_next_steps_render_inline_markup():
    page = build_html()
    assert "<code>npx prisma generate</code>" in page
    assert "<strong>AdminLayout</strong>" in page


def test_subset_of_snippets():
    page = build_html(snippets=SNIPPETS[:2], active="sql")
    assert [key for key, _ in _panel_tags(page)] == ["schema", "sql"]


def test_unknown_active_tab():
    with pytest.raises(UnknownSnippet):
        build_html(active="nope")


def test_title_is_escaped():
    page = build_html(title="<Tasbih & Co>")
    assert "<title>&lt;Tasbih &amp; Co&gt;" in page


def test_title_uses_plain_separator():
    page = build_html()
    assert "<title>Cahaya Tasbih | Backend Schema Architect</title>" in page


def test_panel_markup_comes_from_snippet_render():
    page = build_html(snippets=SNIPPETS[:1])
    assert SNIPPETS[0].render() in page
