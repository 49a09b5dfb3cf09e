"""Build a self-contained HTML viewer for the bundled boilerplate snippets."""

from __future__ import annotations

import json
from importlib import resources

from .formatting import format_generated, format_line_count
from .markup import escape, render_inline
from .snippets import DEFAULT_TAB, FEATURES, SNIPPETS, Feature, Snippet, get_snippet

DEFAULT_TITLE = "Cahaya Tasbih"
DEFAULT_SUBTITLE = "Backend Schema Architect"
BADGES = ("NeonDB Ready", "Prisma 5.x")


def _load_asset(name: str) -> str:
    """Load a bundled CSS or JS asset from the package."""
    return resources.files(__package__).joinpath(name).read_text(encoding="utf-8")


def build_html(
    snippets: tuple[Snippet, ...] = SNIPPETS,
    active: str = DEFAULT_TAB,
    features: tuple[Feature, ...] = FEATURES,
    title: str = DEFAULT_TITLE,
    subtitle: str = DEFAULT_SUBTITLE,
) -> str:
    """Build a self-contained HTML string with one tab per snippet.

    Raises UnknownSnippet if ``active`` is not one of the snippet keys.
    """
    get_snippet(active, snippets)

    tabs: list[str] = []
    panels: list[str] = []
    steps: list[str] = []
    sources: dict[str, str] = {}

    for snippet in snippets:
        source = snippet.load()
        sources[snippet.key] = source
        is_active = snippet.key == active
        _render_tab(snippet, is_active, tabs)
        _render_panel(snippet, source, is_active, panels)
        _render_next_steps(snippet, is_active, steps)

    return _HTML_TEMPLATE.format(
        title=escape(title),
        subtitle=escape(subtitle),
        css=_load_asset("style.css"),
        js=_load_asset("viewer.js"),
        badges_html="".join(f'<span class="badge">{escape(b)}</span>' for b in BADGES),
        features_html="\n".join(_render_feature(f) for f in features),
        steps_html="\n".join(steps),
        tabs_html="\n".join(tabs),
        panels_html="\n".join(panels),
        sources_json=_script_json(sources),
        generated=format_generated(),
    )


def _script_json(data: dict[str, str]) -> str:
    # "<" is escaped so the payload cannot close the <script> element.
    return json.dumps(data).replace("<", "\\u003c")


# ---------------------------------------------------------------------------
# Page fragments
# ---------------------------------------------------------------------------

def _render_tab(snippet, is_active, tabs):
    active_class = " active" if is_active else ""
    tabs.append(
        f'<button class="tab-btn{active_class}" data-tab="{escape(snippet.key)}" '
        f'onclick="selectTab(this.dataset.tab)">{escape(snippet.label)}</button>'
    )


def _render_panel(snippet, source, is_active, panels):
    hidden = "" if is_active else " hidden"
    panels.append(
        f'<div class="code-panel" data-tab="{escape(snippet.key)}"{hidden}>'
        f'<div class="code-meta">{escape(snippet.filename)} · '
        f"{escape(snippet.language.value)} · {format_line_count(source)}</div>"
        f'<pre class="code-block"><code>{snippet.render(source)}</code></pre>'
        f"</div>"
    )


def _render_next_steps(snippet, is_active, steps):
    hidden = "" if is_active else " hidden"
    items = "".join(f"<li>{render_inline(step)}</li>" for step in snippet.next_steps)
    steps.append(
        f'<ol class="next-steps" data-tab="{escape(snippet.key)}"{hidden}>{items}</ol>'
    )


def _render_feature(feature):
    return (
        f'<div class="feature-item">'
        f"<h4>{escape(feature.title)}</h4>"
        f"<p>{escape(feature.description)}</p>"
        f"</div>"
    )


# ---------------------------------------------------------------------------
# HTML shell template
# ---------------------------------------------------------------------------

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title} | {subtitle}</title>
  <style>{css}</style>
</head>
<body>
  <header class="header">
    <div class="brand">
      <h1>{title}</h1>
      <p class="subtitle">{subtitle}</p>
    </div>
    <div class="badges">{badges_html}</div>
  </header>
  <main id="app">
    <aside id="sidebar">
      <section class="card">
        <h2>Schema Overview</h2>
        <p class="overview">This schema is optimized for a Next.js App Router project using NeonDB (PostgreSQL).
        It implements RBAC for security and JSONB fields for page builder flexibility.</p>
        <div class="features">{features_html}</div>
      </section>
      <section class="card next-steps-card">
        <h3>Next Steps</h3>
        {steps_html}
      </section>
    </aside>
    <section id="viewer">
      <div class="toolbar">
        <div class="tab-bar">{tabs_html}</div>
        <button id="copy-btn" class="copy-btn" onclick="copyActive(this)">Copy Code</button>
      </div>
      <div class="code-container">{panels_html}</div>
    </section>
  </main>
  <div class="footer">Generated {generated}</div>
  <script id="snippet-sources" type="application/json">{sources_json}</script>
  <script>{js}</script>
</body>
</html>"""
