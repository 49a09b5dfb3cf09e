import pytest

from boilerplate_viewer.highlight import Language
from boilerplate_viewer.snippets import (
    DEFAULT_TAB,
    FEATURES,
    SNIPPETS,
    UnknownSnippet,
    get_snippet,
)


def test_tab_order():
    assert [s.key for s in SNIPPETS] == ["schema", "sql", "seed", "actions", "ui", "admin", "env"]
    assert DEFAULT_TAB == "schema"


def test_schema_like_tabs_use_prisma_rules():
    languages = {s.key: s.language for s in SNIPPETS}
    assert languages["schema"] is Language.PRISMA
    assert languages["sql"] is Language.PRISMA
    assert languages["env"] is Language.PRISMA
    for key in ("seed", "actions", "ui", "admin"):
        assert languages[key] is Language.TYPESCRIPT


@pytest.mark.parametrize("snippet", SNIPPETS, ids=lambda s: s.key)
def test_every_snippet_loads(snippet):
    text = snippet.load()
    assert text.strip()
    assert snippet.next_steps


def test_snippet_contents():
    assert "model User {" in get_snippet("schema").load()
    assert "new PrismaClient()" in get_snippet("seed").load()
    assert "DATABASE_URL=" in get_snippet("env").load()
    assert 'CREATE TABLE "User"' in get_snippet("sql").load()


def test_render_highlights_snippet():
    out = get_snippet("schema").render()
    assert '<span style="color: #569CD6; font-weight: bold;">model</span>' in out


def test_unknown_snippet():
    with pytest.raises(UnknownSnippet):
        get_snippet("missing")
    with pytest.raises(KeyError):
        get_snippet("missing")


def test_features():
    assert [f.title for f in FEATURES] == [
        "RBAC System",
        "Education Units",
        "Page Builder",
        "Global Config",
    ]


def test_snippets_have_no_trailing_newline_padding():
    assert get_snippet("schema").load().endswith("}")
    assert get_snippet("seed").load().endswith("})")
    env = get_snippet("env").load()
    assert env.endswith('"vercel_blob_rw_..."\n')
    assert not env.endswith("\n\n")


def test_render_accepts_preloaded_source():
    snippet = get_snippet("seed")
    assert snippet.render("const a = 1") == '<span style="color: #C586C0;">const</span> a = <span style="color: #B5CEA8;">1</span>'
    assert snippet.render() == snippet.render(snippet.load())
