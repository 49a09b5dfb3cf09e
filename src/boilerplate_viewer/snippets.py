"""Registry of the bundled boilerplate snippets shown as viewer tabs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources

from .highlight import Language, highlight

logger = logging.getLogger(__name__)

SNIPPET_DIR = "snippets"


class UnknownSnippet(KeyError):
    """Raised when a tab key does not name a registered snippet."""


@dataclass(frozen=True)
class Snippet:
    key: str
    label: str
    filename: str
    language: Language
    next_steps: tuple[str, ...] = ()

    def load(self) -> str:
        """Read the snippet text from the package resources."""
        logger.debug("loading snippet %s from %s", self.key, self.filename)
        resource = resources.files(__package__).joinpath(SNIPPET_DIR).joinpath(self.filename)
        return resource.read_text(encoding="utf-8")

    def render(self, source: str | None = None) -> str:
        """Return the highlighted markup for this snippet.

        ``source`` skips the resource read when the caller already loaded it.
        """
        return highlight(self.load() if source is None else source, self.language)


@dataclass(frozen=True)
class Feature:
    title: str
    description: str


# Tab order matches the viewer's tab bar. Next-step notes use `code` and
# **bold** inline markup.
SNIPPETS: tuple[Snippet, ...] = (
    Snippet(
        "schema",
        "schema.prisma",
        "schema.prisma",
        Language.PRISMA,
        (
            "Copy the schema code.",
            "Paste into `prisma/schema.prisma`.",
            "Run `npx prisma generate`.",
        ),
    ),
    Snippet(
        "sql",
        "SQL Setup",
        "setup.sql",
        Language.PRISMA,
        (
            "**Manual Setup (Recommended if no terminal):**",
            "Copy the entire SQL code block.",
            "Go to your NeonDB Dashboard → SQL Editor.",
            "Paste and Run. This creates tables and inserts data instantly.",
        ),
    ),
    Snippet(
        "seed",
        "seed.ts",
        "seed.ts",
        Language.TYPESCRIPT,
        (
            "(Optional) If you used the SQL tab, you can skip this.",
            "Otherwise, use this for automated seeding via CLI later.",
        ),
    ),
    Snippet(
        "actions",
        "actions.ts",
        "actions.ts",
        Language.TYPESCRIPT,
        (
            "Copy the code.",
            "Create file `app/actions.ts`.",
            "Import these functions in your Client Components or utilize them in Server Components.",
            "Uncomment the Auth/Security check lines once your Auth provider (e.g. NextAuth) is installed.",
        ),
    ),
    Snippet(
        "ui",
        "UI Components",
        "ui.tsx",
        Language.TYPESCRIPT,
        (
            "Copy the code block.",
            "Split into 3 separate files as indicated by the comments.",
            "Ensure your `@/lib/prisma` singleton is set up.",
            "Test by navigating to `/unit/pondok-pesantren`.",
        ),
    ),
    Snippet(
        "admin",
        "Admin CMS",
        "admin.tsx",
        Language.TYPESCRIPT,
        (
            "Create the `app/admin` directory structure.",
            "Paste the **AdminLayout** code into `app/admin/layout.tsx`.",
            "Enable **Authentication** middleware to protect the route (uncomment the RBAC logic).",
            "Verify that the **Page Builder** form successfully updates the database via Server Actions.",
        ),
    ),
    Snippet(
        "env",
        "Final Setup (.env)",
        "env.example",
        Language.PRISMA,
        (
            "Create a file named `.env` in your project root.",
            "Copy the variables above.",
            "Replace `YOUR_PASSWORD` and host details with your actual NeonDB credentials.",
            "Generate a secret key for Auth and paste it.",
        ),
    ),
)

FEATURES: tuple[Feature, ...] = (
    Feature("RBAC System", "Role-based access with SUPERADMIN & EDITOR enums."),
    Feature("Education Units", "Structured models for Pondok, SMP, & MA with relational programs."),
    Feature("Page Builder", "JSON-based LandingSection for dynamic layout management."),
    Feature("Global Config", "Singleton-pattern SiteSettings for easy frontend configuration."),
)

DEFAULT_TAB = SNIPPETS[0].key


def get_snippet(key: str, snippets: tuple[Snippet, ...] = SNIPPETS) -> Snippet:
    """Look up a snippet by tab key."""
    for snippet in snippets:
        if snippet.key == key:
            return snippet
    raise UnknownSnippet(key)
