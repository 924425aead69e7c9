"""Jinja2 template rendering for the Drizzle scaffolding.

Provides the TemplateRenderer class, which loads Jinja2 templates from the
``drizzle_setup/scaffolder/templates/`` directory, and ``TEMPLATE_FILES``, the
static registry mapping each generated file to the template that produces
it.  Rendering is a pure function of the context built from
:class:`~drizzle_setup.config.DatabaseConfig`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, NamedTuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from drizzle_setup.utils import write_text_file


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TemplateFile(NamedTuple):
    """One generated file: where it goes and which template renders it."""

    output_path: str
    template_name: str


TEMPLATE_FILES: tuple[TemplateFile, ...] = (
    TemplateFile("drizzle.config.ts", "drizzle.config.ts.j2"),
    TemplateFile(".env.example", "env.example.j2"),
    TemplateFile("src/env.ts", "src/env.ts.j2"),
    TemplateFile("src/server/db/index.ts", "src/server/db/index.ts.j2"),
    TemplateFile("src/server/db/seed.ts", "src/server/db/seed.ts.j2"),
    TemplateFile("src/server/db/schema/index.ts", "src/server/db/schema/index.ts.j2"),
    TemplateFile("src/server/db/schema/users.ts", "src/server/db/schema/users.ts.j2"),
    TemplateFile("src/server/db/schema/posts.ts", "src/server/db/schema/posts.ts.j2"),
    TemplateFile(
        "src/server/db/migrations/README.md",
        "src/server/db/migrations/README.md.j2",
    ),
    TemplateFile("src/server/actions/users.ts", "src/server/actions/users.ts.j2"),
    TemplateFile("src/server/actions/posts.ts", "src/server/actions/posts.ts.j2"),
    TemplateFile("src/app/examples/page.tsx", "src/app/examples/page.tsx.j2"),
)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the Jinja2 templates shipped with the scaffolder.

    Undefined variables raise instead of rendering as empty strings, so a
    missing context key surfaces as a template error.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        self.env.filters["dotenv_quote"] = _dotenv_quote_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"src/server/db/index.ts.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and overwrite *output_path* with the result.

        The parent directory must already exist.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await asyncio.to_thread(write_text_file, out, content)
        return out

    def list_templates(self) -> list[str]:
        """Return a sorted list of all ``.j2`` template paths."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in self.template_dir.rglob("*.j2")
        )


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

_DOTENV_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r"}


def _dotenv_quote_filter(value: str) -> str:
    """Render *value* as a double-quoted ``.env`` value.

    Backslashes, quotes and line breaks are escaped so the value stays on one
    line and is read back unchanged by dotenv parsers.
    """
    escaped = "".join(_DOTENV_ESCAPES.get(ch, ch) for ch in str(value))
    return f'"{escaped}"'
