"""Writes the Drizzle configuration, schema and example files.

Takes a ``DatabaseConfig`` and renders every entry of ``TEMPLATE_FILES`` into
a target Next.js project.  The file set is fixed; only the connection string
in ``drizzle.config.ts`` and ``.env.example`` depends on the config.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import TemplateError

from drizzle_setup.config import DatabaseConfig
from drizzle_setup.errors import TemplateWriteFailure
from drizzle_setup.utils import ensure_dir

from .templates import TEMPLATE_FILES, TemplateRenderer

# Directories that must exist before any file is written.
PROJECT_DIRECTORIES: tuple[str, ...] = (
    "src/server/db/schema",
    "src/server/db/migrations",
    "src/server/actions",
    "src/app/examples",
)


class ProjectGenerator:
    """Renders the fixed set of Drizzle files into a project directory."""

    def __init__(
        self,
        config: DatabaseConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or DatabaseConfig()
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(self, project_dir: str | Path) -> list[Path]:
        """Create the directory tree and write every template.

        Existing files at the same paths are overwritten.  A failure stops
        the remaining writes; files already written are left in place.

        Returns:
            The written file paths, in registry order.

        Raises:
            TemplateWriteFailure: On any directory, render or write error.
        """
        root = Path(project_dir)
        context = self._build_context()
        try:
            await self._create_directory_structure(root)
            written: list[Path] = []
            for entry in TEMPLATE_FILES:
                path = await self.renderer.render_to_file(
                    entry.template_name, root / entry.output_path, context
                )
                written.append(path)
        except (OSError, TemplateError) as exc:
            raise TemplateWriteFailure(str(exc)) from exc
        return written

    def render_all(self) -> dict[str, str]:
        """Render every template in memory, keyed by output path."""
        context = self._build_context()
        return {
            entry.output_path: self.renderer.render(entry.template_name, context)
            for entry in TEMPLATE_FILES
        }

    # -- Internals ---------------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        return self.config.as_context()

    async def _create_directory_structure(self, root: Path) -> None:
        """Create the nested source directories (no-op where they exist)."""

        async def _mkdir(d: str) -> None:
            await asyncio.to_thread(ensure_dir, root / d)

        await asyncio.gather(*[_mkdir(d) for d in PROJECT_DIRECTORIES])
