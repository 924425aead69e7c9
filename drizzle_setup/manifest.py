"""Adds the ``db:*`` scripts to the target project's ``package.json``."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from drizzle_setup.errors import ManifestPatchFailure
from drizzle_setup.utils import load_json, save_json
from drizzle_setup.validator import MANIFEST_FILENAME

DB_SCRIPTS: dict[str, str] = {
    "db:generate": "drizzle-kit generate",
    "db:push": "drizzle-kit push",
    "db:studio": "drizzle-kit studio",
    "db:seed": "tsx src/server/db/seed.ts",
}


def merge_scripts(manifest: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of *manifest* with ``DB_SCRIPTS`` applied over ``scripts``.

    Existing scripts with the same names are overwritten; every other script
    and every other manifest key is kept in its original order.
    """
    existing = manifest.get("scripts") or {}
    if not isinstance(existing, dict):
        raise ValueError("'scripts' is not an object")
    return {**manifest, "scripts": {**existing, **DB_SCRIPTS}}


async def patch_scripts(project_dir: str | Path) -> dict[str, str]:
    """Merge ``DB_SCRIPTS`` into ``<project_dir>/package.json`` and rewrite it.

    Returns:
        The resulting ``scripts`` mapping.

    Raises:
        ManifestPatchFailure: If the manifest is missing, unparsable, or the
            write-back fails.
    """
    manifest_path = Path(project_dir) / MANIFEST_FILENAME
    try:
        manifest = await asyncio.to_thread(load_json, manifest_path)
        patched = merge_scripts(manifest)
        await save_json(patched, manifest_path)
    except (OSError, ValueError) as exc:
        raise ManifestPatchFailure(f"{manifest_path}: {exc}") from exc
    return patched["scripts"]
