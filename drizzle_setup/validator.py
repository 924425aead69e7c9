"""Checks that a directory looks like a Next.js project."""

from __future__ import annotations

from pathlib import Path

from drizzle_setup.utils import load_json, print_warning

MANIFEST_FILENAME = "package.json"
FRAMEWORK_DEPENDENCY = "next"
FRAMEWORK_CONFIG_FILES: tuple[str, ...] = (
    "next.config.js",
    "next.config.mjs",
    "next.config.ts",
)


def has_framework_dependency(manifest: dict) -> bool:
    """Return ``True`` if ``next`` is a production or development dependency."""
    for section in ("dependencies", "devDependencies"):
        deps = manifest.get(section)
        if isinstance(deps, dict) and deps.get(FRAMEWORK_DEPENDENCY):
            return True
    return False


def has_framework_config(directory: Path) -> bool:
    """Return ``True`` if any recognised ``next.config.*`` file exists."""
    return any((directory / name).exists() for name in FRAMEWORK_CONFIG_FILES)


def is_valid_target(directory: str | Path) -> bool:
    """All-or-nothing check that *directory* is a Next.js project.

    Requires ``package.json`` to exist and parse, ``next`` to be listed in
    ``dependencies`` or ``devDependencies``, and a ``next.config.{js,mjs,ts}``
    file to be present.  Never raises: read and parse errors yield ``False``.
    """
    project_dir = Path(directory)
    manifest_path = project_dir / MANIFEST_FILENAME
    try:
        if not manifest_path.is_file():
            return False
        manifest = load_json(manifest_path)
        if not has_framework_dependency(manifest):
            return False
        return has_framework_config(project_dir)
    except (OSError, ValueError, RecursionError) as exc:
        print_warning(f"Error validating Next.js project: {exc}")
        return False
