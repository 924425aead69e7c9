"""Drizzle scaffolder -- renders the fixed set of Drizzle files.

Quick usage::

    from drizzle_setup.config import DatabaseConfig
    from drizzle_setup.scaffolder import ProjectGenerator

    generator = ProjectGenerator(DatabaseConfig(database_url="postgresql://..."))
    written = await generator.generate("/path/to/next-app")
"""

from drizzle_setup.scaffolder.generator import PROJECT_DIRECTORIES, ProjectGenerator
from drizzle_setup.scaffolder.templates import (
    TEMPLATE_FILES,
    TemplateFile,
    TemplateRenderer,
)

__all__ = [
    "PROJECT_DIRECTORIES",
    "TEMPLATE_FILES",
    "ProjectGenerator",
    "TemplateFile",
    "TemplateRenderer",
]
