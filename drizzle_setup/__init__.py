"""next-drizzle-setup -- add Drizzle ORM with PostgreSQL to a Next.js project.

The ``init`` command validates the target project, installs the Drizzle
packages, writes configuration/schema/example files and registers ``db:*``
scripts in ``package.json``.

Quick usage::

    import asyncio
    from drizzle_setup import InvocationOptions, SetupPipeline

    outcome = asyncio.run(
        SetupPipeline(InvocationOptions(skip_confirmation=True)).run()
    )
"""

from drizzle_setup.config import DatabaseConfig, InvocationOptions, SetupConfig
from drizzle_setup.pipeline import SetupOutcome, SetupPipeline, SetupStatus

__version__ = "1.0.0"

__all__ = [
    "DatabaseConfig",
    "InvocationOptions",
    "SetupConfig",
    "SetupOutcome",
    "SetupPipeline",
    "SetupStatus",
    "__version__",
]
