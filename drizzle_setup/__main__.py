"""Allow ``python -m drizzle_setup``."""

from drizzle_setup.cli import run

run()
