"""Installs the Drizzle packages through the project's package manager."""

from __future__ import annotations

from pathlib import Path

from drizzle_setup.config import SetupConfig
from drizzle_setup.errors import DependencyInstallFailure
from drizzle_setup.utils import run_command


class DependencyInstaller:
    """Runs ``<pm> add`` for the production and development dependency lists."""

    def __init__(self, config: SetupConfig | None = None) -> None:
        self.config = config or SetupConfig()

    async def install(self, project_dir: str | Path) -> list[list[str]]:
        """Install all dependencies into *project_dir*.

        Commands run one after the other; the first failure stops the step.

        Returns:
            The commands that were executed.

        Raises:
            DependencyInstallFailure: If the package manager is missing, exits
                non-zero, or times out.
        """
        executed: list[list[str]] = []
        for cmd in self.config.install_commands():
            try:
                returncode, _stdout, stderr = await run_command(
                    cmd, cwd=project_dir, timeout=self.config.install_timeout
                )
            except OSError as exc:
                raise DependencyInstallFailure(
                    f"could not run {cmd[0]!r}: {exc}"
                ) from exc

            if returncode != 0:
                detail = stderr or f"exit code {returncode}"
                raise DependencyInstallFailure(f"`{' '.join(cmd)}` failed: {detail}")
            executed.append(cmd)
        return executed
