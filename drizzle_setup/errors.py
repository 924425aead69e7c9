"""Exceptions raised by the setup steps.

Each step wraps the underlying I/O or subprocess error in its own subclass so
the orchestrator can report which step failed with a single line.  Declining
the confirmation prompt is not an error and has no exception.
"""

from __future__ import annotations

STEP_LABELS: dict[str, str] = {
    "validate": "Project validation",
    "install": "Dependency installation",
    "templates": "Template generation",
    "manifest": "package.json update",
}


class SetupError(Exception):
    """Raised when a setup step fails irrecoverably."""

    step = "setup"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"{self.label}: {message}")

    @property
    def label(self) -> str:
        return STEP_LABELS.get(self.step, self.step)


class ValidationFailure(SetupError):
    """The target directory does not look like a Next.js project."""

    step = "validate"


class DependencyInstallFailure(SetupError):
    """The package manager exited non-zero, timed out, or could not start."""

    step = "install"


class TemplateWriteFailure(SetupError):
    """A template could not be rendered or written to disk."""

    step = "templates"


class ManifestPatchFailure(SetupError):
    """``package.json`` is missing, unparsable, or could not be rewritten."""

    step = "manifest"
