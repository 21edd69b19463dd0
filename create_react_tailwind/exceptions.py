"""Errors raised while scaffolding a project.

Every failure is fatal for the run; the CLI reports it and exits with status 1.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Raised when a scaffolding step fails irrecoverably."""


class ProjectExistsError(ScaffoldError):
    """Raised when the target project directory already exists."""

    def __init__(self, project_name: str) -> None:
        self.project_name = project_name
        super().__init__(f"A folder named {project_name} already exists.")


class CommandError(ScaffoldError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"Command failed (exit {returncode}): {' '.join(command)}"
        )
