"""Interactive input resolution.

Merges the positional project name, the ``--yes`` flag and (when needed)
Rich prompts into a finalized :class:`GenerationConfig`.
"""

from __future__ import annotations

from rich.prompt import Confirm, Prompt

from create_react_tailwind.config import (
    PROJECT_NAME_HINT,
    GenerationConfig,
    PackageManager,
    Settings,
    validate_project_name,
)
from create_react_tailwind.utils import console, print_error


def ask_project_name(default: str) -> str:
    """Ask for the project name until a valid one is entered."""
    while True:
        answer = Prompt.ask(
            "What is the name of your project?",
            default=default,
            console=console,
        )
        if validate_project_name(answer):
            return answer
        print_error(PROJECT_NAME_HINT)


def resolve_config(
    project_name: str | None,
    yes: bool,
    settings: Settings | None = None,
) -> GenerationConfig:
    """Produce the configuration for this run.

    With both a project name and ``yes`` no prompts are shown and the defaults
    (TypeScript, default package manager) are used.  Otherwise the user is
    asked for the name, the language and the package manager.
    """
    settings = settings or Settings()

    if project_name and yes:
        return GenerationConfig(
            project_name=project_name,
            typescript=True,
            package_manager=settings.default_package_manager,
        )

    name = ask_project_name(project_name or settings.default_project_name)
    typescript = Confirm.ask(
        "Would you like to use TypeScript?",
        default=True,
        console=console,
    )
    manager = Prompt.ask(
        "Which package manager do you want to use?",
        choices=PackageManager.choices(),
        default=settings.default_package_manager.value,
        console=console,
    )
    return GenerationConfig(
        project_name=name,
        typescript=typescript,
        package_manager=PackageManager(manager),
    )
