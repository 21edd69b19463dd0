"""Project scaffolder -- layers Tailwind CSS onto a fresh Vite + React project.

Quick usage::

    from create_react_tailwind.config import GenerationConfig
    from create_react_tailwind.scaffolder import ProjectGenerator

    config = GenerationConfig(project_name="my-app", typescript=True)
    generator = ProjectGenerator(config, cwd=Path.cwd())
    generator.prepare_directory()
    project_path = await generator.generate()
"""

from create_react_tailwind.scaffolder.generator import ProjectGenerator
from create_react_tailwind.scaffolder.package_managers import (
    PackageManagerCommands,
    commands_for,
)
from create_react_tailwind.scaffolder.templates import TemplateRenderer

__all__ = [
    "PackageManagerCommands",
    "ProjectGenerator",
    "TemplateRenderer",
    "commands_for",
]
