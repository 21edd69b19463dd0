"""Command-line entry point.

Usage::

    create-react-tailwind-app
    create-react-tailwind-app my-app
    create-react-tailwind-app my-app --yes
    python -m create_react_tailwind my-app -y
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from create_react_tailwind import __version__
from create_react_tailwind.config import Settings
from create_react_tailwind.exceptions import ProjectExistsError, ScaffoldError
from create_react_tailwind.prompts import resolve_config
from create_react_tailwind.scaffolder import ProjectGenerator
from create_react_tailwind.utils import (
    CommandRunner,
    console,
    print_banner,
    print_error,
    print_success,
    print_summary_table,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-react-tailwind-app",
        description="Create a new React 19 + Tailwind CSS v4 project with Vite",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-react-tailwind-app\n"
            "  create-react-tailwind-app my-app\n"
            "  create-react-tailwind-app my-app --yes\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        metavar="project-name",
        help="Name of your project",
    )
    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Skip all prompts and use defaults",
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=__version__,
    )
    return parser


def main(
    argv: list[str] | None = None,
    cwd: str | Path | None = None,
    runner: CommandRunner | None = None,
) -> None:
    """CLI entry point for ``create-react-tailwind-app``."""
    args = build_parser().parse_args(argv)

    print_banner("Creating a new React 19 + Tailwind CSS v4 project with Vite")

    try:
        settings = Settings.from_env()
        config = resolve_config(args.project_name, args.yes, settings)
    except ValidationError as exc:
        print_error("Invalid configuration")
        console.print(str(exc), markup=False)
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        print_error("Aborted.")
        sys.exit(1)

    print_summary_table(
        {
            "Project": config.project_name,
            "Language": config.language,
            "Package manager": config.package_manager.value,
        },
        title="Project settings",
    )

    generator = ProjectGenerator(
        config,
        cwd=Path(cwd) if cwd is not None else Path.cwd(),
        runner=runner,
        settings=settings,
    )

    # Create project directory
    try:
        with console.status("Creating project directory..."):
            generator.prepare_directory()
    except ProjectExistsError as exc:
        print_error(str(exc))
        sys.exit(1)
    except ScaffoldError as exc:
        print_error("Failed to create project directory")
        console.print(str(exc), markup=False)
        sys.exit(1)
    print_success(f"Created directory {config.project_name}")

    # Generate project files
    try:
        asyncio.run(generator.generate())
    except KeyboardInterrupt:
        print_error("Aborted.")
        sys.exit(1)
    except (ScaffoldError, OSError, ValueError) as exc:
        print_error("Failed to generate project files")
        console.print(f"{type(exc).__name__}: {exc}", markup=False)
        sys.exit(1)
    print_success("Project files generated")

    console.print()
    console.print("[bold green]Project created successfully![/bold green]")
    console.print()
    console.print("Next steps:")
    console.print(f"[cyan]  cd {config.project_name}[/cyan]")
    console.print(f"[cyan]  {generator.dev_command()}[/cyan]")
    console.print()


if __name__ == "__main__":
    main()
