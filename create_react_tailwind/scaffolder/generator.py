"""Main scaffolding orchestrator.

Takes a ``GenerationConfig`` and turns it into a React 19 + Tailwind CSS v4
project: ``create vite`` produces the base skeleton, the package manager
installs the dependencies, and the Tailwind configuration and a sample
component are layered on by direct file writes.

The steps run strictly in order.  Nothing is retried and nothing is rolled
back: if a step fails the project directory is left as it is and the error
propagates to the caller.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path
from typing import Any

from create_react_tailwind.config import GenerationConfig, Settings
from create_react_tailwind.exceptions import CommandError, ProjectExistsError, ScaffoldError
from create_react_tailwind.utils import (
    CommandRunner,
    SubprocessRunner,
    load_json,
    print_step,
    save_json,
)

from .package_managers import PackageManagerCommands, commands_for
from .patches import patch_entry_point, patch_manifest
from .templates import TemplateRenderer


class ProjectGenerator:
    """Creates one project under *cwd*.

    The working directory and the command runner are passed in explicitly so
    the whole pipeline can be exercised against a temporary directory and a
    fake runner.
    """

    def __init__(
        self,
        config: GenerationConfig,
        cwd: str | Path,
        runner: CommandRunner | None = None,
        settings: Settings | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.cwd = Path(cwd)
        self.runner = runner or SubprocessRunner()
        self.settings = settings or Settings()
        self.renderer = renderer or TemplateRenderer()
        self.commands: PackageManagerCommands = commands_for(config.package_manager)

    @property
    def project_path(self) -> Path:
        return self.cwd / self.config.project_name

    # -- Directory preparation ---------------------------------------------

    def prepare_directory(self) -> Path:
        """Create the (empty) project directory.

        Raises:
            ProjectExistsError: If the directory already exists.  Nothing is
                written in that case.
            ScaffoldError: If the directory cannot be created.
        """
        path = self.project_path
        if path.exists():
            raise ProjectExistsError(self.config.project_name)
        try:
            path.mkdir()
        except OSError as exc:
            raise ScaffoldError(f"Failed to create directory {path}: {exc}") from exc
        return path

    # -- Public API --------------------------------------------------------

    async def generate(self) -> Path:
        """Materialize the project.

        Returns:
            Path to the generated project root.
        """
        root = self.project_path
        ext = self.config.extension
        context = self._build_context()

        # 1. Let create-vite build the skeleton (it recreates the directory)
        await self._create_vite_project()

        # 2. Install the skeleton's own dependencies
        print_step("Installing base dependencies...")
        await self._run(self.commands.install_command(), root)

        # 3. Install Tailwind CSS and its PostCSS integration
        print_step("Installing Tailwind CSS and related packages...")
        await self._run(self.commands.add_command(self.settings.tailwind_packages), root)

        # 4. PostCSS configuration
        print_step("Creating PostCSS configuration file...")
        await self.renderer.render_to_file(
            "postcss.config.mjs.j2", root / "postcss.config.mjs", context
        )

        # 5. Tailwind CSS entry file
        await self.renderer.render_to_file(
            "src/index.css.j2", root / "src" / "index.css", context
        )

        # 6. Make sure the entry point loads the stylesheet
        await asyncio.to_thread(_patch_entry_file, root / "src" / f"main.{ext}")

        # 7. Sample component
        await self.renderer.render_to_file(
            "src/components/Example.j2",
            root / "src" / "components" / f"Example.{ext}",
            context,
        )

        # 8. Root component rendering the sample
        await self.renderer.render_to_file(
            "src/App.j2", root / "src" / f"App.{ext}", context
        )

        # 9. The default App stylesheet is no longer referenced
        await asyncio.to_thread(_remove_if_present, root / "src" / "App.css")

        # 10. Pin React in package.json
        await self._patch_package_json(root / "package.json")

        return root

    # -- Steps -------------------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the generation config."""
        return {
            "project_name": self.config.project_name,
            "typescript": self.config.typescript,
            "extension": self.config.extension,
        }

    async def _create_vite_project(self) -> None:
        print_step("Creating new Vite project with React template...")
        # create-vite refuses non-empty targets and recreates the directory itself
        if self.project_path.exists():
            await asyncio.to_thread(shutil.rmtree, self.project_path)
        cmd = self.commands.create_command(
            self.config.project_name, self.config.vite_template
        )
        await self._run(cmd, self.cwd)

    async def _patch_package_json(self, path: Path) -> None:
        manifest = await asyncio.to_thread(load_json, path)
        patch_manifest(manifest, self.settings.react_version)
        await save_json(manifest, path)

    async def _run(self, cmd: list[str], cwd: Path) -> None:
        returncode = await self.runner.run(cmd, cwd)
        if returncode != 0:
            raise CommandError(cmd, returncode)

    def dev_command(self) -> str:
        """The command a user runs to start the dev server."""
        return " ".join(self.commands.run_command("dev"))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _patch_entry_file(path: Path) -> None:
    content = path.read_text(encoding="utf-8")
    updated = patch_entry_point(content)
    if updated != content:
        path.write_text(updated, encoding="utf-8")


def _remove_if_present(path: Path) -> None:
    if path.exists():
        path.unlink()
