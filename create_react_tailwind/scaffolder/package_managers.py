"""Command templates for each supported package manager.

Each manager has its own non-interactive syntax for ``create vite`` and for
adding dependencies.  The table below is the single place those differences
live; the generator only ever asks for a command by purpose.
"""

from __future__ import annotations

from dataclasses import dataclass

from create_react_tailwind.config import PackageManager


@dataclass(frozen=True)
class PackageManagerCommands:
    """The four command templates of one package manager.

    ``create`` may contain ``{name}`` and ``{template}`` placeholders.
    """

    manager: PackageManager
    create: tuple[str, ...]
    install: tuple[str, ...]
    add: tuple[str, ...]
    run: tuple[str, ...]

    def create_command(self, project_name: str, template: str) -> list[str]:
        """Return the ``create vite`` invocation for *project_name*."""
        return [
            part.format(name=project_name, template=template) for part in self.create
        ]

    def install_command(self) -> list[str]:
        return list(self.install)

    def add_command(self, packages: list[str] | tuple[str, ...]) -> list[str]:
        return [*self.add, *packages]

    def run_command(self, script: str) -> list[str]:
        return [*self.run, script]


_COMMANDS: dict[PackageManager, PackageManagerCommands] = {
    PackageManager.NPM: PackageManagerCommands(
        manager=PackageManager.NPM,
        create=("npm", "create", "vite@latest", "{name}", "--", "--template", "{template}"),
        install=("npm", "install"),
        add=("npm", "install"),
        run=("npm", "run"),
    ),
    PackageManager.YARN: PackageManagerCommands(
        manager=PackageManager.YARN,
        create=("yarn", "create", "vite", "{name}", "--template", "{template}"),
        install=("yarn",),
        add=("yarn", "add"),
        run=("yarn",),
    ),
    PackageManager.PNPM: PackageManagerCommands(
        manager=PackageManager.PNPM,
        create=("pnpm", "create", "vite", "{name}", "--template", "{template}"),
        install=("pnpm", "install"),
        add=("pnpm", "add"),
        run=("pnpm",),
    ),
}


def commands_for(manager: PackageManager | str) -> PackageManagerCommands:
    """Look up the command record for *manager*."""
    return _COMMANDS[PackageManager(manager)]
