"""create-react-tailwind-app configuration.

Typed configuration for a single scaffolding run. All settings use Pydantic v2
models so they are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

PROJECT_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")

PROJECT_NAME_HINT = (
    "Project name may only include letters, numbers, underscores and hashes."
)


def validate_project_name(name: str) -> bool:
    """Return ``True`` if *name* is a usable project/directory name.

    Only letters, digits, underscores and hyphens are accepted, and the name
    must not be empty.
    """
    return PROJECT_NAME_PATTERN.fullmatch(name) is not None


class PackageManager(str, Enum):
    """Package manager used to run the external generator and installs."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @classmethod
    def choices(cls) -> list[str]:
        """Return the selectable values in prompt order (default first)."""
        return [member.value for member in cls]


class GenerationConfig(BaseModel):
    """The finalized answers for one project generation."""

    project_name: str = Field(..., description="Directory and package name")
    typescript: bool = Field(default=True, description="Use the typed template variant")
    package_manager: PackageManager = Field(default=PackageManager.NPM)

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        if not validate_project_name(value):
            raise ValueError(PROJECT_NAME_HINT)
        return value

    @property
    def vite_template(self) -> str:
        """Name of the ``create vite`` template to request."""
        return "react-ts" if self.typescript else "react"

    @property
    def extension(self) -> str:
        """Source file extension for generated components."""
        return "tsx" if self.typescript else "jsx"

    @property
    def language(self) -> str:
        return "TypeScript" if self.typescript else "JavaScript"


class Settings(BaseModel):
    """Tool-wide defaults shared by the CLI and the generator."""

    default_project_name: str = Field(default="react-tailwind-app")
    default_package_manager: PackageManager = Field(default=PackageManager.NPM)
    react_version: str = Field(
        default="^19.0.0",
        description="Version constraint forced onto react and react-dom",
    )
    tailwind_packages: tuple[str, ...] = Field(
        default=("tailwindcss", "@tailwindcss/postcss", "postcss"),
    )

    @field_validator("default_project_name")
    @classmethod
    def _check_default_name(cls, value: str) -> str:
        if not validate_project_name(value):
            raise ValueError(PROJECT_NAME_HINT)
        return value

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            CRTA_DEFAULT_PROJECT_NAME, CRTA_PACKAGE_MANAGER, CRTA_REACT_VERSION.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CRTA_DEFAULT_PROJECT_NAME"):
            kwargs["default_project_name"] = os.environ["CRTA_DEFAULT_PROJECT_NAME"]
        if os.environ.get("CRTA_PACKAGE_MANAGER"):
            kwargs["default_package_manager"] = os.environ["CRTA_PACKAGE_MANAGER"].strip().lower()
        if os.environ.get("CRTA_REACT_VERSION"):
            kwargs["react_version"] = os.environ["CRTA_REACT_VERSION"]
        return cls(**kwargs)
