"""End-to-end runs of the CLI against a temporary working directory.

The package managers are replaced by a recording runner that writes a Vite
skeleton for ``create`` commands, so no Node toolchain or network is needed.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from create_react_tailwind.cli import main
from create_react_tailwind.scaffolder.patches import patch_entry_point, patch_manifest
from create_react_tailwind.utils import dump_json

GENERATED_FILES = [
    "postcss.config.mjs",
    "src/index.css",
    "src/components/Example.tsx",
    "src/App.tsx",
    "src/main.tsx",
    "package.json",
]


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.mark.integration
class TestDemoApp:
    """``create-react-tailwind-app demo-app --yes``."""

    @pytest.fixture
    def project(self, tmp_path: Path, recording_runner) -> Path:
        main(["demo-app", "--yes"], cwd=tmp_path, runner=recording_runner)
        return tmp_path / "demo-app"

    def test_layout(self, project: Path):
        for rel in GENERATED_FILES:
            assert (project / rel).is_file(), rel
        assert not (project / "src" / "App.css").exists()

    def test_manifest(self, project: Path):
        raw = (project / "package.json").read_text(encoding="utf-8")
        assert '"react": "^19.0.0"' in raw
        assert '"react-dom": "^19.0.0"' in raw
        assert raw == dump_json(json.loads(raw))

    def test_manifest_patch_idempotent(self, project: Path):
        raw = (project / "package.json").read_text(encoding="utf-8")
        again = dump_json(patch_manifest(json.loads(raw), "^19.0.0"))
        assert again == raw

    def test_entry_point_patch_idempotent(self, project: Path):
        main_file = (project / "src" / "main.tsx").read_text(encoding="utf-8")
        assert patch_entry_point(main_file) == main_file

    def test_no_untyped_sources(self, project: Path):
        assert not list(project.rglob("*.jsx"))

    def test_second_run_refused_without_writes(self, project: Path, make_runner):
        before = _snapshot(project)
        runner = make_runner()

        with pytest.raises(SystemExit) as exc_info:
            main(["demo-app", "--yes"], cwd=project.parent, runner=runner)

        assert exc_info.value.code == 1
        assert runner.calls == []
        assert _snapshot(project) == before


@pytest.mark.integration
@pytest.mark.parametrize("manager", ["npm", "yarn", "pnpm"])
def test_every_package_manager(tmp_path: Path, recording_runner, monkeypatch, manager: str):
    monkeypatch.setenv("CRTA_PACKAGE_MANAGER", manager)
    main(["site", "-y"], cwd=tmp_path, runner=recording_runner)

    assert [cmd[0] for cmd in recording_runner.commands] == [manager] * 3
    manifest = json.loads((tmp_path / "site" / "package.json").read_text(encoding="utf-8"))
    assert manifest["dependencies"]["react"] == "^19.0.0"
