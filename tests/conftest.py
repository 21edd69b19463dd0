"""Shared pytest fixtures for the create-react-tailwind-app test suite.

Provides reusable fixtures for:
- A recording fake command runner that simulates ``create vite``
- Generation configs for both language variants
- A pre-built Vite skeleton on disk
"""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any

import pytest

from create_react_tailwind.config import GenerationConfig, PackageManager


# ---------------------------------------------------------------------------
# Vite skeleton
# ---------------------------------------------------------------------------

VITE_MAIN = textwrap.dedent("""\
    import { StrictMode } from 'react'
    import { createRoot } from 'react-dom/client'
    import './index.css'
    import App from './App.{ext}'

    createRoot(document.getElementById('root'){bang}).render(
      <StrictMode>
        <App />
      </StrictMode>,
    )
""")

VITE_APP = textwrap.dedent("""\
    import { useState } from 'react'
    import './App.css'

    function App() {
      const [count, setCount] = useState(0)
      return <button onClick={() => setCount((count) => count + 1)}>count is {count}</button>
    }

    export default App
""")


def write_vite_skeleton(
    root: Path,
    template: str = "react-ts",
    main_imports_css: bool = True,
) -> Path:
    """Write the subset of a ``create vite`` React project the scaffolder touches."""
    typescript = template.endswith("-ts")
    ext = "tsx" if typescript else "jsx"
    src = root / "src"
    src.mkdir(parents=True, exist_ok=True)

    manifest: dict[str, Any] = {
        "name": root.name,
        "private": True,
        "version": "0.0.0",
        "type": "module",
        "scripts": {"dev": "vite", "build": "vite build", "preview": "vite preview"},
        "dependencies": {"react": "^18.3.1", "react-dom": "^18.3.1"},
        "devDependencies": {"@vitejs/plugin-react": "^4.3.4", "vite": "^6.0.5"},
    }
    (root / "package.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    (root / "index.html").write_text("<div id=\"root\"></div>\n", encoding="utf-8")

    main = VITE_MAIN.replace("{ext}", ext).replace("{bang}", "!" if typescript else "")
    if not main_imports_css:
        main = main.replace("import './index.css'\n", "")
    (src / f"main.{ext}").write_text(main, encoding="utf-8")
    (src / f"App.{ext}").write_text(VITE_APP, encoding="utf-8")
    (src / "App.css").write_text("#root { max-width: 1280px; }\n", encoding="utf-8")
    (src / "index.css").write_text(":root { font-family: system-ui; }\n", encoding="utf-8")
    return root


# ---------------------------------------------------------------------------
# Fake command runner
# ---------------------------------------------------------------------------


class RecordingRunner:
    """``CommandRunner`` that records invocations instead of spawning processes.

    ``create`` invocations write a Vite skeleton into ``cwd/<name>`` so the
    rest of the pipeline has real files to patch.  ``fail_on`` maps a word
    that appears in a command (e.g. ``"add"``) to the exit status to report.
    """

    def __init__(
        self,
        fail_on: dict[str, int] | None = None,
        main_imports_css: bool = True,
    ) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.fail_on = fail_on or {}
        self.main_imports_css = main_imports_css

    async def run(self, cmd: list[str], cwd: Path) -> int:
        self.calls.append((list(cmd), Path(cwd)))
        for word, code in self.fail_on.items():
            if word in cmd:
                return code
        if "create" in cmd:
            name = cmd[cmd.index("create") + 2]
            template = cmd[cmd.index("--template") + 1]
            write_vite_skeleton(
                Path(cwd) / name, template, main_imports_css=self.main_imports_css
            )
        return 0

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for cmd, _ in self.calls]


@pytest.fixture
def recording_runner() -> RecordingRunner:
    """A fake runner where every command succeeds."""
    return RecordingRunner()


@pytest.fixture
def make_runner():
    """Factory for runners with configurable failures."""
    return RecordingRunner


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------


@pytest.fixture
def ts_config() -> GenerationConfig:
    return GenerationConfig(project_name="demo-app", typescript=True)


@pytest.fixture
def js_config() -> GenerationConfig:
    return GenerationConfig(
        project_name="demo-app",
        typescript=False,
        package_manager=PackageManager.YARN,
    )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``CRTA_*`` variables from the developer's shell out of the tests."""
    for var in ("CRTA_DEFAULT_PROJECT_NAME", "CRTA_PACKAGE_MANAGER", "CRTA_REACT_VERSION"):
        monkeypatch.delenv(var, raising=False)
