"""In-place patches applied to files produced by ``create vite``.

Both patches are pure functions over file content so they can be applied
repeatedly: running either one on its own output changes nothing.
"""

from __future__ import annotations

import re
from typing import Any

CSS_ENTRY = "./index.css"
CSS_IMPORT = f"import '{CSS_ENTRY}'"

_REACT_IMPORT_RE = re.compile(
    r"^import\s[^\n]*\sfrom\s+['\"]react['\"];?[ \t]*$", re.MULTILINE
)


def patch_entry_point(content: str) -> str:
    """Make sure the application entry point imports the CSS entry file.

    The import is placed on the line after the first ``import ... from 'react'``
    statement, or at the top of the file when there is none.  Content that
    already references ``./index.css`` is returned untouched.
    """
    if CSS_ENTRY in content:
        return content

    match = _REACT_IMPORT_RE.search(content)
    if match is None:
        return f"{CSS_IMPORT}\n{content}"

    end = match.end()
    return f"{content[:end]}\n{CSS_IMPORT}{content[end:]}"


def patch_manifest(manifest: dict[str, Any], react_version: str) -> dict[str, Any]:
    """Pin ``react`` and ``react-dom`` to *react_version* in ``dependencies``.

    Existing keys keep their position; a missing ``dependencies`` table is
    appended at the end.  A ``dependencies`` value that is not an object
    (e.g. ``null``) is replaced by a fresh table in the same position.
    """
    dependencies = manifest.get("dependencies")
    if not isinstance(dependencies, dict):
        dependencies = {}
        manifest["dependencies"] = dependencies
    dependencies["react"] = react_version
    dependencies["react-dom"] = react_version
    return manifest
