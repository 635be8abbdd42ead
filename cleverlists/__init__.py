"""Cleverlists package.

Context-aware continue, indent and outdent of markdown list items, inferring
markers and numbering from the surrounding document.
"""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _get_version() -> str:
    """Get version from installed package metadata or pyproject.toml.

    Returns:
        Version string from package metadata (if installed) or pyproject.toml (if in development).
    """
    try:
        return version("markdown-clever-lists")
    except PackageNotFoundError:
        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            content = pyproject_path.read_text(encoding="utf-8")
            match = re.search(
                r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE
            )
            if match:
                return match.group(1)
        return "0.0.0"


__version__ = _get_version()
__license__ = "MIT"

from .config import BlankListItemBehaviour, ListsConfig  # noqa: E402
from .operations import continue_list, indent_selection, outdent_selection  # noqa: E402

# Public API
__all__ = [
    "__version__",
    "__license__",
    "BlankListItemBehaviour",
    "ListsConfig",
    "continue_list",
    "indent_selection",
    "outdent_selection",
]
