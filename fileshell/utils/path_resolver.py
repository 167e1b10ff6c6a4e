"""Pure path composition against a session's current directory.

Nothing here touches the filesystem; results may name entries that do not exist.
"""

from __future__ import annotations

import os

PARENT = ".."


def parent_of(cwd: str) -> str | None:
    """Return the parent of cwd, or None when cwd is already the filesystem root."""
    current = os.path.normpath(cwd)
    parent = os.path.dirname(current)
    if parent == current:
        return None
    return parent


def resolve(cwd: str, raw: str) -> str | None:
    """Resolve a user argument against cwd.

    '..' maps to the parent directory (None at the root). Absolute arguments
    replace cwd; anything else is joined to it and lexically normalized.
    """
    s = str(raw or "").strip()
    if s == PARENT:
        return parent_of(cwd)
    if not s:
        return os.path.normpath(cwd)
    return os.path.normpath(os.path.join(cwd, s))
