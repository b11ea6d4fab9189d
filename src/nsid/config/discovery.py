"""Locate ``nsid.toml``.

``NSID_CONFIG`` pins the file outright; otherwise the nearest
``nsid.toml`` in the working directory or any ancestor wins, the same
way git finds ``.git``.  An explicit ``--config`` bypasses this module.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "nsid.toml"
CONFIG_ENV_VAR = "NSID_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A ``NSID_CONFIG`` value that does not name an existing file disables
    discovery instead of falling back to the walk-up.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
