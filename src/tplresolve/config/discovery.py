"""Locate ``tplresolve.toml``.

The explicit ``TPLRESOLVE_CONFIG`` path is honoured first; otherwise the
search walks up from the starting directory to the filesystem root.
Parsing is left to :class:`~tplresolve.config.settings.TomlSettingsSource`.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "tplresolve.toml"
CONFIG_ENV_VAR = "TPLRESOLVE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``tplresolve.toml`` at or above *start* (default: cwd).

    A set ``TPLRESOLVE_CONFIG`` short-circuits the search and yields None
    when it names a missing file.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
