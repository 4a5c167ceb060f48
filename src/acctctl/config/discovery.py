"""Locate the acctctl.toml that applies to a CLI invocation.

Lookup order, first hit wins:

1. ``--config PATH`` when PATH is an existing file
2. ``ACCTCTL_CONFIG`` (a dangling value means "no config", not "keep looking")
3. ``acctctl.toml`` in the start directory or any parent
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "acctctl.toml"
CONFIG_ENV_VAR = "ACCTCTL_CONFIG"


def candidate_paths(start: Path | None = None) -> Iterator[Path]:
    """Yield ``acctctl.toml`` locations from *start* (default: cwd) up to the root."""
    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the env-var config or the nearest acctctl.toml, or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None
    return next((p for p in candidate_paths(start) if p.is_file()), None)


def resolve_config(config_path: str | None = None, start: Path | None = None) -> Path | None:
    """Apply the full lookup order, starting with an explicit ``--config``.

    A ``--config`` that does not name a file is ignored and no discovery
    happens, so the code defaults apply.
    """
    if config_path:
        p = Path(config_path)
        return p if p.is_file() else None
    return find_config(start)
