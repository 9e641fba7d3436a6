"""Where weapon, monster kind and scenario definitions live."""
from __future__ import annotations

import os
from pathlib import Path

DEFINITIONS_ENV_VAR = "ROOMCLEAR_DEFINITIONS_DIR"

WEAPONS_FILE = "weapons.json"
MONSTER_KINDS_FILE = "monster_kinds.json"
SCENARIOS_FILE = "scenarios.json"


def get_repo_root() -> Path:
    return Path(__file__).resolve().parents[3]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the definitions directory.

    An explicit ``base_path`` wins, then the ``ROOMCLEAR_DEFINITIONS_DIR``
    environment variable, then ``data/definitions`` in the repository.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.environ.get(DEFINITIONS_ENV_VAR)
    if override:
        return Path(override)
    return get_repo_root() / "data" / "definitions"


def get_definition_file(filename: str, base_path: Path | str | None = None) -> Path:
    return get_definitions_path(base_path) / filename
