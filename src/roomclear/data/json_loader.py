"""Reading definition files from disk."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError, DataValidationError


def load_json(path: Path) -> object:
    """Decode a definition file, raising DataLoadError when it is unreadable, empty or not JSON."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Definition file not found: {path}", source=path) from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read definition file: {path}", source=path) from exc

    if not text.strip():
        raise DataLoadError(f"Definition file is empty: {path}", source=path)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {path} (line {exc.lineno}): {exc.msg}", source=path) from exc


def load_definition_table(path: Path) -> dict[str, object]:
    """Decode a definition file whose top level maps ids to definitions."""
    payload = load_json(path)
    if not isinstance(payload, dict):
        raise DataValidationError(f"Expected an object keyed by id at the top of {path}", source=path)
    return payload
