"""Solver configuration loading and logging setup."""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

_DEFAULT_NEW_WEAPON_ROUNDS = 5
_DEFAULT_WEAPON_ROUNDS = 10_000_000
_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Tunable constants used when players are created and armed."""

    new_weapon_rounds: int = _DEFAULT_NEW_WEAPON_ROUNDS
    default_weapon_rounds: int = _DEFAULT_WEAPON_ROUNDS
    log_level: str = _DEFAULT_LOG_LEVEL


def _normalize_rounds(value: object, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return default
    return value


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def load_config(path: Path | str | None = None) -> GameConfig:
    """Load config from disk or return defaults."""
    if path is None:
        return GameConfig()
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return GameConfig()
    if not isinstance(raw, dict):
        return GameConfig()
    return GameConfig(
        new_weapon_rounds=_normalize_rounds(raw.get("new_weapon_rounds"), _DEFAULT_NEW_WEAPON_ROUNDS),
        default_weapon_rounds=_normalize_rounds(raw.get("default_weapon_rounds"), _DEFAULT_WEAPON_ROUNDS),
        log_level=_normalize_log_level(raw.get("log_level")),
    )


def save_config(config: GameConfig, path: Path | str) -> None:
    """Persist config to disk."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(asdict(config), indent=2, sort_keys=True), encoding="utf-8")


def configure_logging(config: GameConfig) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
