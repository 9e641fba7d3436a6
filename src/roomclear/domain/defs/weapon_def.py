"""Weapon definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WeaponDef:
    """Weapon catalog entry; higher ranks hurt everything lower ranks can."""

    id: str
    name: str
    rank: int
