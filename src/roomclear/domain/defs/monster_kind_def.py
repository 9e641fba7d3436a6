"""Monster kind definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MonsterKindDef:
    """Fixed combat statistics shared by every monster of a kind.

    ``ammunition`` is both the number of rounds needed to kill the monster and
    its starting health. ``exposure_cost`` is the health a player loses per
    encounter while the monster is alive in the same room.
    """

    id: str
    name: str
    rank: int
    weapon_id: str
    ammunition: int
    exposure_cost: int
    protected_by: str | None = None
