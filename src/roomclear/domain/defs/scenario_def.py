"""Scenario definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True, slots=True)
class MonsterPlacementDef:
    """A single monster placed in a room, optionally with its own protector kind."""

    kind_id: str
    protected_by: str | None = None


@dataclass(frozen=True, slots=True)
class RoomRewardDef:
    weapon_ids: Tuple[str, ...] = ()
    ammunition: Dict[str, int] = field(default_factory=dict)
    health: int = 0


@dataclass(frozen=True, slots=True)
class RoomDef:
    name: str
    monsters: Tuple[MonsterPlacementDef, ...]
    reward: RoomRewardDef = field(default_factory=RoomRewardDef)


@dataclass(frozen=True, slots=True)
class PlayerDef:
    """Starting loadout for a player beyond the default weapon."""

    name: str
    health: int
    weapon_ids: Tuple[str, ...] = ()
    ammunition: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ScenarioDef:
    """Ordered rooms and players making up one puzzle."""

    id: str
    name: str
    rooms: Tuple[RoomDef, ...]
    players: Tuple[PlayerDef, ...]
