"""Domain definition exports."""

from .monster_kind_def import MonsterKindDef
from .scenario_def import MonsterPlacementDef, PlayerDef, RoomDef, RoomRewardDef, ScenarioDef
from .weapon_def import WeaponDef

__all__ = [
    "MonsterKindDef",
    "MonsterPlacementDef",
    "PlayerDef",
    "RoomDef",
    "RoomRewardDef",
    "ScenarioDef",
    "WeaponDef",
]
