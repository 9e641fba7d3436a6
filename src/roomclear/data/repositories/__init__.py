"""Repository exports."""

from .monster_kinds_repo import MonsterKindsRepository
from .scenarios_repo import ScenariosRepository
from .weapons_repo import WeaponsRepository

__all__ = [
    "MonsterKindsRepository",
    "ScenariosRepository",
    "WeaponsRepository",
]
