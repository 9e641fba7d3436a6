"""Factory for creating rooms from scenario definitions."""
from __future__ import annotations

from roomclear.data.repositories import MonsterKindsRepository, WeaponsRepository
from roomclear.domain.defs import RoomDef
from roomclear.domain.entities import Room, RoomReward
from roomclear.services.errors import FactoryError

from .monster_factory import create_monster


def create_room(
    room_def: RoomDef,
    *,
    monster_kinds_repo: MonsterKindsRepository,
    weapons_repo: WeaponsRepository,
) -> Room:
    """Instantiate a room with fresh monsters and its completion reward."""
    monsters = [
        create_monster(
            placement.kind_id,
            monster_kinds_repo=monster_kinds_repo,
            weapons_repo=weapons_repo,
            protected_by=placement.protected_by,
        )
        for placement in room_def.monsters
    ]

    try:
        reward_weapons = tuple(weapons_repo.get(weapon_id) for weapon_id in room_def.reward.weapon_ids)
    except KeyError as exc:
        raise FactoryError(f"Reward weapon {exc} not found for room '{room_def.name}'.") from exc

    reward = RoomReward(
        weapons=reward_weapons,
        ammunition=room_def.reward.ammunition,
        health=room_def.reward.health,
    )
    return Room(room_def.name, monsters, reward)
