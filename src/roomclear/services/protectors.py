"""Transitive protector lookup for monsters in a room."""
from __future__ import annotations

from typing import List, Set

from roomclear.domain.entities import Monster, Room
from roomclear.domain.ordering import sort_monsters


def get_all_protectors_in_room(monster: Monster, room: Room) -> List[Monster]:
    """
    Return every live monster in ``room`` that must die before ``monster``.

    Protectors of protectors are included. The result is sorted by monster
    order, which is not a strict kill order once custom protectors cross kind
    ranks; callers kill each protector's own chain first. The monster itself
    is never part of the result, which also stops protector cycles.
    """

    protectors: List[Monster] = []
    _collect_protectors(monster, room, protectors, seen={monster})
    return sort_monsters(protectors)


def _collect_protectors(monster: Monster, room: Room, protectors: List[Monster], seen: Set[Monster]) -> None:
    protector_kind = monster.protected_by
    if protector_kind is None:
        return
    for candidate in room.live_monsters:
        if candidate.kind.id != protector_kind or candidate in seen:
            continue
        seen.add(candidate)
        _collect_protectors(candidate, room, protectors, seen)
        protectors.append(candidate)
