"""Speculative feasibility checks for kill chains."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Set

from roomclear.domain.entities import Monster, Player, Room
from roomclear.services.protectors import get_all_protectors_in_room

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class KillLedger:
    """Scratch state for one feasibility walk.

    Holds the health the player would have left, the rounds already promised
    per weapon and the monsters already judged killable. It is created per
    ``can_kill`` call and thrown away afterwards; real entities are only read.
    """

    health: int
    rounds_used: Dict[str, int] = field(default_factory=dict)
    resolved: Set[Monster] = field(default_factory=set)
    in_progress: Set[Monster] = field(default_factory=set)

    def rounds_committed(self, weapon_id: str) -> int:
        return self.rounds_used.get(weapon_id, 0)


def can_kill(player: Player, monster: Monster, room: Room) -> bool:
    """Return whether ``player`` can kill ``monster`` and all of its protectors and survive."""
    exposure = room.player_health_lost_per_encounter
    if player.health <= exposure:
        logger.debug(
            "%s cannot survive entering '%s' (health %d, exposure %d)",
            player.name,
            room.name,
            player.health,
            exposure,
        )
        return False
    ledger = KillLedger(health=player.health)
    feasible = _can_kill(player, monster, room, ledger)
    if feasible:
        logger.debug(
            "%s can kill %s in '%s' (%d monster(s), %d health left)",
            player.name,
            monster.kind.name,
            room.name,
            len(ledger.resolved),
            ledger.health,
        )
    return feasible


def _can_kill(player: Player, monster: Monster, room: Room, ledger: KillLedger) -> bool:
    # Snapshot before protectors resolve; exposure below is charged against it.
    live_monsters = [candidate for candidate in room.live_monsters if candidate not in ledger.resolved]
    if monster not in live_monsters:
        return False
    weapon_id = monster.required_weapon.id
    if not player.has_weapon(weapon_id):
        return False

    ledger.in_progress.add(monster)
    try:
        for protector in get_all_protectors_in_room(monster, room):
            if protector in ledger.resolved:
                continue
            if protector in ledger.in_progress:
                logger.debug("Protector cycle through %s in '%s'", protector.kind.name, room.name)
                return False
            if not _can_kill(player, protector, room, ledger):
                return False
    finally:
        ledger.in_progress.discard(monster)

    rounds_needed = monster.kind.ammunition
    committed = ledger.rounds_committed(weapon_id)
    if player.ammunition_for(weapon_id) - committed < rounds_needed:
        return False
    ledger.rounds_used[weapon_id] = committed + rounds_needed

    health_needed = sum(candidate.kind.exposure_cost for candidate in live_monsters)
    if ledger.health - health_needed <= 0:
        return False
    ledger.health -= health_needed
    ledger.resolved.add(monster)
    return True
