"""Committed execution of kill chains."""
from __future__ import annotations

import logging

from roomclear.domain.entities import Monster, Player, Room
from roomclear.services.protectors import get_all_protectors_in_room

logger = logging.getLogger(__name__)


def kill_monster(player: Player, room: Room, monster: Monster) -> None:
    """
    Have ``player`` kill ``monster`` after first killing every live protector.

    ``can_kill`` must already have approved this player, monster and room; the
    checks are not repeated here and any broken rule surfaces as an
    ``InvalidOperationError`` from the entities.
    """

    for protector in get_all_protectors_in_room(monster, room):
        if protector.is_alive:
            kill_monster(player, room, protector)
    _kill_single(player, room, monster)


def _kill_single(player: Player, room: Room, monster: Monster) -> None:
    weapon = monster.required_weapon
    rounds = monster.kind.ammunition
    exposure = room.player_health_lost_per_encounter
    monster.attack(weapon, rounds)
    player.change_health(-exposure)
    room.monster_killed(monster)
    player.change_ammunition(weapon.id, -rounds)
    logger.debug(
        "%s killed %s #%d in '%s' with %d %s round(s); health now %d",
        player.name,
        monster.kind.name,
        monster.serial,
        room.name,
        rounds,
        weapon.name,
        player.health,
    )
