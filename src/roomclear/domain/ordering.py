"""Deterministic orderings for monsters and players."""
from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING, Iterable, List, Tuple

if TYPE_CHECKING:
    from roomclear.domain.entities import Monster, Player


def compare_monsters(first: Monster, second: Monster) -> int:
    """
    Pairwise monster order: a protector sorts before the monster it protects.

    Returns 0 for the same monster, 1 when ``first`` is protected by the kind of
    ``second``, -1 when ``first``'s kind protects ``second``; otherwise lower
    kind rank sorts first and creation order breaks the remaining ties.

    The relation is only pairwise. A custom protector ranked above the monster
    it guards can make it intransitive, so a sorted sequence may still list a
    protector after its dependent.
    """

    if first is second:
        return 0
    if first.protected_by == second.kind.id:
        return 1
    if second.protected_by == first.kind.id:
        return -1
    if first.kind.rank != second.kind.rank:
        return -1 if first.kind.rank < second.kind.rank else 1
    return -1 if first.serial < second.serial else 1


monster_sort_key = cmp_to_key(compare_monsters)


def sort_monsters(monsters: Iterable[Monster]) -> List[Monster]:
    return sorted(monsters, key=monster_sort_key)


def player_readiness(player: Player) -> Tuple[int, int, int]:
    """Best weapon rank, rounds for that weapon, then health; higher is readier."""
    best = player.best_weapon()
    return (best.rank, player.ammunition_for(best.id), player.health)
