"""Room runtime model."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple

from roomclear.domain.defs import WeaponDef
from roomclear.domain.ordering import monster_sort_key, sort_monsters

from .monster import Monster


@dataclass(frozen=True, slots=True)
class RoomReward:
    """Weapons, ammunition and health granted to whoever clears the room."""

    weapons: Tuple[WeaponDef, ...] = ()
    ammunition: Mapping[str, int] = field(default_factory=dict)
    health: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "weapons", tuple(self.weapons))
        object.__setattr__(self, "ammunition", MappingProxyType(dict(self.ammunition)))


class Room:
    """A room holding a fixed set of monsters split into alive and dead.

    A monster passed in more than once is kept once.

    The player who kills the last living monster completes the room and
    collects its reward.
    """

    def __init__(self, name: str, monsters: Iterable[Monster], reward: RoomReward | None = None) -> None:
        ordered = sort_monsters(dict.fromkeys(monsters))
        self._name = name
        self._monsters: Tuple[Monster, ...] = tuple(ordered)
        self._alive: List[Monster] = [monster for monster in ordered if monster.is_alive]
        self._dead: List[Monster] = [monster for monster in ordered if monster.is_dead]
        self._reward = reward or RoomReward()
        self._danger_level = sum(monster.kind.rank + 1 for monster in self._alive)
        for monster in ordered:
            if monster.room is not None and monster.room is not self:
                raise ValueError(f"Monster {monster.kind.name} #{monster.serial} already belongs to another room.")
            monster.room = self

    def __repr__(self) -> str:
        return f"Room(name={self._name!r}, alive={len(self._alive)}, dead={len(self._dead)})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def monsters(self) -> Tuple[Monster, ...]:
        return self._monsters

    @property
    def live_monsters(self) -> Tuple[Monster, ...]:
        return tuple(self._alive)

    @property
    def dead_monsters(self) -> Tuple[Monster, ...]:
        return tuple(self._dead)

    @property
    def reward(self) -> RoomReward:
        return self._reward

    @property
    def danger_level(self) -> int:
        """Sum of (kind rank + 1) over the monsters still alive."""
        return self._danger_level

    @property
    def player_health_lost_per_encounter(self) -> int:
        """Health a player loses on entering: the exposure cost of every live monster."""
        return sum(monster.kind.exposure_cost for monster in self._alive)

    @property
    def is_completed(self) -> bool:
        return not self._alive

    def monster_killed(self, monster: Monster) -> None:
        """Move a monster from the alive set to the dead set."""
        if monster not in self._alive:
            raise ValueError(f"{monster.kind.name} #{monster.serial} is not alive in room '{self._name}'.")
        self._alive.remove(monster)
        self._dead.append(monster)
        self._dead.sort(key=monster_sort_key)
        self._danger_level -= monster.kind.rank + 1
