"""Monster runtime model."""
from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import TYPE_CHECKING

from roomclear.domain.defs import MonsterKindDef, WeaponDef
from roomclear.domain.errors import InvalidOperationError, MonsterAlreadyDeadError, WeaponTooWeakError

if TYPE_CHECKING:
    from .room import Room

_allocation_serials = count()


@dataclass(eq=False, slots=True)
class Monster:
    """A single monster living in one room.

    Monsters compare by identity. ``serial`` records creation order and is the
    final tie-break when monsters are sorted.
    """

    kind: MonsterKindDef
    required_weapon: WeaponDef
    custom_protected_by: str | None = None
    health: int = field(default=0, init=False)
    is_dead: bool = field(default=False, init=False)
    serial: int = field(default_factory=lambda: next(_allocation_serials), init=False)
    room: Room | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.required_weapon.id != self.kind.weapon_id:
            raise ValueError(
                f"Monster kind '{self.kind.id}' needs weapon '{self.kind.weapon_id}', "
                f"got '{self.required_weapon.id}'."
            )
        self.health = self.kind.ammunition

    @property
    def protected_by(self) -> str | None:
        """Kind id that must be cleared first; the custom protector wins over the kind's."""
        if self.custom_protected_by is not None:
            return self.custom_protected_by
        return self.kind.protected_by

    @property
    def is_alive(self) -> bool:
        return not self.is_dead

    def attack(self, weapon: WeaponDef, rounds: int) -> bool:
        """Fire ``rounds`` at the monster and return whether it is now dead."""
        if self.is_dead:
            raise MonsterAlreadyDeadError(f"{self.kind.name} #{self.serial} is already dead.")
        if rounds < 1:
            raise InvalidOperationError(f"Cannot attack with {rounds} rounds.")
        if weapon.rank < self.required_weapon.rank:
            raise WeaponTooWeakError(
                f"{weapon.name} cannot hurt {self.kind.name}; {self.required_weapon.name} or better is required."
            )
        if rounds >= self.health:
            self.health = 0
            self.is_dead = True
        else:
            self.health -= rounds
        return self.is_dead
