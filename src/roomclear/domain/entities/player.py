"""Player runtime model."""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping

from roomclear.domain.defs import WeaponDef
from roomclear.domain.errors import PlayerDeadError

DEFAULT_WEAPON_ROUNDS = 10_000_000
NEW_WEAPON_ROUNDS = 5


class Player:
    """A player carrying weapons, ammunition and health.

    A player whose health is at or below zero is dead. Ammunition may be held
    for a weapon the player does not own yet; it is kept as pending rounds and
    becomes the weapon's ammunition once the weapon is acquired.

    Players compare by identity and hash by name.
    """

    __slots__ = ("_name", "_health", "_new_weapon_rounds", "_weapons", "_ammunition", "_pending_ammunition")

    def __init__(
        self,
        name: str,
        health: int,
        default_weapon: WeaponDef,
        *,
        default_weapon_rounds: int = DEFAULT_WEAPON_ROUNDS,
        new_weapon_rounds: int = NEW_WEAPON_ROUNDS,
    ) -> None:
        self._name = name
        self._health = health
        self._new_weapon_rounds = new_weapon_rounds
        self._weapons: Dict[str, WeaponDef] = {default_weapon.id: default_weapon}
        self._ammunition: Dict[str, int] = {default_weapon.id: default_weapon_rounds}
        self._pending_ammunition: Dict[str, int] = {}

    def __repr__(self) -> str:
        return f"Player(name={self._name!r}, health={self._health})"

    def __hash__(self) -> int:
        return hash(self._name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def health(self) -> int:
        return self._health

    @property
    def is_dead(self) -> bool:
        return self._health <= 0

    @property
    def weapons(self) -> Mapping[str, WeaponDef]:
        """Read-only view of owned weapons keyed by id."""
        return MappingProxyType(self._weapons)

    @property
    def ammunition(self) -> Mapping[str, int]:
        """Read-only view of rounds held for owned weapons."""
        return MappingProxyType(self._ammunition)

    def has_weapon(self, weapon_id: str) -> bool:
        return weapon_id in self._weapons

    def ammunition_for(self, weapon_id: str) -> int:
        """Rounds for the weapon, including pending rounds for a weapon not yet owned."""
        if weapon_id in self._weapons:
            return self._ammunition.get(weapon_id, 0)
        return self._pending_ammunition.get(weapon_id, 0)

    def best_weapon(self) -> WeaponDef:
        return max(self._weapons.values(), key=lambda weapon: weapon.rank)

    # -----------------------
    # Mutators
    # -----------------------
    def add_weapon(self, weapon: WeaponDef) -> bool:
        """Grant a weapon; returns False when the player already had it."""
        self._ensure_alive("acquire a weapon")
        if weapon.id in self._weapons:
            return False
        self._weapons[weapon.id] = weapon
        self._ammunition[weapon.id] = self._pending_ammunition.pop(weapon.id, self._new_weapon_rounds)
        return True

    def add_ammunition(self, weapon_id: str, rounds: int) -> int:
        """Add rounds for a weapon and return the new total held for it."""
        if rounds < 0:
            raise ValueError(f"Cannot add {rounds} rounds of ammunition.")
        self._ensure_alive("receive ammunition")
        if weapon_id not in self._weapons:
            self._pending_ammunition[weapon_id] = self._pending_ammunition.get(weapon_id, 0) + rounds
            return self._pending_ammunition[weapon_id]
        self._ammunition[weapon_id] += rounds
        return self._ammunition[weapon_id]

    def change_ammunition(self, weapon_id: str, change: int) -> int:
        """Adjust rounds for an owned weapon by a positive or negative amount."""
        self._ensure_alive("spend ammunition")
        if weapon_id not in self._weapons:
            raise KeyError(weapon_id)
        self._ammunition[weapon_id] += change
        return self._ammunition[weapon_id]

    def change_health(self, amount: int) -> int:
        """Raise or lower health and return the new level."""
        self._ensure_alive("change health")
        self._health += amount
        return self._health

    def _ensure_alive(self, action: str) -> None:
        if self.is_dead:
            raise PlayerDeadError(f"{self._name} is dead and cannot {action}.")
