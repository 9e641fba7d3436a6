"""Weapons repository."""
from __future__ import annotations

from typing import Dict

from roomclear.data.errors import DataValidationError
from roomclear.data.paths import WEAPONS_FILE
from roomclear.data.repositories.base import RepositoryBase
from roomclear.domain.defs import WeaponDef


class WeaponsRepository(RepositoryBase[WeaponDef]):
    """Loads weapon definitions and checks that their ranks form a total order."""

    def __init__(self, base_path=None) -> None:
        super().__init__(WEAPONS_FILE, base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, WeaponDef]:
        weapons: Dict[str, WeaponDef] = {}
        ranks: Dict[int, str] = {}
        for raw_id, payload in raw.items():
            weapon_data = self._require_mapping(payload, f"weapon '{raw_id}'")
            self._assert_exact_fields(weapon_data, {"name", "rank"}, f"weapon '{raw_id}'")

            name = self._require_str(weapon_data["name"], f"weapon '{raw_id}' name")
            rank = self._require_int(weapon_data["rank"], f"weapon '{raw_id}' rank", minimum=0)
            if rank in ranks:
                raise DataValidationError(f"weapon '{raw_id}' shares rank {rank} with weapon '{ranks[rank]}'.")
            ranks[rank] = raw_id

            weapons[raw_id] = WeaponDef(id=raw_id, name=name, rank=rank)
        if not weapons:
            raise DataValidationError("At least one weapon must be defined.")
        return weapons

    def by_rank(self) -> list[WeaponDef]:
        """Return all weapons from weakest to strongest."""
        return sorted(self.all(), key=lambda weapon: weapon.rank)

    def default_weapon(self) -> WeaponDef:
        """The weakest weapon, which every player starts out owning."""
        return self.by_rank()[0]
