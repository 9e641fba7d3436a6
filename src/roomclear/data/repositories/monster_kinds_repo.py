"""Monster kinds repository with reference validation."""
from __future__ import annotations

from typing import Dict

from roomclear.data.errors import DataReferenceError, DataValidationError
from roomclear.data.paths import MONSTER_KINDS_FILE
from roomclear.data.repositories.base import RepositoryBase
from roomclear.data.repositories.weapons_repo import WeaponsRepository
from roomclear.domain.defs import MonsterKindDef


class MonsterKindsRepository(RepositoryBase[MonsterKindDef]):
    """Loads monster kinds and ensures referenced weapons and protectors exist."""

    def __init__(self, weapons_repo: WeaponsRepository | None = None, base_path=None) -> None:
        super().__init__(MONSTER_KINDS_FILE, base_path)
        self._weapons_repo = weapons_repo or WeaponsRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, MonsterKindDef]:
        weapon_ids = self._weapons_repo.ids()

        kinds: Dict[str, MonsterKindDef] = {}
        ranks: Dict[int, str] = {}
        for raw_id, payload in raw.items():
            context = f"monster kind '{raw_id}'"
            kind_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                kind_data,
                {"name", "rank", "weapon", "ammunition", "exposure_cost"},
                context,
                optional_fields={"protected_by"},
            )

            rank = self._require_int(kind_data["rank"], f"{context} rank", minimum=0)
            if rank in ranks:
                raise DataValidationError(f"{context} shares rank {rank} with monster kind '{ranks[rank]}'.")
            ranks[rank] = raw_id

            weapon_id = self._require_str(kind_data["weapon"], f"{context} weapon")
            if weapon_id not in weapon_ids:
                raise DataReferenceError(f"{context} references missing weapon '{weapon_id}'.")

            kinds[raw_id] = MonsterKindDef(
                id=raw_id,
                name=self._require_str(kind_data["name"], f"{context} name"),
                rank=rank,
                weapon_id=weapon_id,
                ammunition=self._require_int(kind_data["ammunition"], f"{context} ammunition", minimum=1),
                exposure_cost=self._require_int(kind_data["exposure_cost"], f"{context} exposure_cost", minimum=0),
                protected_by=self._require_optional_str(kind_data.get("protected_by"), f"{context} protected_by"),
            )

        for kind in kinds.values():
            if kind.protected_by is not None and kind.protected_by not in kinds:
                raise DataReferenceError(
                    f"monster kind '{kind.id}' is protected by missing kind '{kind.protected_by}'."
                )
        return kinds
