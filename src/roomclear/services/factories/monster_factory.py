"""Factory for creating monsters from kind definitions."""
from __future__ import annotations

from roomclear.data.repositories import MonsterKindsRepository, WeaponsRepository
from roomclear.domain.entities import Monster
from roomclear.services.errors import FactoryError


def create_monster(
    kind_id: str,
    *,
    monster_kinds_repo: MonsterKindsRepository,
    weapons_repo: WeaponsRepository,
    protected_by: str | None = None,
) -> Monster:
    """Instantiate a monster, optionally overriding the kind's protector."""
    try:
        kind_def = monster_kinds_repo.get(kind_id)
    except KeyError as exc:
        raise FactoryError(f"Monster kind '{kind_id}' not found.") from exc

    if protected_by is not None and protected_by not in monster_kinds_repo.ids():
        raise FactoryError(f"Monster kind '{kind_id}' cannot be protected by unknown kind '{protected_by}'.")

    try:
        weapon_def = weapons_repo.get(kind_def.weapon_id)
    except KeyError as exc:
        raise FactoryError(f"Weapon '{kind_def.weapon_id}' not found for monster kind '{kind_id}'.") from exc

    return Monster(kind=kind_def, required_weapon=weapon_def, custom_protected_by=protected_by)
