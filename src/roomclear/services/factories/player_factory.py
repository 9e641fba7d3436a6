"""Factory for creating players from scenario definitions."""
from __future__ import annotations

from roomclear.core.config import GameConfig
from roomclear.data.repositories import WeaponsRepository
from roomclear.domain.defs import PlayerDef
from roomclear.domain.entities import Player
from roomclear.services.errors import FactoryError


def create_player(player_def: PlayerDef, *, weapons_repo: WeaponsRepository, config: GameConfig | None = None) -> Player:
    """Instantiate a player holding the default weapon plus its starting loadout.

    Starting ammunition is staged before weapons are handed out, so a weapon
    listed with ammunition starts with exactly that many rounds.
    """
    config = config or GameConfig()
    player = Player(
        name=player_def.name,
        health=player_def.health,
        default_weapon=weapons_repo.default_weapon(),
        default_weapon_rounds=config.default_weapon_rounds,
        new_weapon_rounds=config.new_weapon_rounds,
    )
    for weapon_id, rounds in player_def.ammunition.items():
        player.add_ammunition(weapon_id, rounds)
    for weapon_id in player_def.weapon_ids:
        try:
            weapon_def = weapons_repo.get(weapon_id)
        except KeyError as exc:
            raise FactoryError(f"Weapon '{weapon_id}' not found for player '{player_def.name}'.") from exc
        player.add_weapon(weapon_def)
    return player
