"""Factory for assembling a game bot from a scenario definition."""
from __future__ import annotations

from roomclear.core.config import GameConfig
from roomclear.data.repositories import MonsterKindsRepository, ScenariosRepository, WeaponsRepository
from roomclear.services.errors import FactoryError
from roomclear.services.game_bot import GameBot

from .player_factory import create_player
from .room_factory import create_room


def create_game_bot(
    scenario_id: str,
    *,
    scenarios_repo: ScenariosRepository,
    monster_kinds_repo: MonsterKindsRepository,
    weapons_repo: WeaponsRepository,
    config: GameConfig | None = None,
) -> GameBot:
    """Build the rooms and players of a scenario, in definition order, and wrap them in a bot."""
    try:
        scenario_def = scenarios_repo.get(scenario_id)
    except KeyError as exc:
        raise FactoryError(f"Scenario '{scenario_id}' not found.") from exc

    rooms = [
        create_room(room_def, monster_kinds_repo=monster_kinds_repo, weapons_repo=weapons_repo)
        for room_def in scenario_def.rooms
    ]
    players = [
        create_player(player_def, weapons_repo=weapons_repo, config=config) for player_def in scenario_def.players
    ]
    return GameBot(rooms, players)
