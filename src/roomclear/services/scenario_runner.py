"""Load a bundled scenario and play it to its fixed point."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from roomclear.core.config import GameConfig, configure_logging, load_config
from roomclear.data.repositories import MonsterKindsRepository, ScenariosRepository, WeaponsRepository
from roomclear.services.factories import create_game_bot

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScenarioOutcome:
    scenario_id: str
    cleared: bool
    passes: int
    completed_rooms: Tuple[str, ...]
    uncompleted_rooms: Tuple[str, ...]
    player_health: Tuple[Tuple[str, int], ...]


def run_scenario(
    scenario_id: str,
    *,
    config_path: Path | str | None = None,
    base_path: Path | str | None = None,
) -> ScenarioOutcome:
    """Build the scenario's rooms and players from definitions, play it and summarize the result."""
    config = load_config(config_path)
    configure_logging(config)
    bot = _build_game_bot(scenario_id, config, base_path)
    cleared = bot.play()
    logger.info("Scenario '%s' %s", scenario_id, "cleared" if cleared else "stalled")
    return ScenarioOutcome(
        scenario_id=scenario_id,
        cleared=cleared,
        passes=bot.passes,
        completed_rooms=tuple(room.name for room in bot.completed_rooms),
        uncompleted_rooms=tuple(room.name for room in bot.uncompleted_rooms),
        player_health=tuple((player.name, player.health) for player in bot.players),
    )


def _build_game_bot(scenario_id: str, config: GameConfig, base_path: Path | str | None):
    weapons_repo = WeaponsRepository(base_path=base_path)
    monster_kinds_repo = MonsterKindsRepository(weapons_repo=weapons_repo, base_path=base_path)
    scenarios_repo = ScenariosRepository(
        weapons_repo=weapons_repo, monster_kinds_repo=monster_kinds_repo, base_path=base_path
    )
    return create_game_bot(
        scenario_id,
        scenarios_repo=scenarios_repo,
        monster_kinds_repo=monster_kinds_repo,
        weapons_repo=weapons_repo,
        config=config,
    )
