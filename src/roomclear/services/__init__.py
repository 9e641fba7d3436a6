"""Service layer exports."""

from .errors import FactoryError
from .game_bot import GameBot
from .kill_executor import kill_monster
from .kill_planner import KillLedger, can_kill
from .protectors import get_all_protectors_in_room
from .scenario_runner import ScenarioOutcome, run_scenario

__all__ = [
    "FactoryError",
    "GameBot",
    "KillLedger",
    "ScenarioOutcome",
    "can_kill",
    "get_all_protectors_in_room",
    "kill_monster",
    "run_scenario",
]
