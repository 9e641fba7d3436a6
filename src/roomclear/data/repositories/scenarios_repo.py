"""Scenarios repository with reference validation."""
from __future__ import annotations

from typing import Dict, List

from roomclear.data.errors import DataReferenceError, DataValidationError
from roomclear.data.paths import SCENARIOS_FILE
from roomclear.data.repositories.base import RepositoryBase
from roomclear.data.repositories.monster_kinds_repo import MonsterKindsRepository
from roomclear.data.repositories.weapons_repo import WeaponsRepository
from roomclear.domain.defs import MonsterPlacementDef, PlayerDef, RoomDef, RoomRewardDef, ScenarioDef


class ScenariosRepository(RepositoryBase[ScenarioDef]):
    """Loads puzzle scenarios: ordered rooms of monsters and the players sent in."""

    def __init__(
        self,
        weapons_repo: WeaponsRepository | None = None,
        monster_kinds_repo: MonsterKindsRepository | None = None,
        base_path=None,
    ) -> None:
        super().__init__(SCENARIOS_FILE, base_path)
        self._weapons_repo = weapons_repo or WeaponsRepository(base_path=base_path)
        self._monster_kinds_repo = monster_kinds_repo or MonsterKindsRepository(
            weapons_repo=self._weapons_repo, base_path=base_path
        )
        self._weapon_ids: set[str] = set()
        self._kind_ids: set[str] = set()

    def _build(self, raw: dict[str, object]) -> Dict[str, ScenarioDef]:
        self._weapon_ids = self._weapons_repo.ids()
        self._kind_ids = self._monster_kinds_repo.ids()

        scenarios: Dict[str, ScenarioDef] = {}
        for raw_id, payload in raw.items():
            context = f"scenario '{raw_id}'"
            scenario_data = self._require_mapping(payload, context)
            self._assert_exact_fields(scenario_data, {"name", "rooms", "players"}, context)

            rooms = [
                self._build_room(room_payload, f"{context} room {index}")
                for index, room_payload in enumerate(self._require_list(scenario_data["rooms"], f"{context} rooms"))
            ]
            players = [
                self._build_player(player_payload, f"{context} player {index}")
                for index, player_payload in enumerate(
                    self._require_list(scenario_data["players"], f"{context} players")
                )
            ]
            self._assert_unique([room.name for room in rooms], f"{context} room names")
            self._assert_unique([player.name for player in players], f"{context} player names")

            scenarios[raw_id] = ScenarioDef(
                id=raw_id,
                name=self._require_str(scenario_data["name"], f"{context} name"),
                rooms=tuple(rooms),
                players=tuple(players),
            )
        return scenarios

    def _build_room(self, payload: object, context: str) -> RoomDef:
        room_data = self._require_mapping(payload, context)
        self._assert_exact_fields(room_data, {"name", "monsters"}, context, optional_fields={"reward"})
        monsters = tuple(
            self._build_placement(entry, f"{context} monster {index}")
            for index, entry in enumerate(self._require_list(room_data["monsters"], f"{context} monsters"))
        )
        reward = RoomRewardDef()
        if "reward" in room_data:
            reward = self._build_reward(room_data["reward"], f"{context} reward")
        return RoomDef(
            name=self._require_str(room_data["name"], f"{context} name"),
            monsters=monsters,
            reward=reward,
        )

    def _build_placement(self, payload: object, context: str) -> MonsterPlacementDef:
        if isinstance(payload, str):
            placement = MonsterPlacementDef(kind_id=payload)
        else:
            placement_data = self._require_mapping(payload, context)
            self._assert_exact_fields(placement_data, {"kind"}, context, optional_fields={"protected_by"})
            placement = MonsterPlacementDef(
                kind_id=self._require_str(placement_data["kind"], f"{context} kind"),
                protected_by=self._require_optional_str(placement_data.get("protected_by"), f"{context} protected_by"),
            )
        self._check_kind(placement.kind_id, context)
        if placement.protected_by is not None:
            self._check_kind(placement.protected_by, context)
        return placement

    def _build_reward(self, payload: object, context: str) -> RoomRewardDef:
        reward_data = self._require_mapping(payload, context)
        self._assert_exact_fields(reward_data, set(), context, optional_fields={"weapons", "ammunition", "health"})
        weapon_ids = self._require_str_list(reward_data.get("weapons", []), f"{context} weapons")
        ammunition = self._require_int_mapping(reward_data.get("ammunition", {}), f"{context} ammunition")
        for weapon_id in [*weapon_ids, *ammunition]:
            self._check_weapon(weapon_id, context)
        return RoomRewardDef(
            weapon_ids=tuple(weapon_ids),
            ammunition=ammunition,
            health=self._require_int(reward_data.get("health", 0), f"{context} health", minimum=0),
        )

    def _build_player(self, payload: object, context: str) -> PlayerDef:
        player_data = self._require_mapping(payload, context)
        self._assert_exact_fields(
            player_data, {"name", "health"}, context, optional_fields={"weapons", "ammunition"}
        )
        weapon_ids = self._require_str_list(player_data.get("weapons", []), f"{context} weapons")
        ammunition = self._require_int_mapping(player_data.get("ammunition", {}), f"{context} ammunition")
        for weapon_id in [*weapon_ids, *ammunition]:
            self._check_weapon(weapon_id, context)
        return PlayerDef(
            name=self._require_str(player_data["name"], f"{context} name"),
            health=self._require_int(player_data["health"], f"{context} health", minimum=1),
            weapon_ids=tuple(weapon_ids),
            ammunition=ammunition,
        )

    def _check_kind(self, kind_id: str, context: str) -> None:
        if kind_id not in self._kind_ids:
            raise DataReferenceError(f"{context} references missing monster kind '{kind_id}'.")

    def _check_weapon(self, weapon_id: str, context: str) -> None:
        if weapon_id not in self._weapon_ids:
            raise DataReferenceError(f"{context} references missing weapon '{weapon_id}'.")

    @staticmethod
    def _assert_unique(names: List[str], context: str) -> None:
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise DataValidationError(f"{context} must be unique; duplicated: {duplicates}.")
