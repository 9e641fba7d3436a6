import json
from pathlib import Path

import pytest

from roomclear.data.errors import DataLoadError, DataReferenceError, DataValidationError
from roomclear.data.repositories import MonsterKindsRepository, ScenariosRepository, WeaponsRepository
from roomclear.domain.defs import MonsterPlacementDef


def test_default_definitions_load() -> None:
    weapons_repo = WeaponsRepository()
    kinds_repo = MonsterKindsRepository(weapons_repo=weapons_repo)
    scenarios_repo = ScenariosRepository(weapons_repo=weapons_repo, monster_kinds_repo=kinds_repo)

    assert [weapon.id for weapon in weapons_repo.by_rank()] == ["fist", "chainsaw", "pistol", "shotgun"]
    assert weapons_repo.default_weapon().id == "fist"
    assert kinds_repo.get("demon").protected_by == "imp"
    assert kinds_repo.get("imp").protected_by is None
    assert {"first_blood", "gated_armory", "haunted_hall", "circular_ward"} <= scenarios_repo.ids()


def test_weapons_repo_get_missing_raises(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_weapons(definitions_dir)
    repo = WeaponsRepository(base_path=definitions_dir)

    with pytest.raises(KeyError):
        repo.get("bfg")


def test_weapons_repo_rejects_shared_rank(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "weapons.json",
        {"fist": {"name": "Fist", "rank": 0}, "knuckles": {"name": "Knuckles", "rank": 0}},
    )

    with pytest.raises(DataValidationError):
        WeaponsRepository(base_path=definitions_dir).all()


def test_weapons_repo_rejects_unknown_fields(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "weapons.json", {"fist": {"name": "Fist", "rank": 0, "damage": 3}})

    with pytest.raises(DataValidationError):
        WeaponsRepository(base_path=definitions_dir).all()


def test_missing_definition_file_raises_load_error(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)

    with pytest.raises(DataLoadError):
        WeaponsRepository(base_path=definitions_dir).all()


def test_invalid_json_raises_load_error(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    (definitions_dir / "weapons.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(DataLoadError) as excinfo:
        WeaponsRepository(base_path=definitions_dir).all()

    assert excinfo.value.source == definitions_dir / "weapons.json"


def test_empty_definition_file_raises_load_error(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    (definitions_dir / "weapons.json").write_text("  \n", encoding="utf-8")

    with pytest.raises(DataLoadError):
        WeaponsRepository(base_path=definitions_dir).all()


def test_definition_file_must_be_keyed_by_id(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "weapons.json", [{"name": "Fist", "rank": 0}])

    with pytest.raises(DataValidationError):
        WeaponsRepository(base_path=definitions_dir).all()


def test_monster_kind_with_missing_weapon_raises(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_weapons(definitions_dir)
    _write_json(
        definitions_dir / "monster_kinds.json",
        {"imp": {"name": "Imp", "rank": 0, "weapon": "bfg", "ammunition": 1, "exposure_cost": 5}},
    )

    with pytest.raises(DataReferenceError):
        MonsterKindsRepository(base_path=definitions_dir).all()


def test_monster_kind_with_missing_protector_raises(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_weapons(definitions_dir)
    _write_json(
        definitions_dir / "monster_kinds.json",
        {
            "imp": {
                "name": "Imp",
                "rank": 0,
                "weapon": "fist",
                "ammunition": 1,
                "exposure_cost": 5,
                "protected_by": "ghost",
            }
        },
    )

    with pytest.raises(DataReferenceError):
        MonsterKindsRepository(base_path=definitions_dir).all()


def test_monster_kind_requires_positive_ammunition(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_weapons(definitions_dir)
    _write_json(
        definitions_dir / "monster_kinds.json",
        {"imp": {"name": "Imp", "rank": 0, "weapon": "fist", "ammunition": 0, "exposure_cost": 5}},
    )

    with pytest.raises(DataValidationError):
        MonsterKindsRepository(base_path=definitions_dir).all()


def test_scenario_placements_accept_kind_ids_and_objects(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_weapons(definitions_dir)
    _write_kinds(definitions_dir)
    _write_json(
        definitions_dir / "scenarios.json",
        {
            "ambush": {
                "name": "Ambush",
                "rooms": [
                    {
                        "name": "Hall",
                        "monsters": ["imp", {"kind": "imp", "protected_by": "demon"}, {"kind": "demon"}],
                        "reward": {"weapons": ["pistol"], "ammunition": {"pistol": 3}, "health": 4},
                    }
                ],
                "players": [{"name": "Marine", "health": 30, "weapons": ["pistol"]}],
            }
        },
    )

    scenario = ScenariosRepository(base_path=definitions_dir).get("ambush")

    room = scenario.rooms[0]
    assert room.monsters == (
        MonsterPlacementDef(kind_id="imp"),
        MonsterPlacementDef(kind_id="imp", protected_by="demon"),
        MonsterPlacementDef(kind_id="demon"),
    )
    assert room.reward.weapon_ids == ("pistol",)
    assert room.reward.ammunition == {"pistol": 3}
    assert room.reward.health == 4
    assert scenario.players[0].weapon_ids == ("pistol",)
    assert scenario.players[0].ammunition == {}


def test_scenario_with_missing_monster_kind_raises(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_weapons(definitions_dir)
    _write_kinds(definitions_dir)
    _write_json(
        definitions_dir / "scenarios.json",
        {
            "broken": {
                "name": "Broken",
                "rooms": [{"name": "Hall", "monsters": ["cyberdemon"]}],
                "players": [{"name": "Marine", "health": 30}],
            }
        },
    )

    with pytest.raises(DataReferenceError):
        ScenariosRepository(base_path=definitions_dir).all()


def test_scenario_with_duplicate_player_names_raises(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_weapons(definitions_dir)
    _write_kinds(definitions_dir)
    _write_json(
        definitions_dir / "scenarios.json",
        {
            "crowded": {
                "name": "Crowded",
                "rooms": [],
                "players": [{"name": "Marine", "health": 30}, {"name": "Marine", "health": 40}],
            }
        },
    )

    with pytest.raises(DataValidationError):
        ScenariosRepository(base_path=definitions_dir).all()


def _write_weapons(definitions_dir: Path) -> None:
    _write_json(
        definitions_dir / "weapons.json",
        {"fist": {"name": "Fist", "rank": 0}, "pistol": {"name": "Pistol", "rank": 1}},
    )


def _write_kinds(definitions_dir: Path) -> None:
    _write_json(
        definitions_dir / "monster_kinds.json",
        {
            "imp": {"name": "Imp", "rank": 0, "weapon": "fist", "ammunition": 1, "exposure_cost": 5},
            "demon": {
                "name": "Demon",
                "rank": 1,
                "weapon": "pistol",
                "ammunition": 6,
                "exposure_cost": 10,
                "protected_by": "imp",
            },
        },
    )


def _write_json(path: Path, data: object) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    return definitions_dir
