import json
import logging
from pathlib import Path

import pytest

from roomclear.core import config as config_module
from roomclear.services import run_scenario
from roomclear.services.errors import FactoryError


def test_run_scenario_applies_config_and_reports_outcome(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    levels = []
    monkeypatch.setattr(config_module.logging, "basicConfig", lambda **kwargs: levels.append(kwargs["level"]))
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"log_level": "info"}), encoding="utf-8")

    outcome = run_scenario("gated_armory", config_path=config_path)

    assert levels == [logging.INFO]
    assert outcome.cleared is True
    assert outcome.passes == 3
    assert outcome.completed_rooms == ("Keep", "Armory")
    assert outcome.uncompleted_rooms == ()
    assert outcome.player_health == (("Marine", 45),)


def test_run_scenario_reports_stalled_rooms(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module.logging, "basicConfig", lambda **kwargs: None)

    outcome = run_scenario("haunted_hall")

    assert outcome.cleared is False
    assert outcome.uncompleted_rooms == ("Hall",)
    assert outcome.player_health == (("Marine", 25),)


def test_run_scenario_unknown_id_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module.logging, "basicConfig", lambda **kwargs: None)

    with pytest.raises(FactoryError):
        run_scenario("inferno")
