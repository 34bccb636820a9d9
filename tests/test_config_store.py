from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from horse_equipment.config_store import (
    ConfigLoadError,
    ConfigStore,
    EquipmentConfig,
    default_config,
    is_older,
)


def _write(path: Path, payload: dict) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


def test_missing_file_is_created_with_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config" / "HorseEquipment.json"
    config = ConfigStore(path).load()

    assert config.model_dump() == default_config().model_dump()
    on_disk = json.loads(path.read_text(encoding="utf-8"))
    assert on_disk["Version"] == "1.0.0"
    assert on_disk["Chance For Double Saddle Seat"] == 50
    assert on_disk["Items To Equip"][0] == {"Short Name": "horse.armor.roadsign", "Amount": 1}


def test_current_document_is_kept(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    _write(
        path,
        {
            "Version": "1.0.0",
            "Chance For Double Saddle Seat": 10,
            "Chance For Single Saddle Seat": 90,
            "Minimum Equipment Slots To Fill": 2,
            "Maximum Equipment Slots To Fill": 3,
            "Items To Equip": [{"Short Name": "horse.saddlebag", "Amount": 2}],
        },
    )

    config = ConfigStore(path).load()

    assert config.double_seat_chance == 10
    assert config.single_seat_chance == 90
    assert [(spec.identifier, spec.amount) for spec in config.item_specs] == [("horse.saddlebag", 2)]


def test_old_document_is_reset_with_warning(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "cfg.json"
    _write(path, {"Version": "0.9.5", "Chance For Double Saddle Seat": 1, "Items To Equip": []})

    with caplog.at_level(logging.WARNING, logger="horse_equipment.config_store"):
        config = ConfigStore(path).load()

    assert config.model_dump() == default_config().model_dump()
    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["config_migration_started", "config_migrated"]
    assert caplog.records[-1].from_version == "0.9.5"
    assert caplog.records[-1].to_version == "1.0.0"
    assert json.loads(path.read_text(encoding="utf-8"))["Version"] == "1.0.0"


def test_document_without_version_is_reset(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    _write(path, {"Chance For Double Saddle Seat": 5})

    assert ConfigStore(path).load().double_seat_chance == 50


def test_inverted_bounds_are_accepted_and_reported(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "cfg.json"
    _write(
        path,
        {"Version": "1.0.0", "Minimum Equipment Slots To Fill": 4, "Maximum Equipment Slots To Fill": 1},
    )

    with caplog.at_level(logging.WARNING, logger="horse_equipment.config_store"):
        config = ConfigStore(path).load()

    assert config.has_inverted_bounds
    assert "config_inverted_slot_bounds" in caplog.text


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        json.dumps({"Version": "1.0.0", "Chance For Single Saddle Seat": 150}),
        json.dumps({"Version": "1.0.0", "Items To Equip": [{"Short Name": "horse.saddlebag", "Amount": 0}]}),
    ],
)
def test_invalid_documents_raise_load_error(tmp_path: Path, payload: str) -> None:
    path = tmp_path / "cfg.json"
    path.write_text(payload, encoding="utf-8")

    with pytest.raises(ConfigLoadError):
        ConfigStore(path).load()


def test_version_comparison_is_numeric() -> None:
    assert is_older("0.9.9", "1.0.0")
    assert is_older("1.2", "1.10.0")
    assert not is_older("1.0", "1.0.0")
    assert not is_older("1.0.1", "1.0.0")
    assert is_older("", "1.0.0")
    assert is_older(None, "0.0.1")


def test_item_specs_are_stable_per_config() -> None:
    config = EquipmentConfig(items=[{"short_name": "horse.saddlebag"}])

    assert config.item_specs is config.item_specs
    assert config.item_specs[0].amount == 1


def test_undecodable_document_raises_load_error(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    path.write_bytes(b'{"Version": "1.0.0\xff"}')

    with pytest.raises(ConfigLoadError):
        ConfigStore(path).load()
