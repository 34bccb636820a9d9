"""Persisted equipment configuration document and its JSON store."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from horse_equipment.config import ENGINE_VERSION
from horse_equipment.models import ItemSpec

_VERSION_PART_RE = re.compile(r"\d+")


class ConfigLoadError(RuntimeError):
    """Raised when the configuration file cannot be read or validated."""


class ItemEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    short_name: str = Field(alias="Short Name")
    amount: int = Field(default=1, gt=0, alias="Amount")


class EquipmentConfig(BaseModel):
    """Operator-facing configuration; replaced wholesale, never mutated in place."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    version: str = Field(default="0.0.0", alias="Version")
    double_seat_chance: int = Field(default=50, ge=0, le=100, alias="Chance For Double Saddle Seat")
    single_seat_chance: int = Field(default=50, ge=0, le=100, alias="Chance For Single Saddle Seat")
    min_slots_to_equip: int = Field(default=1, ge=0, alias="Minimum Equipment Slots To Fill")
    max_slots_to_equip: int = Field(default=4, ge=0, alias="Maximum Equipment Slots To Fill")
    items: list[ItemEntry] = Field(default_factory=list, alias="Items To Equip")

    _item_specs: tuple[ItemSpec, ...] = PrivateAttr(default=())

    def model_post_init(self, __context: Any) -> None:
        self._item_specs = tuple(ItemSpec(identifier=item.short_name, amount=item.amount) for item in self.items)

    @property
    def item_specs(self) -> tuple[ItemSpec, ...]:
        """Stable spec instances for this configuration."""
        return self._item_specs

    @property
    def has_inverted_bounds(self) -> bool:
        return self.min_slots_to_equip > self.max_slots_to_equip


def default_config() -> EquipmentConfig:
    return EquipmentConfig(
        version=ENGINE_VERSION,
        double_seat_chance=50,
        single_seat_chance=50,
        min_slots_to_equip=1,
        max_slots_to_equip=4,
        items=[
            ItemEntry(short_name="horse.armor.roadsign", amount=1),
            ItemEntry(short_name="horse.shoes.advanced", amount=1),
            ItemEntry(short_name="horse.saddlebag", amount=1),
            ItemEntry(short_name="horse.armor.wood", amount=1),
            ItemEntry(short_name="horse.shoes.basic", amount=1),
        ],
    )


def version_key(version: str | None) -> tuple[int, ...]:
    """Numeric sort key for dotted versions; missing versions sort lowest."""
    parts = [int(part) for part in _VERSION_PART_RE.findall(version or "")]
    while len(parts) < 3:
        parts.append(0)
    return tuple(parts) if version else (-1,)


def is_older(version: str | None, than: str) -> bool:
    return version_key(version) < version_key(than)


class ConfigStore:
    """Loads, migrates and writes the equipment configuration as indented JSON."""

    def __init__(
        self,
        file_path: str | Path,
        *,
        engine_version: str = ENGINE_VERSION,
        logger: logging.Logger | None = None,
    ) -> None:
        self._path = Path(file_path)
        self._engine_version = engine_version
        self._logger = logger or logging.getLogger("horse_equipment.config_store")

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> EquipmentConfig:
        """Read the document, migrating and rewriting it in full.

        A missing file is created with defaults.
        """
        if not self._path.exists():
            self._logger.info("config_defaults_written", extra={"path": str(self._path)})
            return self.reset()

        try:
            config = EquipmentConfig.model_validate_json(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            raise ConfigLoadError(f"Unable to load configuration {self._path}: {exc}") from exc

        if is_older(config.version, self._engine_version):
            config = self._migrate(config)

        if config.has_inverted_bounds:
            self._logger.warning(
                "config_inverted_slot_bounds",
                extra={"min_slots": config.min_slots_to_equip, "max_slots": config.max_slots_to_equip},
            )

        self.save(config)
        return config

    def save(self, config: EquipmentConfig) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(config.model_dump_json(by_alias=True, indent=2) + "\n", encoding="utf-8")

    def reset(self) -> EquipmentConfig:
        config = default_config().model_copy(update={"version": self._engine_version})
        self.save(config)
        return config

    def _migrate(self, config: EquipmentConfig) -> EquipmentConfig:
        previous = config.version
        self._logger.warning(
            "config_migration_started",
            extra={"from_version": previous, "to_version": self._engine_version},
        )
        if is_older(previous, "1.0.0"):
            config = default_config()

        self._logger.warning(
            "config_migrated",
            extra={"from_version": previous, "to_version": self._engine_version},
        )
        return config.model_copy(update={"version": self._engine_version})
