from __future__ import annotations

from horse_equipment.config_store import EquipmentConfig, ItemEntry


def make_config(*names: str, double: int = 0, single: int = 0, min_slots: int = 1, max_slots: int = 4) -> EquipmentConfig:
    return EquipmentConfig(
        version="1.0.0",
        double_seat_chance=double,
        single_seat_chance=single,
        min_slots_to_equip=min_slots,
        max_slots_to_equip=max_slots,
        items=[ItemEntry(short_name=name, amount=1) for name in names],
    )
