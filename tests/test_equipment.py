import random

from helpers import make_config

from horse_equipment.adapters.catalog import InMemoryItemCatalog
from horse_equipment.adapters.entity import SimulatedHorse
from horse_equipment.catalog import ItemCatalogResolver
from horse_equipment.equipment import EquipmentAssigner, compute_slots_to_fill
from horse_equipment.models import SeatTier

SCENARIO_ITEMS = {"A": "cat1", "B": "cat1", "C": "cat2"}


def _assigner(definitions: dict | None = None) -> EquipmentAssigner:
    return EquipmentAssigner(ItemCatalogResolver(InMemoryItemCatalog(definitions)))


def test_scenario_double_seat_and_no_competing_items() -> None:
    assigner = _assigner(SCENARIO_ITEMS)
    config = make_config("A", "B", "C", double=100, single=50, min_slots=1, max_slots=4)

    for seed in range(30):
        horse = SimulatedHorse(name="h")
        result = assigner.assign(horse, config, random.Random(seed))
        granted = {item.identifier for item in result.granted_items}

        assert result.seat_count == SeatTier.DOUBLE
        assert horse.double_seat and not horse.single_seat
        assert 1 <= len(granted) <= 2
        assert not {"A", "B"} <= granted
        assert len(horse.equipment.items) == len(granted)


def test_empty_item_list_only_rolls_seats() -> None:
    assigner = _assigner()
    horse = SimulatedHorse(name="h")

    result = assigner.assign(horse, make_config(single=100), random.Random(1))

    assert result.granted_items == []
    assert result.seat_count == SeatTier.SINGLE
    assert horse.equipment.items == []


def test_impossible_minimum_grants_nothing() -> None:
    assigner = _assigner(SCENARIO_ITEMS | {"D": "cat3"})
    config = make_config("A", "C", "D", min_slots=10, max_slots=10)

    result = assigner.assign(SimulatedHorse(name="h"), config, random.Random(2))

    assert result.slots_to_fill == 0
    assert result.granted_items == []


def test_slots_to_fill_stays_within_bounds() -> None:
    rng = random.Random(9)
    for min_slots in range(0, 8):
        for max_slots in range(0, 8):
            for available in range(0, 6):
                fill = compute_slots_to_fill(min_slots, max_slots, available, rng)
                assert 0 <= fill <= min(4, available)


def test_minimum_above_available_items_grants_nothing() -> None:
    rng = random.Random(6)
    assert compute_slots_to_fill(10, 10, 4, rng) == 0
    assert compute_slots_to_fill(5, 10, 4, rng) == 0


def test_draw_above_slot_count_is_clamped() -> None:
    assert compute_slots_to_fill(5, 10, 6, random.Random(6)) == 4


def test_inverted_bounds_grant_nothing() -> None:
    assert compute_slots_to_fill(3, 1, 4, random.Random(0)) == 0


def test_reassignment_overwrites_seats_and_items() -> None:
    assigner = _assigner()
    horse = SimulatedHorse(name="h")
    horse.equipment.grant(999, 1)

    assigner.assign(horse, make_config("horse.saddlebag", double=100), random.Random(3))
    second = assigner.assign(horse, make_config("horse.armor.wood", single=100), random.Random(3))

    assert horse.single_seat and not horse.double_seat
    assert [item.identifier for item in second.granted_items] == ["horse.armor.wood"]
    assert horse.equipment.items == [(second.granted_items[0].handle, 1)]


def test_missed_seat_roll_clears_previous_saddle() -> None:
    assigner = _assigner()
    horse = SimulatedHorse(name="h", double_seat=True)

    result = assigner.assign(horse, make_config(), random.Random(0))

    assert result.seat_count == SeatTier.NONE
    assert horse.seat_count == 0


def test_entity_without_container_is_left_untouched() -> None:
    assigner = _assigner()
    horse = SimulatedHorse(name="h", equipment=None, single_seat=True)

    result = assigner.assign(horse, make_config("horse.saddlebag", double=100), random.Random(0))

    assert result.granted_items == []
    assert result.seat_count == SeatTier.NONE
    assert horse.single_seat is True
    assert horse.seat_updates == 0


class _ForgetfulResolver(ItemCatalogResolver):
    """Loses one item after it has been selected."""

    def __init__(self, catalog, lost: str) -> None:
        super().__init__(catalog)
        self._lost = lost
        self._seen: set[str] = set()

    def resolve(self, spec):
        if spec.identifier == self._lost and spec.identifier in self._seen:
            return None
        self._seen.add(spec.identifier)
        return super().resolve(spec)


def test_late_resolution_failure_reduces_grants() -> None:
    definitions = {"A": "cat1", "B": "cat2", "C": "cat3"}
    assigner = EquipmentAssigner(_ForgetfulResolver(InMemoryItemCatalog(definitions), lost="B"))
    config = make_config("A", "B", "C", min_slots=3, max_slots=3)

    horse = SimulatedHorse(name="h")
    result = assigner.assign(horse, config, random.Random(4))

    assert result.slots_to_fill == 3
    assert sorted(item.identifier for item in result.granted_items) == ["A", "C"]
    assert len(horse.equipment.items) == 2
