"""Boundary for entities that can be saddled and equipped."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class EquipmentContainer(Protocol):
    """Equipment inventory attached to an entity."""

    def clear(self) -> None:
        """Discard every item currently held."""

    def grant(self, item_handle: int, amount: int) -> None:
        """Create ``amount`` of the item identified by ``item_handle`` in the container."""


class MountableEntity(Protocol):
    """Entity exposing an equipment container and a seat-count attribute."""

    equipment: EquipmentContainer | None
    is_destroyed: bool

    def set_seat_state(self, seat_count: int) -> None:
        """Enable exactly ``seat_count`` passenger seats (0 removes the saddle)."""


@dataclass(slots=True)
class EquipmentInventory:
    """List-backed equipment container."""

    items: list[tuple[int, int]] = field(default_factory=list)

    def clear(self) -> None:
        self.items.clear()

    def grant(self, item_handle: int, amount: int) -> None:
        self.items.append((item_handle, amount))


@dataclass(slots=True)
class SimulatedHorse:
    """Stand-in horse with the two seat flags the game keeps separately."""

    name: str
    equipment: EquipmentInventory | None = field(default_factory=EquipmentInventory)
    is_destroyed: bool = False
    single_seat: bool = False
    double_seat: bool = False
    seat_updates: int = 0

    @property
    def seat_count(self) -> int:
        if self.double_seat:
            return 2
        if self.single_seat:
            return 1
        return 0

    def set_seat_state(self, seat_count: int) -> None:
        self.single_seat = False
        self.double_seat = False
        if seat_count == 1:
            self.single_seat = True
        elif seat_count == 2:
            self.double_seat = True
        self.seat_updates += 1
