from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class SeatTier(IntEnum):
    NONE = 0
    SINGLE = 1
    DOUBLE = 2


@dataclass(frozen=True, eq=False, slots=True)
class ItemSpec:
    """Configured candidate item; hashed by identity so it can key the resolver memo."""

    identifier: str
    amount: int = 1


@dataclass(frozen=True, slots=True)
class ResolvedItem:
    spec: ItemSpec
    slot_category: Any
    handle: int

    @property
    def identifier(self) -> str:
        return self.spec.identifier

    @property
    def amount(self) -> int:
        return self.spec.amount


@dataclass(slots=True)
class SlotAssignmentResult:
    seat_count: SeatTier = SeatTier.NONE
    granted_items: list[ResolvedItem] = field(default_factory=list)
    slots_to_fill: int = 0
