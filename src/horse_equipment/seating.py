"""Saddle seat rolls."""

from __future__ import annotations

import random

from horse_equipment.models import SeatTier


def chance_succeeded(percentage: int, rng: random.Random) -> bool:
    return rng.randrange(100) < percentage


def assign_seats(double_chance: int, single_chance: int, rng: random.Random) -> SeatTier:
    """Roll for a double seat, then for a single seat; the double roll wins ties."""
    if chance_succeeded(double_chance, rng):
        return SeatTier.DOUBLE
    if chance_succeeded(single_chance, rng):
        return SeatTier.SINGLE
    return SeatTier.NONE
