"""Metric calculators: one-rep max, volume load, weight increments, RIR scale.

Pure functions, no DB. Inputs are checked up front and rejected with
InvalidArgument instead of producing nonsense numbers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from app.core.constants import RIR_CEILING
from app.core.enums import EquipmentType, WeightUnit
from app.core.errors import InvalidArgument

# Increment per unit, per equipment kind (smallest sensible jump)
WEIGHT_INCREMENTS: dict[WeightUnit, dict[EquipmentType, float]] = {
    WeightUnit.KG: {
        EquipmentType.BARBELL: 2.5,
        EquipmentType.DUMBBELL: 2.0,
        EquipmentType.MACHINE: 2.5,
        EquipmentType.CABLE: 2.5,
        EquipmentType.BODYWEIGHT: 0,
    },
    WeightUnit.LBS: {
        EquipmentType.BARBELL: 5,
        EquipmentType.DUMBBELL: 5,
        EquipmentType.MACHINE: 5,
        EquipmentType.CABLE: 5,
        EquipmentType.BODYWEIGHT: 0,
    },
}


@dataclass(frozen=True)
class RIRLevel:
    value: int
    label: str
    description: str
    rpe: int


RIR_SCALE: dict[int, RIRLevel] = {
    0: RIRLevel(0, "RIR 0", "Absolute failure - could not do another rep", 10),
    1: RIRLevel(1, "RIR 1", "Could do 1 more rep", 9),
    2: RIRLevel(2, "RIR 2", "Could do 2 more reps", 8),
    3: RIRLevel(3, "RIR 3", "Could do 3 more reps", 7),
    4: RIRLevel(4, "RIR 4+", "Could do 4 or more reps", 6),
}


def check_weight(weight: float, name: str = "weight") -> float:
    """Weight must be a finite number >= 0."""
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise InvalidArgument(f"{name} must be a number, got {weight!r}")
    if not math.isfinite(weight) or weight < 0:
        raise InvalidArgument(f"{name} must be a finite number >= 0, got {weight!r}")
    return weight


def check_count(value: int, name: str, minimum: int = 0) -> int:
    """Rep/set counts must be whole numbers >= minimum."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidArgument(f"{name} must be >= {minimum}, got {value}")
    return value


def one_rep_max(weight: float, reps: int) -> float:
    """Epley estimate: weight * (1 + reps / 30), rounded half up to an integer.
    A single rep is already a max, so the weight comes back unchanged."""
    check_weight(weight)
    check_count(reps, "reps", minimum=1)
    if reps == 1:
        return weight
    # Halves round up (22.5 -> 23), not to even
    return math.floor(weight * (1 + reps / 30) + 0.5)


def volume_load(weight: float, reps: int, sets: int) -> float:
    """Total work proxy: weight * reps * sets, no rounding."""
    check_weight(weight)
    check_count(reps, "reps")
    check_count(sets, "sets")
    return weight * reps * sets


def weight_increment(kind: EquipmentType | str, unit: WeightUnit | str = WeightUnit.KG) -> float:
    """Suggested load jump for an equipment kind. Unknown kinds use the barbell row."""
    try:
        table = WEIGHT_INCREMENTS[WeightUnit(unit)]
    except ValueError:
        raise InvalidArgument(f"unknown weight unit {unit!r}") from None
    try:
        return table[EquipmentType(kind)]
    except ValueError:
        return table[EquipmentType.BARBELL]


def rir_level(rir: int) -> RIRLevel:
    """RIR 4 and above collapse to the 4+ entry."""
    check_count(rir, "rir")
    return RIR_SCALE[min(rir, RIR_CEILING)]


def rir_to_rpe(rir: int) -> int:
    return rir_level(rir).rpe
