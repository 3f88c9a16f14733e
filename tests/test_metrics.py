import math

import pytest

from app.core.enums import EquipmentType, WeightUnit
from app.core.errors import InvalidArgument
from app.services.metrics import (
    one_rep_max,
    rir_level,
    rir_to_rpe,
    volume_load,
    weight_increment,
)


def test_one_rep_max_single_rep_is_weight():
    assert one_rep_max(100, 1) == 100


def test_one_rep_max_epley_rounded():
    assert one_rep_max(100, 10) == 133
    assert one_rep_max(60, 5) == 70
    assert one_rep_max(80, 8) == 101


def test_one_rep_max_is_stable():
    assert one_rep_max(97.5, 6) == one_rep_max(97.5, 6)


@pytest.mark.parametrize("reps", [0, -3])
def test_one_rep_max_rejects_non_positive_reps(reps):
    with pytest.raises(InvalidArgument):
        one_rep_max(100, reps)


def test_volume_load_exact():
    assert volume_load(100, 10, 3) == 3000
    assert volume_load(22.5, 8, 4) == 720.0
    assert volume_load(0, 15, 3) == 0


@pytest.mark.parametrize(
    "weight,reps,sets",
    [(-1, 10, 3), (100, -1, 3), (100, 10, -2), (math.inf, 5, 1), (math.nan, 5, 1)],
)
def test_volume_load_rejects_bad_input(weight, reps, sets):
    with pytest.raises(InvalidArgument):
        volume_load(weight, reps, sets)


def test_weight_increment_table():
    assert weight_increment("barbell", "kg") == 2.5
    assert weight_increment("dumbbell", "kg") == 2.0
    assert weight_increment(EquipmentType.CABLE, WeightUnit.KG) == 2.5
    assert weight_increment("dumbbell", "lbs") == 5
    assert weight_increment("machine", "lbs") == 5


def test_weight_increment_unknown_kind_uses_barbell():
    assert weight_increment("unknown", "kg") == 2.5
    assert weight_increment("kettlebell", "lbs") == 5


@pytest.mark.parametrize("unit", ["kg", "lbs"])
def test_weight_increment_bodyweight_is_zero(unit):
    assert weight_increment("bodyweight", unit) == 0


def test_weight_increment_unknown_unit():
    with pytest.raises(InvalidArgument):
        weight_increment("barbell", "stone")


def test_rir_scale():
    assert rir_to_rpe(0) == 10
    assert rir_to_rpe(2) == 8
    assert rir_level(4).label == "RIR 4+"
    assert rir_level(7).rpe == 6
    with pytest.raises(InvalidArgument):
        rir_level(-1)


def test_one_rep_max_rounds_halves_up():
    # 15 * 1.5 == 22.5 exactly
    assert one_rep_max(15, 15) == 23
