"""Shared enums for models, services and API."""

from enum import Enum


class ProgressionAction(str, Enum):
    """What to do at the next session for an exercise."""

    INCREASE_WEIGHT = "increase_weight"
    INCREASE_REPS = "increase_reps"
    MAINTAIN = "maintain"
    CHECK_RECOVERY = "check_recovery"


class ProgressType(str, Enum):
    """Which variable the recommendation progresses."""

    WEIGHT = "weight"
    REPS = "reps"
    MAINTAIN = "maintain"


class EquipmentType(str, Enum):
    """Equipment kind; drives the weight increment table."""

    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    MACHINE = "machine"
    CABLE = "cable"
    BODYWEIGHT = "bodyweight"


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


class RecoveryFactor(str, Enum):
    """Recovery questionnaire factors. Declaration order is the reporting order."""

    SLEEP = "sleep"
    STRESS = "stress"
    NUTRITION = "nutrition"
    SORENESS = "soreness"
    ENERGY = "energy"


class WorkoutStatus(str, Enum):
    """How an active workout ended."""

    COMPLETED = "completed"
    CANCELLED = "cancelled"
