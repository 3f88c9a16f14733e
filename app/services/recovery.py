"""Recovery factor scoring.

A short questionnaire (sleep, stress, nutrition, soreness, energy) where each
answer carries an impact in {-2, -1, 0, 1}. The total drives an overall call,
from "train hard" down to "take a deload". Unknown factors or answers are
skipped so partial questionnaires still score.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from app.core.constants import CAUTION_THRESHOLD, DELOAD_THRESHOLD, REDUCE_INTENSITY_THRESHOLD
from app.core.enums import RecoveryFactor


@dataclass(frozen=True)
class FactorOption:
    value: str
    label: str
    impact: int


@dataclass(frozen=True)
class FactorDefinition:
    factor: RecoveryFactor
    label: str
    question: str
    options: tuple[FactorOption, ...]
    advice: str

    def option(self, value: str) -> FactorOption | None:
        for o in self.options:
            if o.value == value:
                return o
        return None


RECOVERY_FACTORS: dict[RecoveryFactor, FactorDefinition] = {
    RecoveryFactor.SLEEP: FactorDefinition(
        factor=RecoveryFactor.SLEEP,
        label="Sleep Quality",
        question="How was your sleep last night?",
        options=(
            FactorOption("poor", "Poor (<6 hours)", -2),
            FactorOption("fair", "Fair (6-7 hours)", -1),
            FactorOption("good", "Good (7-8 hours)", 0),
            FactorOption("excellent", "Excellent (8+ hours)", 1),
        ),
        advice="Try to get 7-9 hours of sleep tonight",
    ),
    RecoveryFactor.STRESS: FactorDefinition(
        factor=RecoveryFactor.STRESS,
        label="Stress Level",
        question="How stressed are you feeling?",
        options=(
            FactorOption("very_high", "Very High", -2),
            FactorOption("high", "High", -1),
            FactorOption("moderate", "Moderate", 0),
            FactorOption("low", "Low", 1),
        ),
        advice="Consider stress management techniques (meditation, breathing exercises)",
    ),
    RecoveryFactor.NUTRITION: FactorDefinition(
        factor=RecoveryFactor.NUTRITION,
        label="Nutrition",
        question="How has your nutrition been?",
        options=(
            FactorOption("poor", "Poor (missed meals)", -2),
            FactorOption("fair", "Fair (some meals)", -1),
            FactorOption("good", "Good (regular meals)", 0),
            FactorOption("excellent", "Excellent (on track)", 1),
        ),
        advice="Focus on protein intake and proper hydration",
    ),
    RecoveryFactor.SORENESS: FactorDefinition(
        factor=RecoveryFactor.SORENESS,
        label="Muscle Soreness",
        question="How sore are you from last session?",
        options=(
            FactorOption("very_sore", "Very Sore", -2),
            FactorOption("sore", "Moderately Sore", -1),
            FactorOption("slight", "Slightly Sore", 0),
            FactorOption("none", "No Soreness", 1),
        ),
        advice="Consider active recovery or light cardio",
    ),
    RecoveryFactor.ENERGY: FactorDefinition(
        factor=RecoveryFactor.ENERGY,
        label="Energy Level",
        question="How energetic do you feel?",
        options=(
            FactorOption("exhausted", "Exhausted", -2),
            FactorOption("tired", "Tired", -1),
            FactorOption("normal", "Normal", 0),
            FactorOption("energetic", "Energetic", 1),
        ),
        advice="Ensure adequate carbohydrate intake pre-workout",
    ),
}

OVERALL_DELOAD = "Consider taking a deload week or rest day"
OVERALL_REDUCE = "Reduce intensity today (use lighter weights or fewer sets)"
OVERALL_CAUTION = "Proceed with caution, listen to your body"
OVERALL_READY = "You're ready to train hard today!"


@dataclass(frozen=True)
class RecoveryAnalysis:
    total_impact: int
    issues: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    overall_recommendation: str = OVERALL_READY
    should_deload: bool = False


def _resolve_factor(key: object) -> RecoveryFactor | None:
    if not isinstance(key, str):
        return None
    try:
        return RecoveryFactor(key.strip().lower())
    except ValueError:
        return None


def overall_recommendation(total_impact: int) -> str:
    """Band the total impact; more negative is worse."""
    if total_impact <= DELOAD_THRESHOLD:
        return OVERALL_DELOAD
    if total_impact <= REDUCE_INTENSITY_THRESHOLD:
        return OVERALL_REDUCE
    if total_impact <= CAUTION_THRESHOLD:
        return OVERALL_CAUTION
    return OVERALL_READY


def score_recovery(responses: Mapping[str, str]) -> RecoveryAnalysis:
    """Score a (possibly partial) questionnaire. Never raises on unknown input."""
    total = 0
    flagged: set[RecoveryFactor] = set()
    for key, value in responses.items():
        factor = _resolve_factor(key)
        if factor is None:
            continue
        option = RECOVERY_FACTORS[factor].option(value)
        if option is None:
            continue
        total += option.impact
        if option.impact < 0:
            flagged.add(factor)

    # Report in questionnaire order, not input order
    ordered = [d for f, d in RECOVERY_FACTORS.items() if f in flagged]
    return RecoveryAnalysis(
        total_impact=total,
        issues=[d.label for d in ordered],
        recommendations=[d.advice for d in ordered],
        overall_recommendation=overall_recommendation(total),
        should_deload=total <= DELOAD_THRESHOLD,
    )
