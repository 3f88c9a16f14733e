from app.core.enums import RecoveryFactor
from app.services.recovery import (
    OVERALL_CAUTION,
    OVERALL_DELOAD,
    OVERALL_READY,
    OVERALL_REDUCE,
    RECOVERY_FACTORS,
    score_recovery,
)

WORST = {"sleep": "poor", "stress": "very_high", "nutrition": "poor", "soreness": "very_sore", "energy": "exhausted"}


def test_every_factor_has_a_definition():
    assert list(RECOVERY_FACTORS) == list(RecoveryFactor)


def test_mixed_answers_proceed_with_caution():
    result = score_recovery({"sleep": "poor", "stress": "low"})
    assert result.total_impact == -1
    assert result.overall_recommendation == OVERALL_CAUTION
    assert result.should_deload is False
    assert result.issues == ["Sleep Quality"]
    assert result.recommendations == ["Try to get 7-9 hours of sleep tonight"]


def test_all_worst_answers_deload():
    result = score_recovery(WORST)
    assert result.total_impact == -10
    assert result.should_deload is True
    assert result.overall_recommendation == OVERALL_DELOAD
    assert len(result.recommendations) == 5


def test_issues_follow_questionnaire_order():
    result = score_recovery({"energy": "tired", "sleep": "fair", "stress": "high"})
    assert result.issues == ["Sleep Quality", "Stress Level", "Energy Level"]
    assert result.recommendations[0] == "Try to get 7-9 hours of sleep tonight"
    assert result.recommendations[-1] == "Ensure adequate carbohydrate intake pre-workout"
    assert result.total_impact == -3
    assert result.overall_recommendation == OVERALL_REDUCE


def test_zero_total_is_ready():
    result = score_recovery({"sleep": "good", "stress": "moderate"})
    assert result.total_impact == 0
    assert result.overall_recommendation == OVERALL_READY
    assert result.issues == []


def test_positive_total_is_ready():
    result = score_recovery({"sleep": "excellent", "energy": "energetic"})
    assert result.total_impact == 2
    assert result.overall_recommendation == OVERALL_READY


def test_unknown_keys_and_values_are_ignored():
    result = score_recovery({"hydration": "poor", "sleep": "terrible", "SLEEP": "fair", "mood": 3})
    assert result.total_impact == -1
    assert result.issues == ["Sleep Quality"]


def test_empty_questionnaire():
    result = score_recovery({})
    assert result.total_impact == 0
    assert result.should_deload is False


def test_deterministic():
    assert score_recovery(WORST) == score_recovery(WORST)
