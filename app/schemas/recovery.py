"""Recovery questionnaire schemas."""

from pydantic import BaseModel


class RecoveryAnalysisRead(BaseModel):
    total_impact: int
    issues: list[str]
    recommendations: list[str]
    overall_recommendation: str
    should_deload: bool


class FactorOptionRead(BaseModel):
    value: str
    label: str
    impact: int


class RecoveryFactorRead(BaseModel):
    id: str
    label: str
    question: str
    options: list[FactorOptionRead]
