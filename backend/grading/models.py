from pydantic import BaseModel, Field
from typing import Dict, List, Tuple

FACTORS: Tuple[str, ...] = (
    "age",
    "weight_progression",
    "loft_gapping",
    "flex_consistency",
    "kickpoint_consistency",
    "torque_consistency",
    "length_progression",
    "lie_angle_progression",
)

NEUTRAL_SCORE = 75


class GradingWeights(BaseModel):
    """Per-factor weights; conventionally sum to 1.0 but this is not enforced"""
    age: float = 0.20
    weight_progression: float = 0.20
    loft_gapping: float = 0.20
    flex_consistency: float = 0.05
    kickpoint_consistency: float = 0.10
    torque_consistency: float = 0.05
    length_progression: float = 0.10
    lie_angle_progression: float = 0.10

    def weight_for(self, factor: str) -> float:
        return getattr(self, factor)


class FactorResult(BaseModel):
    score: int = Field(..., ge=0, le=100)
    issues: List[str] = Field(default_factory=list)
    scorable: bool = True


class ComponentScore(BaseModel):
    score: int
    grade: str


class GradeSummary(BaseModel):
    overall_score: int
    overall_grade: str
    component_scores: Dict[str, ComponentScore]


class GradeReport(GradeSummary):
    issues: List[str] = Field(default_factory=list)

    def summary(self) -> GradeSummary:
        return GradeSummary(
            overall_score=self.overall_score,
            overall_grade=self.overall_grade,
            component_scores=self.component_scores,
        )
