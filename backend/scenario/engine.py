import logging
from typing import Iterable, List, Optional, Sequence

from bag.normalizer import RawClub
from grading.engine import BagGrader, WeightsInput
from grading.models import FACTORS, GradeSummary
from .models import FactorChange, ScenarioResult, ScenarioSwap
from .simulator import simulate_bag

logger = logging.getLogger(__name__)

STATUS_THRESHOLD = 2
SIGNIFICANT_DELTA = 5


def classify_change(from_score: int, to_score: int) -> str:
    delta = to_score - from_score
    if delta > STATUS_THRESHOLD:
        return "improved"
    if delta < -STATUS_THRESHOLD:
        return "declined"
    return "same"


def compare_factors(current: GradeSummary, projected: GradeSummary) -> List[FactorChange]:
    changes = []
    for factor in FACTORS:
        before = current.component_scores[factor]
        after = projected.component_scores[factor]
        changes.append(FactorChange(
            factor=factor,
            from_score=before.score,
            to_score=after.score,
            from_grade=before.grade,
            to_grade=after.grade,
            status=classify_change(before.score, after.score),
        ))
    return changes


def _factor_names(changes: Iterable[FactorChange]) -> str:
    return ", ".join(change.factor.replace("_", " ") for change in changes)


def summarize(current: GradeSummary, projected: GradeSummary, changes: Sequence[FactorChange]) -> str:
    """Deterministic one-paragraph description of a projected grade change"""
    delta = projected.overall_score - current.overall_score

    if delta > SIGNIFICANT_DELTA:
        parts = [
            f"Significant improvement (+{delta} points): "
            f"{current.overall_grade} → {projected.overall_grade}."
        ]
    elif delta > 0:
        parts = [f"Modest improvement (+{delta} points)."]
    elif delta < -SIGNIFICANT_DELTA:
        parts = [f"This would decrease your grade ({delta} points). Consider a different approach."]
    elif delta < 0:
        parts = [f"Slight decrease ({delta} points)."]
    else:
        parts = ["Minimal impact on overall grade."]

    improved = [c for c in changes if c.status == "improved"]
    declined = [c for c in changes if c.status == "declined"]
    if improved:
        parts.append(f"Improved: {_factor_names(improved)}.")
    if declined:
        parts.append(f"Note: {_factor_names(declined)} would decline.")

    return " ".join(parts)


class ScenarioEngine:
    """Grade a baseline bag against its simulated counterpart"""

    def __init__(self, grader: Optional[BagGrader] = None):
        self.grader = grader or BagGrader()

    def run(
        self,
        clubs: Sequence[RawClub],
        swaps: Iterable[ScenarioSwap],
        weights: WeightsInput = None,
        additions: Iterable[RawClub] = (),
        removals: Iterable[str] = (),
    ) -> ScenarioResult:
        virtual = simulate_bag(clubs, swaps, additions=additions, removals=removals)

        current = self.grader.grade(clubs, weights).summary()
        projected = self.grader.grade(virtual, weights).summary()

        changes = compare_factors(current, projected)
        logger.info(f"Scenario complete: {current.overall_grade} → {projected.overall_grade}")

        return ScenarioResult(
            current=current,
            projected=projected,
            factor_changes=changes,
            summary=summarize(current, projected, changes),
        )


def run_scenario(
    clubs: Sequence[RawClub],
    swaps: Iterable[ScenarioSwap],
    weights: WeightsInput = None,
    additions: Iterable[RawClub] = (),
    removals: Iterable[str] = (),
    current_year: Optional[int] = None,
) -> ScenarioResult:
    engine = ScenarioEngine(BagGrader(current_year=current_year))
    return engine.run(clubs, swaps, weights, additions=additions, removals=removals)
