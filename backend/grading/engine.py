import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from bag.models import Club
from bag.normalizer import RawClub, normalize_bag
from bag.sequencer import sequence_clubs
from .factors import calculate_factors, round_half_up
from .models import (
    ComponentScore,
    FactorResult,
    FACTORS,
    GradeReport,
    GradingWeights,
)

logger = logging.getLogger(__name__)

WeightsInput = Optional[Union[GradingWeights, Mapping[str, float]]]

GRADE_CUTOFFS: List[Tuple[int, str]] = [
    (97, "A+"),
    (93, "A"),
    (90, "A-"),
    (87, "B+"),
    (83, "B"),
    (80, "B-"),
    (77, "C+"),
    (73, "C"),
    (70, "C-"),
    (67, "D+"),
    (65, "D"),
]


def score_to_grade(score: float) -> str:
    for cutoff, grade in GRADE_CUTOFFS:
        if score >= cutoff:
            return grade
    return "F"


def resolve_weights(weights: WeightsInput = None) -> GradingWeights:
    """Accept a GradingWeights, a partial mapping, or None for the defaults"""
    if weights is None:
        return GradingWeights()
    if isinstance(weights, GradingWeights):
        return weights
    return GradingWeights(**{k: v for k, v in weights.items() if k in FACTORS})


class BagGrader:
    """Normalize, sequence, score and aggregate a bag of clubs"""

    def __init__(self, current_year: Optional[int] = None):
        self.current_year = current_year

    def prepare(self, clubs: Iterable[RawClub]) -> List[Club]:
        return sequence_clubs(normalize_bag(clubs))

    def evaluate(self, clubs: Iterable[RawClub]) -> Dict[str, FactorResult]:
        """Per-factor results, including whether each factor had enough data"""
        return calculate_factors(self.prepare(clubs), current_year=self.current_year)

    def grade(self, clubs: Iterable[RawClub], weights: WeightsInput = None) -> GradeReport:
        resolved = resolve_weights(weights)
        results = self.evaluate(clubs)

        overall = round_half_up(sum(
            results[factor].score * resolved.weight_for(factor) for factor in FACTORS
        ))

        unscored = [factor for factor in FACTORS if not results[factor].scorable]
        if unscored:
            logger.debug(f"Neutral score used for: {', '.join(unscored)}")

        return GradeReport(
            overall_score=overall,
            overall_grade=score_to_grade(overall),
            component_scores={
                factor: ComponentScore(
                    score=results[factor].score,
                    grade=score_to_grade(results[factor].score),
                )
                for factor in FACTORS
            },
            issues=[issue for factor in FACTORS for issue in results[factor].issues],
        )


def grade_bag(
    clubs: Iterable[RawClub],
    weights: WeightsInput = None,
    current_year: Optional[int] = None,
) -> GradeReport:
    return BagGrader(current_year=current_year).grade(clubs, weights)
