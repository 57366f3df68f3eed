"""
Fit factor calculators.

Each calculator takes a bag already sorted into bag order and returns a
FactorResult. When too few clubs carry the attribute a calculator needs, it
returns the neutral score flagged as unscorable instead of raising.
"""

import math
from collections import Counter
from datetime import date
from typing import Callable, Dict, Optional, Sequence

import numpy as np

from bag.models import Club
from bag.normalizer import decode_flex, decode_kickpoint
from bag.sequencer import sequence_clubs
from .models import FactorResult, NEUTRAL_SCORE

AGE_ISSUE_YEARS = 7


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def round_score(value: float) -> int:
    """Round half up, clamped to [0, 100]"""
    return round_half_up(float(np.clip(value, 0, 100)))


def unscorable() -> FactorResult:
    return FactorResult(score=NEUTRAL_SCORE, issues=[], scorable=False)


def _positive(value: Optional[float]) -> bool:
    return value is not None and value > 0


def calculate_age_score(clubs: Sequence[Club], current_year: Optional[int] = None) -> FactorResult:
    current_year = current_year or date.today().year
    club_scores = []
    issues = []

    for club in clubs:
        if not club.year:
            continue
        age = current_year - club.year
        club_scores.append(max(50, 100 - age * 5))
        if age > AGE_ISSUE_YEARS:
            issues.append(f"{club.label}: {age} years old - consider updating")

    if not club_scores:
        return unscorable()

    return FactorResult(score=round_score(sum(club_scores) / len(club_scores)), issues=issues)


def calculate_weight_progression(clubs: Sequence[Club]) -> FactorResult:
    with_weight = sequence_clubs(c for c in clubs if _positive(c.shaft_weight))
    if len(with_weight) < 2:
        return unscorable()

    penalty = 0.0
    issues = []
    for prev, curr in zip(with_weight, with_weight[1:]):
        gap = curr.shaft_weight - prev.shaft_weight
        # Shafts should get heavier toward the wedges
        if gap < -5:
            penalty += abs(gap) * 2
            issues.append(
                f"{curr.label} shaft ({curr.shaft_weight:g}g) lighter than "
                f"{prev.label} ({prev.shaft_weight:g}g)"
            )
        elif gap > 25:
            penalty += gap - 15
            issues.append(f"Large weight gap: {prev.label} to {curr.label}")

    return FactorResult(score=round_score(100 - penalty), issues=issues)


def calculate_loft_gapping(clubs: Sequence[Club]) -> FactorResult:
    with_loft = sorted((c for c in clubs if _positive(c.loft)), key=lambda c: c.loft)
    if len(with_loft) < 2:
        return unscorable()

    penalty = 0.0
    issues = []
    for prev, curr in zip(with_loft, with_loft[1:]):
        gap = curr.loft - prev.loft
        if gap < 2:
            penalty += 2
        elif gap > 6:
            penalty += (gap - 4) * 3
            issues.append(
                f"Large loft gap: {prev.label} ({prev.loft:g}°) to {curr.label} ({curr.loft:g}°)"
            )

    return FactorResult(score=round_score(100 - penalty), issues=issues)


def calculate_flex_consistency(clubs: Sequence[Club]) -> FactorResult:
    buckets = Counter(f for f in (decode_flex(c.shaft_flex) for c in clubs) if f)
    if not buckets:
        return unscorable()
    if len(buckets) == 1:
        return FactorResult(score=100)

    total = sum(buckets.values())
    penalty = (total - max(buckets.values())) * 15
    return FactorResult(
        score=round_score(100 - penalty),
        issues=[f"Mixed flex: {len(buckets)} different flex ratings in bag"],
    )


def calculate_kickpoint_consistency(clubs: Sequence[Club]) -> FactorResult:
    buckets = Counter(k for k in (decode_kickpoint(c.shaft_kickpoint) for c in clubs) if k)
    if not buckets:
        return unscorable()
    if len(buckets) == 1:
        return FactorResult(score=100)

    penalty = (len(buckets) - 1) * 20
    return FactorResult(
        score=round_score(100 - penalty),
        issues=[f"Mixed kickpoints: {', '.join(buckets)}"],
    )


def calculate_torque_consistency(clubs: Sequence[Club]) -> FactorResult:
    torques = [c.shaft_torque for c in clubs if _positive(c.shaft_torque)]
    if len(torques) < 2:
        return unscorable()

    std_dev = float(np.std(torques))
    issues = []
    if std_dev > 1:
        issues.append(f"Torque variation: {std_dev:.1f}° std dev")

    return FactorResult(score=round_score(100 - std_dev * 10), issues=issues)


def calculate_length_progression(clubs: Sequence[Club]) -> FactorResult:
    with_length = sequence_clubs(c for c in clubs if _positive(c.length))
    if len(with_length) < 2:
        return unscorable()

    penalty = 0.0
    issues = []
    for prev, curr in zip(with_length, with_length[1:]):
        diff = prev.length - curr.length
        if diff < -0.5:
            penalty += abs(diff) * 15
            issues.append(f"{curr.label} longer than {prev.label}")
        elif diff > 1.5:
            penalty += (diff - 0.5) * 5

    return FactorResult(score=round_score(100 - penalty), issues=issues)


def calculate_lie_angle_progression(clubs: Sequence[Club]) -> FactorResult:
    with_lie = sequence_clubs(c for c in clubs if _positive(c.lie))
    if len(with_lie) < 2:
        return unscorable()

    penalty = 0.0
    issues = []
    for prev, curr in zip(with_lie, with_lie[1:]):
        # Lie angles should get more upright toward the wedges
        diff = curr.lie - prev.lie
        if diff < -1:
            penalty += abs(diff) * 5
            issues.append(f"Lie angle drops: {prev.label} to {curr.label}")

    return FactorResult(score=round_score(100 - penalty), issues=issues)


FACTOR_CALCULATORS: Dict[str, Callable[[Sequence[Club]], FactorResult]] = {
    "age": calculate_age_score,
    "weight_progression": calculate_weight_progression,
    "loft_gapping": calculate_loft_gapping,
    "flex_consistency": calculate_flex_consistency,
    "kickpoint_consistency": calculate_kickpoint_consistency,
    "torque_consistency": calculate_torque_consistency,
    "length_progression": calculate_length_progression,
    "lie_angle_progression": calculate_lie_angle_progression,
}


def calculate_factors(
    clubs: Sequence[Club],
    current_year: Optional[int] = None,
) -> Dict[str, FactorResult]:
    """Run every calculator over a bag-ordered list of clubs"""
    results: Dict[str, FactorResult] = {}
    for factor, calculator in FACTOR_CALCULATORS.items():
        if factor == "age":
            results[factor] = calculate_age_score(clubs, current_year=current_year)
        else:
            results[factor] = calculator(clubs)
    return results
