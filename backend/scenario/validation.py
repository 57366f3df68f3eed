from typing import Iterable, Sequence

from bag.normalizer import RawClub, normalize_bag
from .models import ScenarioSwap


class ScenarioValidationError(ValueError):
    """A scenario request that breaks a caller-side contract"""


def validate_bag(clubs: Sequence[RawClub]) -> None:
    if not clubs:
        raise ScenarioValidationError("No clubs supplied")


def validate_scenario(
    clubs: Sequence[RawClub],
    swaps: Sequence[ScenarioSwap],
    max_swaps: int,
    additions: Sequence[RawClub] = (),
    removals: Iterable[str] = (),
) -> None:
    """Reject requests the engine should never see"""
    removals = list(removals)
    validate_bag(clubs)

    changes = len(swaps) + len(additions) + len(removals)
    if changes == 0:
        raise ScenarioValidationError("Missing or invalid swaps")
    if changes > max_swaps:
        raise ScenarioValidationError(f"Maximum {max_swaps} swaps allowed per scenario")

    known_ids = {club.id for club in normalize_bag(clubs) if club.id is not None}
    for club_id in [swap.club_id for swap in swaps] + removals:
        if club_id not in known_ids:
            raise ScenarioValidationError(f"Club {club_id} not found in bag")
