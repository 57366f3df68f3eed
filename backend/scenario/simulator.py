"""
Virtual bag construction.

Nothing here mutates its input: clubs are frozen models, and every function
builds a fresh list.
"""

from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from bag.models import Club
from bag.normalizer import RawClub, normalize_bag, normalize_club
from .models import ClubUpdate, ScenarioSwap

CLUB_TYPE_KEYS = ("clubType", "club_type")

# Fields a committed scenario may overwrite on a stored club
COMMITTABLE_FIELDS = (
    "brand", "model", "year", "loft", "length", "lie",
    "shaft_weight", "shaft_flex", "shaft_kickpoint", "shaft_torque",
    "shaft_brand", "shaft_model",
)


def _replacements_by_id(swaps: Iterable[ScenarioSwap]) -> Dict[str, Mapping[str, Any]]:
    # Later swaps for the same club win
    return {swap.club_id: swap.replacement for swap in swaps}


def merge_replacement(original: Club, replacement: Mapping[str, Any]) -> Club:
    """
    Build the club that takes `original`'s slot. Only id and club type carry
    over from the original, and only when the replacement does not set them.
    """
    raw = dict(replacement)
    if raw.get("id") is None:
        raw["id"] = original.id
    if all(raw.get(key) in (None, "") for key in CLUB_TYPE_KEYS):
        raw["clubType"] = original.club_type
        raw.setdefault("category", original.category)
    return normalize_club(raw)


def simulate_bag(
    baseline: Sequence[RawClub],
    swaps: Iterable[ScenarioSwap],
    additions: Iterable[RawClub] = (),
    removals: Iterable[str] = (),
) -> List[Club]:
    """
    Apply swaps, removals and additions to a baseline bag and return the
    virtual bag. Ids that match no club are ignored.
    """
    replacements = _replacements_by_id(swaps)
    removed = set(removals)

    virtual = []
    for club in normalize_bag(baseline):
        if club.id is not None and club.id in removed:
            continue
        if club.id is not None and club.id in replacements:
            virtual.append(merge_replacement(club, replacements[club.id]))
        else:
            virtual.append(club)

    virtual.extend(normalize_bag(additions))
    return virtual


def commit_swaps(
    baseline: Sequence[RawClub],
    swaps: Iterable[ScenarioSwap],
) -> Tuple[List[Club], List[ClubUpdate]]:
    """
    Write swaps into a bag for keeps. Unlike simulation, a committed swap only
    overwrites the fields the replacement actually provides.
    """
    replacements = _replacements_by_id(swaps)
    updated: List[Club] = []
    updates: List[ClubUpdate] = []

    for club in normalize_bag(baseline):
        if club.id is None or club.id not in replacements:
            updated.append(club)
            continue

        provided = normalize_club(replacements[club.id])
        changes = {
            field: getattr(provided, field)
            for field in COMMITTABLE_FIELDS
            if getattr(provided, field) is not None
        }
        updated.append(club.model_copy(update=changes))
        updates.append(ClubUpdate(club_id=club.id, fields_updated=len(changes)))

    return updated, updates
