import re
from typing import Dict, Iterable, List, Optional

from .models import Club

UNKNOWN_RANK = 999

DRIVER_RANK = 1
WOOD_BASE = 10
HYBRID_BASE = 30
IRON_BASE = 50
WEDGE_BASE = 100
PUTTER_RANK = 500

# Conventional lofts used to interleave named wedges with degree wedges
NAMED_WEDGE_LOFTS: Dict[str, int] = {
    "pw": 46, "pitchingwedge": 46, "pitching": 46,
    "gw": 50, "gapwedge": 50, "aw": 50, "approachwedge": 50, "uw": 50, "utilitywedge": 50,
    "sw": 56, "sandwedge": 56,
    "lw": 60, "lobwedge": 60,
}

_DEGREE_WEDGE = re.compile(r"^(\d{2})(?:deg|degree|degrees|wedge|degreewedge)?$")
_MIN_WEDGE_LOFT = 40
_MAX_WEDGE_LOFT = 72


def club_type_key(club_type: Optional[str]) -> str:
    """Lowercase and drop whitespace, hyphens, punctuation and the degree sign"""
    if not club_type:
        return ""
    return re.sub(r"[^a-z0-9]", "", str(club_type).lower())


def _build_rank_table() -> Dict[str, int]:
    table = {"driver": DRIVER_RANK, "1wood": DRIVER_RANK, "1w": DRIVER_RANK, "dr": DRIVER_RANK}

    for n in range(2, 12):
        table[f"{n}wood"] = WOOD_BASE + n
        table[f"{n}w"] = WOOD_BASE + n
        table[f"{n}fairway"] = WOOD_BASE + n

    for n in range(1, 10):
        table[f"{n}hybrid"] = HYBRID_BASE + n
        table[f"{n}h"] = HYBRID_BASE + n
        table[f"{n}rescue"] = HYBRID_BASE + n
        table[f"{n}iron"] = IRON_BASE + n
        table[f"{n}i"] = IRON_BASE + n

    for token, loft in NAMED_WEDGE_LOFTS.items():
        table[token] = WEDGE_BASE + loft

    table["putter"] = PUTTER_RANK
    table["pt"] = PUTTER_RANK
    return table


CLUB_RANKS: Dict[str, int] = _build_rank_table()


def bag_rank(club_type: Optional[str]) -> int:
    """Position of a club type in bag order; unknown types rank last"""
    key = club_type_key(club_type)
    if key in CLUB_RANKS:
        return CLUB_RANKS[key]

    match = _DEGREE_WEDGE.match(key)
    if match:
        loft = int(match.group(1))
        if _MIN_WEDGE_LOFT <= loft <= _MAX_WEDGE_LOFT:
            return WEDGE_BASE + loft

    return UNKNOWN_RANK


def infer_category(club_type: Optional[str]) -> Optional[str]:
    rank = bag_rank(club_type)
    if rank < HYBRID_BASE:
        return "woods"
    if rank < IRON_BASE:
        return "hybrids"
    if rank < WEDGE_BASE:
        return "irons"
    if rank < PUTTER_RANK:
        return "wedges"
    if rank == PUTTER_RANK:
        return "putter"
    return None


def sequence_clubs(clubs: Iterable[Club]) -> List[Club]:
    """Stable sort into bag order: driver, woods, hybrids, irons, wedges, putter"""
    return sorted(clubs, key=lambda club: bag_rank(club.club_type))
