import math
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .models import Club, CLUB_CATEGORIES
from .sequencer import infer_category

RawClub = Union[Club, Mapping[str, Any]]

FLEX_SYNONYMS: Dict[str, str] = {
    "x": "X", "xs": "X", "tx": "X", "extrastiff": "X", "xstiff": "X", "tourx": "X",
    "s": "S", "stiff": "S",
    "r": "R", "regular": "R", "reg": "R",
    "a": "A", "senior": "A", "m": "A",
    "l": "L", "ladies": "L", "lady": "L", "women": "L", "womens": "L",
}

KICKPOINTS = ("low", "mid", "high")

# Whole-string numbers: "62", "62g", "10.5°", ".5", "45 3/4", "3/4\""
_NUMBER = re.compile(
    r"""^\s*(?P<sign>-?)
    (?:(?P<whole>\d+)\s+(?P<num>\d+)/(?P<den>\d+)
      |(?P<fnum>\d+)/(?P<fden>\d+)
      |(?P<decimal>\d+(?:\.\d*)?|\.\d+))
    \s*[a-z°"']*\s*$""",
    re.IGNORECASE | re.VERBOSE,
)

TRUE_TOKENS = ("true", "yes", "y", "1")


def decode_flex(token: Any) -> Optional[str]:
    """
    Map a flex token onto L/A/R/S/X. Tokens outside the synonym table become
    their own bucket (uppercased), empty tokens decode to None.
    """
    if token is None:
        return None
    text = str(token).strip()
    if not text:
        return None

    key = re.sub(r"[^a-z]", "", text.lower())
    if key in FLEX_SYNONYMS:
        return FLEX_SYNONYMS[key]
    if "x" in key and "stiff" in key:
        return "X"
    return text.upper()


def decode_kickpoint(token: Any) -> Optional[str]:
    """Map a kickpoint token onto low/mid/high by substring, else its own bucket"""
    if token is None:
        return None
    text = str(token).strip().lower()
    if not text:
        return None

    for kickpoint in KICKPOINTS:
        if kickpoint in text:
            return kickpoint
    return text


def _first(*values: Any) -> Any:
    for value in values:
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def _parse_number(text: str) -> Optional[float]:
    match = _NUMBER.match(text)
    if not match:
        return None

    if match.group("decimal") is not None:
        number = float(match.group("decimal"))
    else:
        whole = int(match.group("whole") or 0)
        num = int(match.group("num") or match.group("fnum"))
        den = int(match.group("den") or match.group("fden"))
        if den == 0:
            return None
        number = whole + num / den

    return -number if match.group("sign") else number


def _to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if math.isnan(value) or math.isinf(value) else float(value)
    return _parse_number(str(value))


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUE_TOKENS
    return bool(value)


def _to_int(value: Any) -> Optional[int]:
    number = _to_float(value)
    return int(number) if number is not None else None


def _to_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _nested(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    return value if isinstance(value, Mapping) else {}


def normalize_club(raw: RawClub) -> Club:
    """Flatten any accepted club record shape into a Club"""
    if isinstance(raw, Club):
        return raw

    shaft = _nested(raw, "shaft")
    ident = _nested(raw, "identification")

    club_type = _to_text(_first(raw.get("clubType"), raw.get("club_type")))
    category = _to_text(raw.get("category"))
    if category is not None:
        category = category.lower()
    if category not in CLUB_CATEGORIES:
        category = infer_category(club_type)

    club_id = _first(raw.get("id"), raw.get("club_id"))

    return Club(
        id=str(club_id) if club_id is not None else None,
        club_type=club_type,
        category=category,
        brand=_to_text(_first(raw.get("brand"), ident.get("brand"))),
        model=_to_text(_first(raw.get("model"), ident.get("model"))),
        year=_to_int(_first(raw.get("year"), ident.get("year"))),
        loft=_to_float(raw.get("loft")),
        lie=_to_float(_first(raw.get("lie"), raw.get("lie_angle"))),
        length=_to_float(raw.get("length")),
        shaft_brand=_to_text(_first(shaft.get("brand"), raw.get("shaft_brand"))),
        shaft_model=_to_text(_first(shaft.get("model"), raw.get("shaft_model"))),
        shaft_weight=_to_float(_first(shaft.get("weight"), raw.get("shaft_weight"))),
        shaft_flex=_to_text(_first(shaft.get("flex"), raw.get("shaft_flex"))),
        shaft_kickpoint=_to_text(_first(
            shaft.get("kickpoint"), shaft.get("kickPoint"), shaft.get("kick_point"),
            raw.get("shaft_kickpoint"),
        )),
        shaft_torque=_to_float(_first(shaft.get("torque"), raw.get("shaft_torque"))),
        is_favorite=_to_bool(raw.get("is_favorite", False)),
        status=_to_text(raw.get("status")) or "active",
    )


def normalize_bag(raws: Iterable[RawClub]) -> List[Club]:
    return [normalize_club(raw) for raw in raws]
