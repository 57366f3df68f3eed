"""
Tests for bag/normalizer.py - club record normalization and decode tables.
"""

import pytest

from bag.models import Club
from bag.normalizer import decode_flex, decode_kickpoint, normalize_bag, normalize_club


class TestNormalizeClub:
    """Tests for flattening raw club records."""

    def test_nested_shaft_is_flattened(self):
        """Test that nested shaft data lands on the flat shaft fields."""
        club = normalize_club({
            "clubType": "PW",
            "shaft": {"brand": "KBS", "model": "Tour", "weight": 120, "flex": "S", "kickPoint": "Mid", "torque": 1.7},
        })
        assert club.shaft_brand == "KBS"
        assert club.shaft_model == "Tour"
        assert club.shaft_weight == 120.0
        assert club.shaft_flex == "S"
        assert club.shaft_kickpoint == "Mid"
        assert club.shaft_torque == 1.7

    def test_alternate_key_spellings(self):
        """Test club_type and lie_angle are accepted."""
        club = normalize_club({"club_type": "7-Iron", "lie_angle": 62.5})
        assert club.club_type == "7-Iron"
        assert club.lie == 62.5

    def test_identification_block(self):
        """Test brand, model and year can come from an identification object."""
        club = normalize_club({"clubType": "Driver", "identification": {"brand": "Ping", "model": "G430", "year": "2023"}})
        assert club.brand == "Ping"
        assert club.model == "G430"
        assert club.year == 2023

    def test_missing_fields_are_none(self):
        """Test absent attributes become None rather than raising."""
        club = normalize_club({"clubType": "Driver"})
        assert club.loft is None
        assert club.shaft_weight is None
        assert club.year is None
        assert club.is_favorite is False
        assert club.status == "active"

    def test_numeric_strings_are_coerced(self):
        """Test numbers with units are read, garbage becomes None."""
        club = normalize_club({"shaft_weight": "62g", "loft": "10.5°", "length": "n/a", "shaft_torque": ""})
        assert club.shaft_weight == 62.0
        assert club.loft == 10.5
        assert club.length is None
        assert club.shaft_torque is None

    @pytest.mark.parametrize("raw,expected", [
        ("45 3/4", 45.75),
        ('37 1/4"', 37.25),
        ("3/4", 0.75),
        (".5", 0.5),
        ("-1.5", -1.5),
        ("45.25 in", 45.25),
    ])
    def test_fractional_and_bare_decimal_lengths(self, raw, expected):
        """Test shop-style fractions and leading-dot decimals parse to their full value."""
        assert normalize_club({"length": raw}).length == expected

    @pytest.mark.parametrize("raw", ["45 3/0", "about 45", "45-46", "1.2.3", "3/4/5"])
    def test_ambiguous_numbers_are_unscorable(self, raw):
        """Test strings that only partly look like a number are treated as missing."""
        assert normalize_club({"length": raw}).length is None

    @pytest.mark.parametrize("raw,expected", [
        (True, True), (False, False),
        ("true", True), ("Yes", True), ("1", True),
        ("false", False), ("no", False), ("0", False), ("", False),
        (1, True), (0, False), (None, False),
    ])
    def test_favorite_flag_decoding(self, raw, expected):
        """Test string and numeric favorite flags decode to the right boolean."""
        assert normalize_club({"is_favorite": raw}).is_favorite is expected

    def test_category_inferred_from_club_type(self):
        """Test category is derived when the record does not carry one."""
        assert normalize_club({"clubType": "3 Wood"}).category == "woods"
        assert normalize_club({"clubType": "4-Hybrid"}).category == "hybrids"
        assert normalize_club({"clubType": "9-Iron"}).category == "irons"
        assert normalize_club({"clubType": "56°"}).category == "wedges"
        assert normalize_club({"clubType": "Putter"}).category == "putter"
        assert normalize_club({"clubType": "Chipper"}).category is None

    def test_explicit_category_wins(self):
        """Test a valid category on the record is kept."""
        assert normalize_club({"clubType": "Driver", "category": "Woods"}).category == "woods"

    def test_club_instance_passes_through(self):
        """Test normalizing an already normalized club is a no-op."""
        club = Club(id="a", club_type="Driver")
        assert normalize_club(club) is club

    def test_normalize_bag_keeps_order(self, mixed_shape_bag):
        """Test the whole bag is normalized in input order."""
        clubs = normalize_bag(mixed_shape_bag)
        assert [c.id for c in clubs] == ["putter", "pw", "driver", "7i"]
        assert clubs[3].shaft_weight == 115.0


class TestDecodeFlex:
    """Tests for the flex synonym table."""

    @pytest.mark.parametrize("token,expected", [
        ("X", "X"), ("xs", "X"), ("Extra Stiff", "X"), ("X-Stiff", "X"),
        ("S", "S"), ("stiff", "S"),
        ("R", "R"), ("Regular", "R"),
        ("A", "A"), ("Senior", "A"),
        ("L", "L"), ("Ladies", "L"),
    ])
    def test_known_tokens(self, token, expected):
        assert decode_flex(token) == expected

    def test_unknown_token_is_its_own_bucket(self):
        """Test tokens outside the table are uppercased, not dropped."""
        assert decode_flex("6.0") == "6.0"
        assert decode_flex("firm") == "FIRM"

    def test_empty_tokens(self):
        assert decode_flex(None) is None
        assert decode_flex("  ") is None


class TestDecodeKickpoint:
    """Tests for kickpoint decoding."""

    def test_substring_match(self):
        assert decode_kickpoint("Low") == "low"
        assert decode_kickpoint("Mid Launch") == "mid"
        assert decode_kickpoint("HIGH") == "high"

    def test_unknown_token_is_its_own_bucket(self):
        assert decode_kickpoint("Variable") == "variable"

    def test_empty_tokens(self):
        assert decode_kickpoint(None) is None
        assert decode_kickpoint("") is None
