"""
Tests for bag/sequencer.py - bag ordering.
"""

from bag.models import Club
from bag.sequencer import UNKNOWN_RANK, bag_rank, club_type_key, sequence_clubs


def _bag(*club_types):
    return [Club(id=str(i), club_type=t) for i, t in enumerate(club_types)]


class TestClubTypeKey:
    """Tests for club type token normalization."""

    def test_strips_case_and_punctuation(self):
        assert club_type_key("7-Iron") == "7iron"
        assert club_type_key(" Sand Wedge ") == "sandwedge"
        assert club_type_key("56°") == "56"

    def test_empty(self):
        assert club_type_key(None) == ""
        assert club_type_key("") == ""


class TestBagRank:
    """Tests for rank lookups."""

    def test_driver_first_putter_last(self):
        assert bag_rank("Driver") < bag_rank("3 Wood") < bag_rank("Putter")

    def test_numbered_clubs_ascend(self):
        assert bag_rank("3-Wood") < bag_rank("5-Wood") < bag_rank("7W")
        assert bag_rank("3 Hybrid") < bag_rank("4H")
        assert bag_rank("4-Iron") < bag_rank("5i") < bag_rank("9-Iron")

    def test_degree_wedges_interleave_with_named_wedges(self):
        assert bag_rank("PW") < bag_rank("48°") < bag_rank("Gap Wedge")
        assert bag_rank("Gap Wedge") < bag_rank("54 deg") < bag_rank("SW")
        assert bag_rank("SW") < bag_rank("58 Wedge") < bag_rank("Lob Wedge")
        assert bag_rank("56°") == bag_rank("Sand Wedge")

    def test_unknown_gets_sentinel(self):
        assert bag_rank("Chipper") == UNKNOWN_RANK
        assert bag_rank(None) == UNKNOWN_RANK
        assert bag_rank("12°") == UNKNOWN_RANK


class TestSequenceClubs:
    """Tests for sorting a bag."""

    def test_full_bag_order(self):
        clubs = _bag("Putter", "56°", "PW", "Driver", "7-Iron", "3 Wood", "4 Hybrid", "Gap Wedge", "LW")
        ordered = [c.club_type for c in sequence_clubs(clubs)]
        assert ordered == ["Driver", "3 Wood", "4 Hybrid", "7-Iron", "PW", "Gap Wedge", "56°", "LW", "Putter"]

    def test_unknowns_last_and_stable(self):
        clubs = _bag("Chipper", "Driver", "Driving Iron", "Putter")
        ordered = [c.club_type for c in sequence_clubs(clubs)]
        assert ordered == ["Driver", "Putter", "Chipper", "Driving Iron"]

    def test_does_not_touch_input(self):
        clubs = _bag("Putter", "Driver")
        sequence_clubs(clubs)
        assert [c.club_type for c in clubs] == ["Putter", "Driver"]
