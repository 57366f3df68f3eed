"""
Shared pytest fixtures for bag grading tests.
"""

from datetime import date

import pytest


@pytest.fixture
def current_year():
    return date.today().year


@pytest.fixture
def iron_pair(current_year):
    """Two adjacent irons graded B (83) with a bad shaft weight step."""
    shared = {
        "year": current_year - 6,
        "shaft_flex": "S",
        "shaft_kickpoint": "mid",
        "shaft_torque": 2.0,
    }
    return [
        {"id": "c6", "clubType": "6-Iron", "shaft_weight": 110, "length": 37.5, "lie": 62.0, **shared},
        {"id": "c7", "clubType": "7-Iron", "shaft_weight": 95, "length": 37.0, "lie": 62.5, **shared},
    ]


@pytest.fixture
def heavier_seven_iron(current_year):
    """Replacement 7-iron that fixes the weight step and changes nothing else."""
    return {
        "year": current_year - 6,
        "shaft_flex": "S",
        "shaft_kickpoint": "mid",
        "shaft_torque": 2.0,
        "shaft_weight": 115,
        "length": 37.0,
        "lie": 62.5,
    }


@pytest.fixture
def mixed_shape_bag():
    """A bag mixing flat, nested and alternate-key club records."""
    return [
        {
            "id": "putter",
            "club_type": "Putter",
            "brand": "Scotty Cameron",
        },
        {
            "id": "pw",
            "clubType": "PW",
            "loft": 46,
            "lie_angle": 64,
            "length": 35.75,
            "shaft": {"brand": "True Temper", "weight": 120, "flex": "Stiff", "kickPoint": "Mid", "torque": 1.6},
        },
        {
            "id": "driver",
            "clubType": "Driver",
            "loft": 10.5,
            "lie": 58,
            "length": 45.5,
            "shaft_weight": 60,
            "shaft_flex": "S",
            "shaft_kickpoint": "Low",
            "shaft_torque": 4.2,
            "identification": {"brand": "Titleist", "model": "TSR2", "year": 2022},
        },
        {
            "id": "7i",
            "clubType": "7-Iron",
            "loft": 33,
            "lie": 62.5,
            "length": 37,
            "shaft_weight": "115g",
            "shaft_flex": "stiff",
            "shaft_kickpoint": "mid",
            "shaft_torque": "1.8",
        },
    ]
