from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple

CLUB_CATEGORIES: Tuple[str, ...] = ("woods", "hybrids", "irons", "wedges", "putter")


class Club(BaseModel):
    """Canonical club record every grading component works on"""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    club_type: Optional[str] = Field(None, description="Free-form token, e.g. '7-Iron', 'Driver', '56°'")
    category: Optional[str] = Field(None, description="woods, hybrids, irons, wedges or putter")

    brand: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    loft: Optional[float] = Field(None, description="Loft in degrees")
    lie: Optional[float] = Field(None, description="Lie angle in degrees")
    length: Optional[float] = Field(None, description="Length in inches")

    shaft_brand: Optional[str] = None
    shaft_model: Optional[str] = None
    shaft_weight: Optional[float] = Field(None, description="Shaft weight in grams")
    shaft_flex: Optional[str] = None
    shaft_kickpoint: Optional[str] = None
    shaft_torque: Optional[float] = Field(None, description="Shaft torque in degrees")

    is_favorite: bool = False
    status: str = "active"

    @property
    def label(self) -> str:
        return self.club_type or "Unknown club"
