from pydantic import BaseModel, BeforeValidator, Field
from typing import Annotated, Any, Dict, List

from grading.models import GradeSummary


def _id_to_str(value: Any) -> Any:
    # Bags built from numeric database keys arrive as ints
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


ClubId = Annotated[str, BeforeValidator(_id_to_str)]


class ScenarioSwap(BaseModel):
    club_id: ClubId = Field(..., min_length=1, description="Id of the club being replaced")
    replacement: Dict[str, Any] = Field(..., description="Partial club record, any accepted shape")


class FactorChange(BaseModel):
    factor: str
    from_score: int
    to_score: int
    from_grade: str
    to_grade: str
    status: str = Field(..., description="improved, declined or same")


class ScenarioResult(BaseModel):
    current: GradeSummary
    projected: GradeSummary
    factor_changes: List[FactorChange]
    summary: str


class ClubUpdate(BaseModel):
    club_id: str
    fields_updated: int
