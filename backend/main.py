import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from bag.models import Club
from config import get_config
from grading.engine import BagGrader
from grading.models import GradeReport, GradingWeights
from scenario.engine import ScenarioEngine
from scenario.models import ClubId, ClubUpdate, ScenarioResult, ScenarioSwap
from scenario.simulator import commit_swaps
from scenario.validation import ScenarioValidationError, validate_bag, validate_scenario

config = get_config()

logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Bag Fitness Grading API", version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# REQUEST / RESPONSE MODELS
# ============================================================================

class GradeRequest(BaseModel):
    clubs: List[Dict[str, Any]] = Field(..., description="Club records in any accepted shape")
    weights: Optional[GradingWeights] = None


class ScenarioRequest(BaseModel):
    clubs: List[Dict[str, Any]]
    swaps: List[ScenarioSwap] = Field(default_factory=list)
    additions: List[Dict[str, Any]] = Field(default_factory=list)
    removals: List[ClubId] = Field(default_factory=list)
    weights: Optional[GradingWeights] = None


class ApplyScenarioRequest(BaseModel):
    clubs: List[Dict[str, Any]]
    swaps: List[ScenarioSwap]


class ApplyScenarioResponse(BaseModel):
    clubs: List[Club]
    updates: List[ClubUpdate]
    message: str
    next_step: str = "regrade"


# ============================================================================
# API ENDPOINTS
# ============================================================================

bag_grader = BagGrader()
scenario_engine = ScenarioEngine(bag_grader)


def _reject(error: ScenarioValidationError) -> HTTPException:
    logger.warning(f"Rejected request: {error}")
    return HTTPException(status_code=400, detail=str(error))


@app.get("/")
async def root():
    return {
        "message": "Bag Fitness Grading API",
        "version": "1.0.0",
        "endpoints": ["/grade", "/scenario", "/scenario/apply", "/health"]
    }


@app.post("/grade", response_model=GradeReport)
async def grade_bag(request: GradeRequest):
    """Grade the internal consistency of a bag"""
    try:
        validate_bag(request.clubs)
    except ScenarioValidationError as e:
        raise _reject(e)

    try:
        report = bag_grader.grade(request.clubs, request.weights)
        logger.info(f"Graded {len(request.clubs)} clubs: {report.overall_grade} ({report.overall_score})")
        return report
    except Exception as e:
        logger.exception("Grading failed")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/scenario", response_model=ScenarioResult)
async def run_scenario(request: ScenarioRequest):
    """Project the grade change of hypothetical swaps without touching the bag"""
    try:
        validate_scenario(
            request.clubs,
            request.swaps,
            max_swaps=config.max_swaps,
            additions=request.additions,
            removals=request.removals,
        )
    except ScenarioValidationError as e:
        raise _reject(e)

    logger.info(
        f"Running scenario with {len(request.swaps)} swap(s), "
        f"{len(request.additions)} addition(s), {len(request.removals)} removal(s)"
    )
    try:
        return scenario_engine.run(
            request.clubs,
            request.swaps,
            request.weights,
            additions=request.additions,
            removals=request.removals,
        )
    except Exception as e:
        logger.exception("Scenario failed")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/scenario/apply", response_model=ApplyScenarioResponse)
async def apply_scenario(request: ApplyScenarioRequest):
    """Write scenario swaps into the bag and return the updated clubs"""
    try:
        validate_scenario(request.clubs, request.swaps, max_swaps=config.max_swaps)
    except ScenarioValidationError as e:
        raise _reject(e)

    try:
        clubs, updates = commit_swaps(request.clubs, request.swaps)
    except Exception as e:
        logger.exception("Applying scenario failed")
        raise HTTPException(status_code=500, detail=str(e))

    logger.info(f"Applied {len(updates)} swap(s)")
    return ApplyScenarioResponse(
        clubs=clubs,
        updates=updates,
        message=f"Updated {len(updates)} club(s). Re-grade your bag to see the new score.",
    )


@app.get("/health")
async def health_check():
    return {"status": "healthy", "grading_engine": "operational"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
