from fastapi import APIRouter, Request

from resume_ats.core.rate_limit import rate_limit
from resume_ats.schemas.resume import ResumeDocument
from resume_ats.schemas.score import ScoreReport
from resume_ats.scoring import calculate_ats_score

router = APIRouter()


@router.post(
    "/ats/score",
    response_model=ScoreReport,
    summary="Score Resume",
    description="Compute the ATS compatibility score, breakdown and suggestions for a resume.",
)
@rate_limit()
async def ats_score(request: Request, payload: ResumeDocument):
    _ = request
    return calculate_ats_score(payload)
