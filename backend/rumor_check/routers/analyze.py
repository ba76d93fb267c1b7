# backend/rumor_check/routers/analyze.py
"""
Claim analysis route used by the front-end.
Always answers 200 with an AnalysisResult; failures arrive as the fallback result.
"""

from fastapi import APIRouter, Depends, Request

from rumor_check.models.schema import AnalyzeRequest, AnalysisResult
from rumor_check.services.llm_agent import AnalysisClient

router = APIRouter(tags=["analysis"])


def get_analysis_client(request: Request) -> AnalysisClient:
    # created once in the app lifespan
    return request.app.state.analysis_client


@router.post("/analyze", response_model=AnalysisResult)
async def analyze(req: AnalyzeRequest, client: AnalysisClient = Depends(get_analysis_client)) -> AnalysisResult:
    return await client.analyze(req.query)
