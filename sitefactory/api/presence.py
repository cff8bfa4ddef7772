"""Web presence analysis endpoint"""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from sitefactory.core.presence import PresenceReport, analyze_website

router = APIRouter()


class AnalyzeRequest(BaseModel):
    url: Optional[str] = None


@router.post("/presence/analyze", response_model=PresenceReport)
async def analyze(request: AnalyzeRequest):
    """Score a business's current website for lead qualification"""
    return await analyze_website(request.url)
