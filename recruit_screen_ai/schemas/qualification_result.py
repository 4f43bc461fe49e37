"""Scoring output: per-category breakdown and the overall qualification verdict."""

from typing import List

from pydantic import BaseModel, Field


class ScoreBreakdown(BaseModel):
    """Points earned in one scoring category."""

    category: str = Field(..., description="Required Skills, Preferred Skills, Experience, Certifications, ...")
    points: int = Field(..., description="Rounded points; negative only for the certification penalty")
    max_points: int = Field(..., description="Category ceiling")
    details: List[str] = Field(default_factory=list, description="Human-readable evidence")


class QualificationResult(BaseModel):
    """Final screening verdict for a candidate against one job."""

    is_qualified: bool = Field(..., description="True when score >= 60")
    score: int = Field(..., ge=0, le=100, description="Overall score, clamped to 0-100")
    strengths: List[str] = Field(..., min_length=1, description="Evidence in the candidate's favour")
    weaknesses: List[str] = Field(default_factory=list, description="Gaps found during scoring")
    recommendation: str = Field(..., description="Next-step recommendation tier")
    talent_pool: str = Field(..., description="Pool label derived from job title and tier")
    score_breakdown: List[ScoreBreakdown] = Field(default_factory=list, description="Per-category points")
