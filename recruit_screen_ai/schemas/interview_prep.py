"""Interview questions and salary guidance prepared for a screened candidate."""

from typing import List

from pydantic import BaseModel, Field


class InterviewQuestion(BaseModel):
    """One tailored question and the résumé facts it draws on."""

    question: str = Field(..., description="Question text for the interviewer")
    references: List[str] = Field(default_factory=list, description="Résumé facts the question cites")


class SalaryGuidance(BaseModel):
    """Compensation bands for the role family and the candidate's experience."""

    market_range: str = Field(..., description="Typical market range, e.g. '$85K - 110K'")
    candidate_expectation: str = Field(..., description="Likely ask for this experience level")
    recommendation: str = Field(..., description="Suggested offer")
    note: str = Field(..., description="Location / experience context")
