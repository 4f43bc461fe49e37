"""Job requirements generated from a free-text job title."""

from typing import List, Optional

from pydantic import BaseModel, Field

from recruit_screen_ai.utils.helpers import first_integer

DEFAULT_MIN_EXPERIENCE_YEARS = 3


class JobQualifications(BaseModel):
    """Requirements for one job posting, produced by the qualification rule table."""

    title: str = Field(..., description="Job title as entered (trimmed, case preserved)")
    required_degree: Optional[str] = Field(default=None, description="Degree requirement")
    required_experience: str = Field(
        default="3+ years",
        description="Experience requirement text; its leading integer is the minimum years",
    )
    required_certifications: List[str] = Field(default_factory=list, description="Certifications required")
    required_skills: List[str] = Field(..., min_length=1, description="Skills required for the role")
    preferred_skills: List[str] = Field(default_factory=list, description="Nice-to-have skills")
    description: str = Field(..., description="One-sentence job blurb")

    @property
    def min_experience_years(self) -> int:
        """Leading integer of required_experience ('5+ years' -> 5), 3 when absent."""
        return first_integer(self.required_experience, default=DEFAULT_MIN_EXPERIENCE_YEARS)
