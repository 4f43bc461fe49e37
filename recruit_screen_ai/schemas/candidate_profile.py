"""Structured candidate profile extracted from résumé text."""

from typing import List, Optional

from pydantic import BaseModel, Field

from recruit_screen_ai.utils.helpers import first_integer


class CandidateProfile(BaseModel):
    """Best-effort résumé fields. Every text field has a placeholder, so nothing is ever blank."""

    name: str = Field(..., min_length=1, description="Display name (first résumé line or 'Candidate')")
    title: str = Field(..., min_length=1, description="Current or target role label (or 'Professional')")
    experience_summary: str = Field(
        ...,
        min_length=1,
        description="Experience sentence, e.g. '7 years of experience' or 'Experienced professional'",
    )
    experience_years: Optional[int] = Field(
        default=None,
        description="Years captured from the résumé; None when unknown or for hand-built profiles",
    )
    skills: List[str] = Field(..., min_length=1, description="Recognized skills in vocabulary order")
    email: Optional[str] = Field(default=None, description="First email address found")
    phone: Optional[str] = Field(default=None, description="First phone number found")
    location: Optional[str] = Field(default=None, description="'City, ST' style location near the top")
    raw_text: str = Field(default="", description="Full decoded text, kept for keyword scans")

    @property
    def years_of_experience(self) -> int:
        """experience_years when known, else the leading integer of experience_summary (0 if none)."""
        if self.experience_years is not None:
            return self.experience_years
        return first_integer(self.experience_summary, default=0)
