"""Schema exports."""

from .candidate_profile import CandidateProfile
from .interview_prep import InterviewQuestion, SalaryGuidance
from .job_qualifications import JobQualifications
from .qualification_result import QualificationResult, ScoreBreakdown

__all__ = [
    "CandidateProfile",
    "InterviewQuestion",
    "JobQualifications",
    "QualificationResult",
    "SalaryGuidance",
    "ScoreBreakdown",
]
