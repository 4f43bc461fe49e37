"""Service exports."""

from .interview_prep import generate_interview_questions, is_medical_role, salary_guidance
from .job_qualifications import JOB_QUALIFICATION_RULES, generate_qualifications

__all__ = [
    "generate_qualifications",
    "JOB_QUALIFICATION_RULES",
    "generate_interview_questions",
    "is_medical_role",
    "salary_guidance",
]
