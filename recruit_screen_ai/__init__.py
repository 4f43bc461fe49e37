"""Recruiting screen: résumé text -> candidate profile -> qualification score against a job title."""

from recruit_screen_ai.cv_pipeline import extract_profile, run_cv_pipeline
from recruit_screen_ai.ranking import score, score_candidate
from recruit_screen_ai.services import generate_qualifications

__all__ = [
    "extract_profile",
    "generate_qualifications",
    "score_candidate",
    "score",
    "run_cv_pipeline",
]
