"""CV upload pipeline: text extraction (PDF/DOCX/TXT) and rule-based profile extraction."""

from recruit_screen_ai.cv_pipeline.cv_extractor import fallback_profile, run_cv_pipeline
from recruit_screen_ai.cv_pipeline.profile_extractor import extract_profile
from recruit_screen_ai.cv_pipeline.text_extractor import DocumentDecodeError, extract_text_from_file

__all__ = [
    "run_cv_pipeline",
    "fallback_profile",
    "extract_profile",
    "extract_text_from_file",
    "DocumentDecodeError",
]
