"""Résumé upload pipeline: decode file to text, then rule-based profile extraction."""

from typing import Optional

from recruit_screen_ai.cv_pipeline.profile_extractor import (
    DEFAULT_EXPERIENCE,
    DEFAULT_SKILLS,
    DEFAULT_TITLE,
    extract_profile,
)
from recruit_screen_ai.cv_pipeline.text_extractor import DocumentDecodeError, extract_text_from_file
from recruit_screen_ai.schemas.candidate_profile import CandidateProfile
from recruit_screen_ai.utils.helpers import name_from_filename
from recruit_screen_ai.utils.logger import get_logger

logger = get_logger(__name__)


def fallback_profile(filename: str) -> CandidateProfile:
    """Placeholder profile built only from the file name, for documents that could not be read."""
    return CandidateProfile(
        name=name_from_filename(filename),
        title=DEFAULT_TITLE,
        experience_summary=DEFAULT_EXPERIENCE,
        skills=list(DEFAULT_SKILLS),
        raw_text="",
    )


def run_cv_pipeline(file_bytes: bytes, filename: str, content_type: Optional[str] = None) -> CandidateProfile:
    """
    Run the full CV pipeline: extract text from file, then extract the profile.
    Never raises; an unreadable document degrades to fallback_profile(filename).
    """
    try:
        raw_text = extract_text_from_file(file_bytes, filename, content_type)
    except DocumentDecodeError as e:
        logger.warning("Could not decode %s, using file name profile: %s", filename, e)
        return fallback_profile(filename)
    return extract_profile(raw_text)
