"""Built-in sample candidate for trying the screen without uploading a file."""

from recruit_screen_ai.schemas.candidate_profile import CandidateProfile

SAMPLE_RESUME_TEXT = (
    "Sarah Martinez\n"
    "Senior Accountant\n"
    "7 years in public accounting\n"
    "CPA licensed\n"
    "Month-End Close\n"
    "NetSuite\n"
    "Team Leadership"
)

# Hand-built rather than extracted; experience_years stays unset so scoring reads the summary.
SAMPLE_CANDIDATE = CandidateProfile(
    name="Sarah Martinez",
    title="Senior Accountant",
    experience_summary="7 years in public accounting",
    skills=["CPA", "Month-End Close", "NetSuite", "Team Leadership"],
    location="Denver, CO",
    raw_text=SAMPLE_RESUME_TEXT,
)
