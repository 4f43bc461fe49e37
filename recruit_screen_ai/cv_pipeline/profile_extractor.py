"""Rule-based résumé field extraction: decoded text -> CandidateProfile. Never raises."""

import re
from typing import List, Optional, Tuple

from recruit_screen_ai.schemas.candidate_profile import CandidateProfile
from recruit_screen_ai.utils.helpers import non_blank_lines, to_int
from recruit_screen_ai.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_NAME = "Candidate"
DEFAULT_TITLE = "Professional"
DEFAULT_EXPERIENCE = "Experienced professional"
DEFAULT_SKILLS: Tuple[str, ...] = ("Professional Skills", "Industry Experience")

MAX_NAME_TOKENS = 4
TITLE_SCAN_LINES = 5
LOCATION_SCAN_LINES = 10
MAX_SKILLS = 6

TITLE_KEYWORDS: Tuple[str, ...] = (
    "engineer",
    "developer",
    "manager",
    "analyst",
    "specialist",
    "director",
    "accountant",
    "designer",
)

# Known skills, matched by case-insensitive substring; order decides which six are kept.
SKILL_VOCABULARY: Tuple[str, ...] = (
    "JavaScript", "TypeScript", "React", "Node.js", "Python", "Java", "SQL",
    "AWS", "Docker", "Kubernetes", "Git", "Agile", "Scrum",
    "CPA", "Excel", "QuickBooks", "NetSuite", "SAP",
    "Figma", "Adobe", "Photoshop", "Illustrator",
    "Project Management", "Leadership", "Communication",
    "Month-End Close", "Financial Reporting", "Budgeting",
)

EXPERIENCE_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"(\d+)\s*(?:years?|yrs?)\s*(?:of\s*)?(?:experience|exp)", re.IGNORECASE),
    re.compile(r"experience[:\s]+(\d+)\s*(?:years?|yrs?)", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*(?:years?|yrs?)", re.IGNORECASE),
)

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b")

PHONE_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}"),  # (303) 555-0142, 303.555.0142
    re.compile(r"\+\d{1,3}[-.\s]?\d{1,4}[-.\s]?\d{1,4}[-.\s]?\d{1,9}"),  # +44 20 7946 0958
)

LOCATION_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*),\s*([A-Z]{2}|[A-Z][a-z]+)"),  # Denver, CO
    re.compile(r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)\s+([A-Z]{2})\b"),  # Denver CO
    re.compile(r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*),\s*([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)"),  # San Francisco, California
)


def extract_name(text: str) -> str:
    """First non-blank line if it has at most four words and starts with a capital."""
    lines = non_blank_lines(text)
    if lines:
        first_line = lines[0].strip()
        if len(first_line.split()) <= MAX_NAME_TOKENS and re.match(r"[A-Z]", first_line):
            return first_line
    return DEFAULT_NAME


def extract_title(text: str) -> str:
    """First of the top five non-blank lines containing a role keyword."""
    for line in non_blank_lines(text)[:TITLE_SCAN_LINES]:
        lowered = line.lower()
        if any(keyword in lowered for keyword in TITLE_KEYWORDS):
            return line.strip()
    return DEFAULT_TITLE


def extract_experience_years(text: str) -> Optional[str]:
    """Digits captured by the first experience pattern that matches, as written."""
    for pattern in EXPERIENCE_PATTERNS:
        match = pattern.search(text or "")
        if match:
            return match.group(1)
    return None


def extract_skills(text: str) -> List[str]:
    lowered = (text or "").lower()
    found: List[str] = []
    for skill in SKILL_VOCABULARY:
        if skill.lower() in lowered:
            found.append(skill)
            if len(found) >= MAX_SKILLS:
                break
    return found or list(DEFAULT_SKILLS)


def extract_email(text: str) -> Optional[str]:
    match = EMAIL_PATTERN.search(text or "")
    return match.group(0) if match else None


def extract_phone(text: str) -> Optional[str]:
    for pattern in PHONE_PATTERNS:
        match = pattern.search(text or "")
        if match:
            return match.group(0)
    return None


def extract_location(text: str) -> Optional[str]:
    """First 'City, ST' style match, scanning the top ten lines (blank ones included) in order."""
    for line in (text or "").split("\n")[:LOCATION_SCAN_LINES]:
        for pattern in LOCATION_PATTERNS:
            match = pattern.search(line)
            if match:
                return match.group(0).strip()
    return None


def extract_profile(text: str) -> CandidateProfile:
    """
    Build a CandidateProfile from decoded résumé text.
    Pure and total: sparse or empty text yields placeholder values, never an error.
    """
    text = text or ""
    digits = extract_experience_years(text)
    # Digit runs too long for int() count as unknown in both fields
    years = to_int(digits, default=None) if digits is not None else None
    profile = CandidateProfile(
        name=extract_name(text),
        title=extract_title(text),
        experience_summary=f"{digits} years of experience" if years is not None else DEFAULT_EXPERIENCE,
        experience_years=years,
        skills=extract_skills(text),
        email=extract_email(text),
        phone=extract_phone(text),
        location=extract_location(text),
        raw_text=text,
    )
    logger.debug(
        "Extracted profile: name=%s title=%s years=%s skills=%s",
        profile.name,
        profile.title,
        profile.experience_years,
        len(profile.skills),
    )
    return profile
