"""Rule-based qualification scoring: candidate profile vs job requirements -> 0-100 score and verdict."""

import re
from typing import List, Optional, Sequence, Tuple

from recruit_screen_ai.schemas.candidate_profile import CandidateProfile
from recruit_screen_ai.schemas.job_qualifications import JobQualifications
from recruit_screen_ai.schemas.qualification_result import QualificationResult, ScoreBreakdown
from recruit_screen_ai.utils.helpers import round_half_up
from recruit_screen_ai.utils.logger import get_logger

logger = get_logger(__name__)

# Points per category
POINTS_PER_REQUIRED_SKILL = 15
POINTS_PER_PREFERRED_SKILL = 3
MAX_PREFERRED_POINTS = 30
MAX_EXPERIENCE_POINTS = 15
POINTS_PER_CERTIFICATION = 20
MISSING_CERTIFICATION_PENALTY = -20
POINTS_PER_TITLE_KEYWORD = 5
MAX_TITLE_POINTS = 15
POINTS_PER_PARTIAL_TITLE_WORD = 3
MAX_PARTIAL_TITLE_POINTS = 10
POINTS_PER_CONTACT_FIELD = 2
MAX_CONTACT_POINTS = 4

QUALIFIED_THRESHOLD = 60
MIN_MATCH_WORD_LENGTH = 3
PARTIAL_TITLE_MIN_WORD_LENGTH = 4

PLACEHOLDER_RESUME_TITLE = "professional"
DEFAULT_POOL_TITLE = "Position"
DO_NOT_CONTACT = "Do Not Contact"

# (minimum score, recommendation, talent pool suffix or None for Do Not Contact); first match wins
RECOMMENDATION_TIERS: List[Tuple[int, str, Optional[str]]] = [
    (85, "Move to interview stage immediately", "Highly Qualified"),
    (70, "Move to interview stage", "Qualified"),
    (60, "Consider for interview, review experience", "Conditional"),
    (40, "Not qualified - missing key requirements", None),
    (0, "Not qualified - insufficient experience/skills", None),
]

# Used when scoring without a generated job (accounting defaults)
DEFAULT_REQUIRED_SKILLS = ["CPA", "Month-End Close", "NetSuite", "Financial Reporting", "Excel"]
DEFAULT_PREFERRED_SKILLS = ["QuickBooks", "SAP", "Team Leadership", "Budgeting", "Accounting"]
DEFAULT_MIN_EXPERIENCE = 5
DEFAULT_TITLE_KEYWORDS = ["accountant", "accounting", "finance", "financial", "cpa"]


class _ResumeIndex:
    """Lower-cased résumé text and skills for substring checks."""

    def __init__(self, profile: CandidateProfile) -> None:
        self.text = (profile.raw_text or "").lower()
        self.skills = [s.lower() for s in profile.skills]
        self.title = profile.title.lower()

    def mentions(self, term: str) -> bool:
        """
        Exact match: the term is a substring of the résumé text or equals a skill.
        Keyword match: any word of the term (split on whitespace/hyphens) of 3+ chars
        is a substring of the text or of any skill.
        """
        term_lower = term.lower()
        if term_lower in self.text or term_lower in self.skills:
            return True
        for word in re.split(r"[\s-]+", term_lower):
            if len(word) < MIN_MATCH_WORD_LENGTH:
                continue
            if word in self.text or any(word in skill for skill in self.skills):
                return True
        return False


def _score_required_skills(
    resume: _ResumeIndex,
    required_skills: Sequence[str],
    strengths: List[str],
    weaknesses: List[str],
) -> Tuple[float, ScoreBreakdown]:
    found = [skill for skill in required_skills if resume.mentions(skill)]
    for skill in found:
        strengths.append(f"Has {skill} experience")
    if not found:
        weaknesses.append(f"Missing required skills: {', '.join(required_skills[:3])}")
        details = [f"Missing all required skills: {', '.join(required_skills)}"]
    else:
        details = [f"Found {len(found)}/{len(required_skills)}: {', '.join(found)}"]

    points = len(found) * POINTS_PER_REQUIRED_SKILL
    return points, ScoreBreakdown(
        category="Required Skills",
        points=round_half_up(points),
        max_points=len(required_skills) * POINTS_PER_REQUIRED_SKILL,
        details=details,
    )


def _score_preferred_skills(
    resume: _ResumeIndex,
    preferred_skills: Sequence[str],
    strengths: List[str],
) -> Tuple[float, ScoreBreakdown]:
    found = [skill for skill in preferred_skills if resume.mentions(skill)]
    for skill in found:
        if not any(skill in strength for strength in strengths):
            strengths.append(f"Has {skill} experience")
    if found:
        shown = ", ".join(found[:4]) + ("..." if len(found) > 4 else "")
        details = [f"Found {len(found)}: {shown}"]
    else:
        details = ["No preferred skills found"]

    max_points = min(MAX_PREFERRED_POINTS, len(preferred_skills) * POINTS_PER_PREFERRED_SKILL)
    points = min(max_points, len(found) * POINTS_PER_PREFERRED_SKILL)
    return points, ScoreBreakdown(
        category="Preferred Skills",
        points=round_half_up(points),
        max_points=max_points,
        details=details,
    )


def _score_experience(
    years: int,
    min_years: int,
    strengths: List[str],
    weaknesses: List[str],
) -> Tuple[float, ScoreBreakdown]:
    points: float = 0
    if years > 0:
        if years >= min_years:
            points = MAX_EXPERIENCE_POINTS
            strengths.append(f"{years} years of experience")
            details = [f"{years} years meets requirement ({min_years}+)"]
        else:
            points = max(0.0, (years / min_years) * MAX_EXPERIENCE_POINTS)
            weaknesses.append(f"Only {years} years of experience (requires {min_years}+)")
            details = [f"{years} years is below requirement ({min_years}+)"]
    else:
        weaknesses.append("Experience level unclear")
        details = ["Experience level not found in resume"]

    return points, ScoreBreakdown(
        category="Experience",
        points=round_half_up(points),
        max_points=MAX_EXPERIENCE_POINTS,
        details=details,
    )


def _score_certifications(
    resume: _ResumeIndex,
    certifications: Sequence[str],
    strengths: List[str],
    weaknesses: List[str],
) -> Tuple[float, ScoreBreakdown]:
    found = [cert for cert in certifications if resume.mentions(cert)]
    for cert in found:
        strengths.append(f"Has {cert} certification")
    if found:
        points = len(found) * POINTS_PER_CERTIFICATION
        details = [f"Found {len(found)}/{len(certifications)}: {', '.join(found)}"]
    else:
        points = MISSING_CERTIFICATION_PENALTY
        weaknesses.append(f"Missing required certification: {', '.join(certifications)}")
        details = [f"Missing required: {', '.join(certifications)}"]

    return points, ScoreBreakdown(
        category="Certifications",
        points=round_half_up(points),
        max_points=len(certifications) * POINTS_PER_CERTIFICATION,
        details=details,
    )


def _score_title(
    resume: _ResumeIndex,
    title_keywords: Sequence[str],
    job_title: str,
    strengths: List[str],
) -> Tuple[float, ScoreBreakdown]:
    matched = [
        keyword
        for keyword in title_keywords
        if keyword.lower() in resume.title or keyword.lower() in resume.text
    ]
    points = 0
    details: List[str] = []
    if matched:
        points = min(MAX_TITLE_POINTS, len(matched) * POINTS_PER_TITLE_KEYWORD)
        strengths.append("Relevant job title")
        details = [f"Title matches {len(matched)} job keyword(s): {', '.join(matched)}"]
    elif resume.title != PLACEHOLDER_RESUME_TITLE:
        # Weaker check on the longer job-title words
        words = [w for w in job_title.lower().split() if len(w) >= PARTIAL_TITLE_MIN_WORD_LENGTH]
        partial = [w for w in words if w in resume.text or w in resume.title]
        if partial:
            points = min(MAX_PARTIAL_TITLE_POINTS, len(partial) * POINTS_PER_PARTIAL_TITLE_WORD)
            details = [f"Partial title match: {', '.join(partial)}"]
    if points == 0:
        details = ["Title does not match job requirements"]

    return points, ScoreBreakdown(
        category="Title Relevance",
        points=round_half_up(points),
        max_points=MAX_TITLE_POINTS,
        details=details,
    )


def _score_contact(profile: CandidateProfile) -> Tuple[float, ScoreBreakdown]:
    points = 0
    details: List[str] = []
    if profile.email:
        points += POINTS_PER_CONTACT_FIELD
        details.append("Email provided")
    if profile.phone:
        points += POINTS_PER_CONTACT_FIELD
        details.append("Phone provided")
    if points == 0:
        details.append("No contact information found")

    return points, ScoreBreakdown(
        category="Contact Info",
        points=points,
        max_points=MAX_CONTACT_POINTS,
        details=details,
    )


def recommendation_for(score: int, job_title: str) -> Tuple[str, str]:
    """(recommendation, talent pool) for a clamped score; the first tier whose minimum is met wins."""
    for min_score, recommendation, pool_suffix in RECOMMENDATION_TIERS:
        if score >= min_score:
            talent_pool = f"{job_title} - {pool_suffix}" if pool_suffix else DO_NOT_CONTACT
            return recommendation, talent_pool
    # Scores are clamped to >= 0, so the last tier always matches.
    return RECOMMENDATION_TIERS[-1][1], DO_NOT_CONTACT


def score_candidate(
    profile: CandidateProfile,
    requirements: Optional[JobQualifications] = None,
) -> QualificationResult:
    """
    Score a candidate against job requirements.
    Categories are computed independently and summed; the total is rounded and clamped to 0-100.
    Without requirements, the default accounting requirements are used and certifications are skipped.
    """
    resume = _ResumeIndex(profile)
    strengths: List[str] = []
    weaknesses: List[str] = []
    breakdown: List[ScoreBreakdown] = []

    if requirements is not None:
        required_skills = list(requirements.required_skills)
        preferred_skills = list(requirements.preferred_skills)
        min_years = requirements.min_experience_years
        title_keywords = requirements.title.lower().split()
        certifications = list(requirements.required_certifications)
        job_title = requirements.title
    else:
        required_skills = list(DEFAULT_REQUIRED_SKILLS)
        preferred_skills = list(DEFAULT_PREFERRED_SKILLS)
        min_years = DEFAULT_MIN_EXPERIENCE
        title_keywords = list(DEFAULT_TITLE_KEYWORDS)
        certifications = []
        job_title = ""

    raw_total: float = 0

    points, entry = _score_required_skills(resume, required_skills, strengths, weaknesses)
    raw_total += points
    breakdown.append(entry)

    points, entry = _score_preferred_skills(resume, preferred_skills, strengths)
    raw_total += points
    breakdown.append(entry)

    points, entry = _score_experience(profile.years_of_experience, min_years, strengths, weaknesses)
    raw_total += points
    breakdown.append(entry)

    if certifications:
        points, entry = _score_certifications(resume, certifications, strengths, weaknesses)
        raw_total += points
        breakdown.append(entry)

    points, entry = _score_title(resume, title_keywords, job_title, strengths)
    raw_total += points
    breakdown.append(entry)

    points, entry = _score_contact(profile)
    raw_total += points
    breakdown.append(entry)

    score = min(100, max(0, round_half_up(raw_total)))
    recommendation, talent_pool = recommendation_for(score, job_title or DEFAULT_POOL_TITLE)

    if not strengths:
        weaknesses.append("Limited relevant experience")
        strengths = ["Professional background"]

    logger.debug("Scored %s against %r: %s (%s)", profile.name, job_title, score, recommendation)
    return QualificationResult(
        is_qualified=score >= QUALIFIED_THRESHOLD,
        score=score,
        strengths=strengths,
        weaknesses=weaknesses,
        recommendation=recommendation,
        talent_pool=talent_pool,
        score_breakdown=breakdown,
    )


# Short alias matching the pipeline's extract -> generate -> score naming
score = score_candidate
