"""
Interview preparation for a screened candidate: tailored questions and salary guidance.
Both branch on the role family (medical vs. everything else) and on years of experience.
"""

from typing import List, Optional, Tuple

from recruit_screen_ai.schemas.candidate_profile import CandidateProfile
from recruit_screen_ai.schemas.interview_prep import InterviewQuestion, SalaryGuidance
from recruit_screen_ai.schemas.job_qualifications import JobQualifications
from recruit_screen_ai.utils.logger import get_logger

logger = get_logger(__name__)

MEDICAL_TITLE_KEYWORDS = ("surgeon", "doctor", "physician", "medical", "neurosurgeon")

SENIOR_CLINICIAN_YEARS = 7
TOP_SKILL_COUNT = 3
DEFAULT_QUESTION_LOCATION = "your location"
DEFAULT_SALARY_LOCATION = "Denver"
DEFAULT_SALARY_YEARS = 7
LEADERSHIP_REFERENCE = "Leadership badge"

# (minimum years, market range, candidate expectation, offer); first band whose minimum is met wins
SalaryBand = Tuple[int, str, str, str]
MEDICAL_SALARY_BANDS: List[SalaryBand] = [
    (10, "625K - 750K", "675K - 700K", "$685K + productivity bonus"),
    (7, "500K - 650K", "550K - 600K", "$575K + bonus"),
    (0, "400K - 550K", "450K - 500K", "$475K + bonus"),
]
GENERAL_SALARY_BANDS: List[SalaryBand] = [
    (7, "85K - 110K", "95K - 105K", "$98K + bonus structure"),
    (5, "75K - 95K", "85K - 95K", "$90K + bonus"),
    (0, "65K - 85K", "75K - 85K", "$80K + bonus"),
]


def is_medical_role(job_title: str) -> bool:
    """True when the job title names a clinical role (surgeon, doctor, physician, medical)."""
    title_lower = (job_title or "").lower()
    return any(keyword in title_lower for keyword in MEDICAL_TITLE_KEYWORDS)


def _medical_questions(
    years: int, location: str, top_skills: List[str], certifications: List[str]
) -> List[InterviewQuestion]:
    senior = years >= SENIOR_CLINICIAN_YEARS
    lead_skill = top_skills[0] if top_skills else "surgical"
    questions = [
        InterviewQuestion(
            question=(
                f"I see you have {years} years of experience"
                f"{' including residency and fellowship' if senior else ''}. "
                f"Can you walk me through the most complex {lead_skill} case you handled"
                f"{' during your fellowship' if senior else ' in your career'}?"
            ),
            references=[f"{years} years experience"],
        )
    ]
    if top_skills:
        questions.append(
            InterviewQuestion(
                question=(
                    f"Your profile mentions expertise in {top_skills[0]}. How have you implemented these "
                    f"approaches in your {location} practice, and what outcomes have you seen?"
                ),
                references=[f"{top_skills[0]} + {location} location"],
            )
        )
    if certifications:
        procedure = top_skills[1] if len(top_skills) > 1 else "surgical procedure"
        questions.append(
            InterviewQuestion(
                question=(
                    f"You're {certifications[0].lower()}. Tell me about a time when you had to make a "
                    f"split-second decision during a {procedure} that wasn't covered in standard protocols."
                ),
                references=[certifications[0]],
            )
        )
    if len(top_skills) >= 2:
        questions.append(
            InterviewQuestion(
                question=(
                    f"I noticed you have experience with {top_skills[0]} and {top_skills[1]}. "
                    "How do you approach cases where these specialties intersect?"
                ),
                references=[f"{top_skills[0]} + {top_skills[1]} skills"],
            )
        )
    questions.append(
        InterviewQuestion(
            question=(
                "Your background shows leadership experience. Can you describe how you've mentored "
                "junior surgeons or residents in your current practice?"
            ),
            references=[LEADERSHIP_REFERENCE],
        )
    )
    return questions


def _general_questions(
    years: int, title: str, location: str, top_skills: List[str], certifications: List[str]
) -> List[InterviewQuestion]:
    lead_skill = top_skills[0] if top_skills else "month-end close"
    questions = [
        InterviewQuestion(
            question=(
                f"I see you have {years} years of experience in {title or 'accounting'}. "
                f"Can you walk me through your most complex {lead_skill} process?"
            ),
            references=[f"{years} years experience"],
        )
    ]
    if top_skills:
        questions.append(
            InterviewQuestion(
                question=(
                    f"Your profile mentions expertise with {top_skills[0]}. How have you used this in your "
                    f"{location} role, and what improvements have you made?"
                ),
                references=[f"{top_skills[0]} + {location} location"],
            )
        )
    if certifications:
        questions.append(
            InterviewQuestion(
                question=(
                    f"You're {certifications[0]}. Tell me about a time when you had to make a critical "
                    "accounting decision that required deep technical knowledge."
                ),
                references=[certifications[0]],
            )
        )
    if len(top_skills) >= 2:
        questions.append(
            InterviewQuestion(
                question=(
                    f"I noticed you have experience with {top_skills[0]} and {top_skills[1]}. "
                    "How do these systems work together in your workflow?"
                ),
                references=[f"{top_skills[0]} + {top_skills[1]} skills"],
            )
        )
    questions.append(
        InterviewQuestion(
            question=(
                "Your background shows leadership experience. Can you describe how you've managed "
                "accounting teams or mentored junior accountants?"
            ),
            references=[LEADERSHIP_REFERENCE],
        )
    )
    return questions


def generate_interview_questions(
    profile: Optional[CandidateProfile], job: JobQualifications
) -> List[InterviewQuestion]:
    """
    Questions tailored to the candidate: years of experience, top three skills, location
    and the job's first required certification. Medical roles get clinical phrasing.
    Empty when there is no candidate yet.
    """
    if profile is None:
        return []
    years = profile.years_of_experience
    location = profile.location or DEFAULT_QUESTION_LOCATION
    top_skills = list(profile.skills[:TOP_SKILL_COUNT])
    certifications = list(job.required_certifications)

    if is_medical_role(job.title):
        questions = _medical_questions(years, location, top_skills, certifications)
    else:
        questions = _general_questions(years, profile.title, location, top_skills, certifications)
    logger.debug("Prepared %s interview questions for %s (%s)", len(questions), profile.name, job.title)
    return questions


def _band_for(bands: List[SalaryBand], years: int) -> SalaryBand:
    for band in bands:
        if years >= band[0]:
            return band
    return bands[-1]


def salary_guidance(profile: Optional[CandidateProfile], job: JobQualifications) -> SalaryGuidance:
    """Salary bands by role family and experience; 7 years in Denver when there is no candidate."""
    years = profile.years_of_experience if profile is not None else DEFAULT_SALARY_YEARS
    location = (profile.location if profile is not None else None) or DEFAULT_SALARY_LOCATION

    if is_medical_role(job.title):
        _, market, expectation, offer = _band_for(MEDICAL_SALARY_BANDS, years)
        return SalaryGuidance(
            market_range=f"${market} base",
            candidate_expectation=f"${expectation}",
            recommendation=offer,
            note=f"{location} cost of living is 15% below coastal markets - competitive advantage",
        )

    _, market, expectation, offer = _band_for(GENERAL_SALARY_BANDS, years)
    return SalaryGuidance(
        market_range=f"${market}",
        candidate_expectation=f"${expectation}",
        recommendation=offer,
        note=f"Based on {location} market + {years} years experience",
    )
