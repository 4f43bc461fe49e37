"""
Recruiting Screen – Streamlit frontend.
No business logic in layout; extraction, requirements and scoring live in the pipeline modules.
"""

from typing import Any, MutableMapping, Optional

import streamlit as st

from recruit_screen_ai.config import DEFAULT_JOB_TITLE, SUPPORTED_UPLOAD_TYPES
from recruit_screen_ai.cv_pipeline import run_cv_pipeline
from recruit_screen_ai.ranking import score_candidate
from recruit_screen_ai.samples import SAMPLE_CANDIDATE
from recruit_screen_ai.schemas.candidate_profile import CandidateProfile
from recruit_screen_ai.schemas.job_qualifications import JobQualifications
from recruit_screen_ai.schemas.qualification_result import QualificationResult
from recruit_screen_ai.services import generate_interview_questions, generate_qualifications, salary_guidance
from recruit_screen_ai.utils.logger import get_logger

logger = get_logger(__name__)


def _init_state() -> None:
    if "job_qualifications" not in st.session_state:
        st.session_state["job_qualifications"] = generate_qualifications(DEFAULT_JOB_TITLE)
    for key in ("profile", "profile_source", "processed_upload_id", "error"):
        if key not in st.session_state:
            st.session_state[key] = None


def handle_upload(state: MutableMapping[str, Any], uploaded: Any) -> None:
    """
    Parse an uploaded résumé into state["profile"] once per upload.
    Uploads are keyed by file_id, so a re-upload under the same name is parsed again
    and a kept upload never replaces a profile chosen afterwards.
    """
    if uploaded is None or uploaded.file_id == state.get("processed_upload_id"):
        return
    state["processed_upload_id"] = uploaded.file_id
    try:
        state["profile"] = run_cv_pipeline(uploaded.getvalue(), uploaded.name, uploaded.type)
        state["profile_source"] = uploaded.name
        state["error"] = None
    except Exception as e:
        logger.exception("Résumé processing failed: %s", e)
        state["error"] = f"Résumé processing failed: {str(e)}"
        state["profile"] = None
        state["profile_source"] = None


def use_sample_candidate(state: MutableMapping[str, Any]) -> None:
    """Show the sample candidate until the next upload; the processed upload id is kept."""
    state["profile"] = SAMPLE_CANDIDATE
    state["profile_source"] = None
    state["error"] = None


def _render_requirements(job: JobQualifications) -> None:
    with st.expander(f"Requirements for {job.title}", expanded=False):
        st.markdown(f"*{job.description}*")
        if job.required_degree:
            st.markdown(f"**Degree:** {job.required_degree}")
        st.markdown(f"**Experience:** {job.required_experience}")
        if job.required_certifications:
            st.markdown(f"**Certifications:** {', '.join(job.required_certifications)}")
        st.markdown("**Required skills:** " + " ".join(f"`{s}`" for s in job.required_skills))
        if job.preferred_skills:
            st.markdown("**Preferred skills:** " + " ".join(f"`{s}`" for s in job.preferred_skills))


def _render_profile(profile: CandidateProfile, file_name: Optional[str]) -> None:
    st.subheader("Candidate")
    if file_name:
        st.caption(f"Parsed from **{file_name}**")
    col_a, col_b = st.columns([2, 1])
    with col_a:
        st.markdown(f"### {profile.name}")
        st.caption(f"{profile.title} · {profile.experience_summary}")
        st.markdown(" ".join(f"`{s}`" for s in profile.skills))
    with col_b:
        st.caption(f"**Email:** {profile.email or '—'}")
        st.caption(f"**Phone:** {profile.phone or '—'}")
        st.caption(f"**Location:** {profile.location or '—'}")


def _render_result(result: QualificationResult) -> None:
    st.subheader("Screening Result")
    col1, col2, col3 = st.columns(3)
    col1.metric("Score", f"{result.score}/100")
    col2.metric("Qualified", "Yes" if result.is_qualified else "No")
    col3.metric("Talent Pool", result.talent_pool)
    if result.is_qualified:
        st.success(result.recommendation)
    else:
        st.warning(result.recommendation)

    st.markdown("**Score breakdown**")
    for entry in result.score_breakdown:
        st.markdown(f"- **{entry.category}:** {entry.points}/{entry.max_points}")
        for detail in entry.details:
            st.caption(detail)

    scol, wcol = st.columns(2)
    with scol:
        st.markdown("**Strengths**")
        for s in result.strengths:
            st.markdown(f"- {s}")
    with wcol:
        st.markdown("**Weaknesses**")
        if not result.weaknesses:
            st.caption("None found")
        for w in result.weaknesses:
            st.markdown(f"- {w}")


def _render_interview_prep(profile: CandidateProfile, job: JobQualifications) -> None:
    with st.expander("Interview questions", expanded=False):
        for i, q in enumerate(generate_interview_questions(profile, job), 1):
            st.markdown(f"**{i}.** {q.question}")
            st.caption("References: " + ", ".join(q.references))
    guidance = salary_guidance(profile, job)
    with st.expander("Salary guidance", expanded=False):
        col1, col2, col3 = st.columns(3)
        col1.metric("Market range", guidance.market_range)
        col2.metric("Candidate expectation", guidance.candidate_expectation)
        col3.metric("Recommended offer", guidance.recommendation)
        st.caption(guidance.note)


def render_layout() -> None:
    """Streamlit page layout; state in st.session_state, logic in the pipeline modules."""
    st.set_page_config(page_title="AI Recruiting Screen", layout="wide")
    st.title("AI Recruiting Screen")
    st.markdown("*Upload a résumé and see how it scores against the role you are hiring for.*")
    st.divider()
    _init_state()

    # ----- Job title: requirements regenerate only for non-blank input -----
    job_title = st.text_input(
        "What position are you looking to fill?",
        value=DEFAULT_JOB_TITLE,
        placeholder="e.g., Senior Accountant, Software Engineer, Product Manager",
        key="job_title",
    )
    if job_title and job_title.strip():
        st.session_state["job_qualifications"] = generate_qualifications(job_title)
    job: JobQualifications = st.session_state["job_qualifications"]
    _render_requirements(job)

    # ----- Candidate input -----
    col_up, col_sample = st.columns([3, 1])
    with col_up:
        uploaded = st.file_uploader("Upload résumé", type=SUPPORTED_UPLOAD_TYPES, key="resume_upload")
    with col_sample:
        sample_clicked = st.button("Use sample candidate", key="sample_btn")

    if uploaded is not None and uploaded.file_id != st.session_state["processed_upload_id"]:
        with st.spinner("Extracting résumé…"):
            handle_upload(st.session_state, uploaded)
    if sample_clicked:
        use_sample_candidate(st.session_state)

    if st.session_state.get("error"):
        st.error(st.session_state["error"])

    profile: Optional[CandidateProfile] = st.session_state.get("profile")
    st.divider()
    if profile is None:
        st.info("Upload a résumé (PDF, Word or text) or click **Use sample candidate** to run the screen.")
        return

    _render_profile(profile, st.session_state.get("profile_source"))
    _render_result(score_candidate(profile, job))
    _render_interview_prep(profile, job)


if __name__ == "__main__":
    render_layout()
