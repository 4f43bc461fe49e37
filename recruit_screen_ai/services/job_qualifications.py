"""Job qualification generator: free-text job title -> JobQualifications via an ordered rule table."""

import copy
import re
from typing import Any, Dict, List, Tuple

from recruit_screen_ai.config import DEFAULT_JOB_TITLE
from recruit_screen_ai.schemas.job_qualifications import JobQualifications
from recruit_screen_ai.utils.logger import get_logger

logger = get_logger(__name__)

# (pattern, requirements template). Evaluated top to bottom; the first match wins, so a
# title matching several families resolves to the earliest entry. The last entry matches
# any non-empty string.
QualificationRule = Tuple[re.Pattern, Dict[str, Any]]

JOB_QUALIFICATION_RULES: List[QualificationRule] = [
    (
        re.compile(r"accountant|accounting|cpa|finance|financial analyst|controller", re.IGNORECASE),
        {
            "required_degree": "Bachelor's in Accounting, Finance, or related field",
            "required_experience": "5+ years",
            "required_certifications": ["CPA"],
            "preferred_skills": ["NetSuite", "QuickBooks", "Excel", "Month-End Close", "Financial Reporting"],
            "required_skills": ["GAAP", "Financial Statements", "Reconciliation"],
            "description": "We're looking for an experienced accounting professional to join our finance team.",
        },
    ),
    (
        re.compile(
            r"software engineer|developer|programmer|software developer|full.?stack|backend|frontend",
            re.IGNORECASE,
        ),
        {
            "required_degree": "Bachelor's in Computer Science, Software Engineering, or related field",
            "required_experience": "3+ years",
            "required_certifications": [],
            "preferred_skills": ["JavaScript", "TypeScript", "React", "Node.js", "Python", "AWS"],
            "required_skills": ["Software Development", "Version Control", "Problem Solving"],
            "description": "We're looking for an experienced software engineer to join our development team.",
        },
    ),
    (
        re.compile(r"data scientist|data analyst|machine learning|ml engineer|data engineer", re.IGNORECASE),
        {
            "required_degree": "Bachelor's in Data Science, Statistics, Computer Science, or related field",
            "required_experience": "3+ years",
            "required_certifications": [],
            "preferred_skills": ["Python", "SQL", "Machine Learning", "TensorFlow", "Pandas", "Data Visualization"],
            "required_skills": ["Data Analysis", "Statistical Modeling", "SQL"],
            "description": "We're looking for an experienced data professional to join our analytics team.",
        },
    ),
    (
        re.compile(r"product manager|product owner|pm|product lead", re.IGNORECASE),
        {
            "required_degree": "Bachelor's degree (MBA preferred)",
            "required_experience": "5+ years",
            "required_certifications": [],
            "preferred_skills": ["Product Strategy", "Agile", "Scrum", "User Research", "Data Analysis", "Roadmapping"],
            "required_skills": ["Product Management", "Stakeholder Management", "Strategic Thinking"],
            "description": "We're looking for an experienced product manager to lead our product initiatives.",
        },
    ),
    (
        re.compile(r"marketing|marketer|marketing manager|digital marketing|content marketing", re.IGNORECASE),
        {
            "required_degree": "Bachelor's in Marketing, Communications, or related field",
            "required_experience": "3+ years",
            "required_certifications": [],
            "preferred_skills": ["SEO", "Content Marketing", "Social Media", "Analytics", "Campaign Management"],
            "required_skills": ["Marketing Strategy", "Content Creation", "Analytics"],
            "description": "We're looking for an experienced marketing professional to join our marketing team.",
        },
    ),
    (
        re.compile(r"sales|account executive|business development|bd|sales manager", re.IGNORECASE),
        {
            "required_degree": "Bachelor's degree",
            "required_experience": "3+ years",
            "required_certifications": [],
            "preferred_skills": ["CRM", "Negotiation", "Relationship Building", "Pipeline Management"],
            "required_skills": ["Sales", "Communication", "Customer Relationship Management"],
            "description": "We're looking for an experienced sales professional to join our sales team.",
        },
    ),
    (
        re.compile(r"hr|human resources|recruiter|talent acquisition|people ops", re.IGNORECASE),
        {
            "required_degree": "Bachelor's in Human Resources, Business, or related field",
            "required_experience": "3+ years",
            "required_certifications": ["SHRM-CP", "PHR"],
            "preferred_skills": ["ATS", "Recruiting", "Employee Relations", "Talent Management"],
            "required_skills": ["HR Management", "Recruiting", "Compliance"],
            "description": "We're looking for an experienced HR professional to join our people team.",
        },
    ),
    (
        re.compile(r"designer|ux|ui|user experience|product designer|graphic designer", re.IGNORECASE),
        {
            "required_degree": "Bachelor's in Design, HCI, or related field",
            "required_experience": "3+ years",
            "required_certifications": [],
            "preferred_skills": ["Figma", "Sketch", "Adobe Creative Suite", "User Research", "Prototyping"],
            "required_skills": ["Design", "User Experience", "Prototyping"],
            "description": "We're looking for an experienced designer to join our design team.",
        },
    ),
    (
        re.compile(r"operations|ops|operations manager|operations analyst", re.IGNORECASE),
        {
            "required_degree": "Bachelor's in Business, Operations, or related field",
            "required_experience": "3+ years",
            "required_certifications": [],
            "preferred_skills": ["Process Improvement", "Project Management", "Analytics", "Supply Chain"],
            "required_skills": ["Operations Management", "Process Optimization", "Analytics"],
            "description": "We're looking for an experienced operations professional to join our operations team.",
        },
    ),
    (
        re.compile(r"neurosurgeon|neurosurgery|neuro.?surgeon", re.IGNORECASE),
        {
            "required_degree": "MD (Doctor of Medicine) from accredited medical school",
            "required_experience": "7+ years (including residency and fellowship)",
            "required_certifications": ["Board Certified in Neurological Surgery", "State Medical License"],
            "preferred_skills": [
                "Spinal Surgery",
                "Brain Surgery",
                "Minimally Invasive Techniques",
                "Stereotactic Surgery",
                "Neuro-oncology",
            ],
            "required_skills": ["Neurosurgery", "Surgical Skills", "Patient Care", "Medical Diagnosis"],
            "description": "We're looking for a board-certified neurosurgeon to join our neurosurgery department.",
        },
    ),
    # Catch-all
    (
        re.compile(r"."),
        {
            "required_degree": "Bachelor's degree",
            "required_experience": "3+ years",
            "required_certifications": [],
            "preferred_skills": ["Communication", "Problem Solving", "Team Collaboration"],
            "required_skills": ["Professional Experience", "Communication"],
            "description": "We're looking for an experienced professional to join our team.",
        },
    ),
]


def _build(title: str, template: Dict[str, Any]) -> JobQualifications:
    """Bind a template to a title. Lists are copied so callers never share table state."""
    return JobQualifications(title=title, **copy.deepcopy(template))


def generate_qualifications(job_title: str) -> JobQualifications:
    """
    Generate job requirements from a free-text title.
    Blank input returns the first rule's template titled DEFAULT_JOB_TITLE.
    Otherwise the first rule whose pattern matches the trimmed title wins.
    """
    title = (job_title or "").strip()
    if not title:
        return _build(DEFAULT_JOB_TITLE, JOB_QUALIFICATION_RULES[0][1])

    for index, (pattern, template) in enumerate(JOB_QUALIFICATION_RULES):
        if pattern.search(title):
            logger.debug("Job title %r matched rule %s (%s)", title, index, pattern.pattern)
            return _build(title, template)

    # Unreachable for non-empty titles; the catch-all matches any character.
    return _build(title, JOB_QUALIFICATION_RULES[-1][1])
